class QOIError(ValueError):
    """Base class for everything this package raises."""


class QOIImageError(QOIError):
    """The arguments of a QOIImage do not describe a valid image."""


class QOIFormatError(QOIError):
    """The byte stream is not a valid QOI file (or the image can't be one)."""


class InvalidMagicError(QOIFormatError):
    pass


class InvalidDimensionsError(QOIFormatError):
    pass


class ImageTooLargeError(QOIFormatError):
    pass


class InvalidChannelsError(QOIFormatError):
    pass


class InvalidColorSpaceError(QOIFormatError):
    pass


class InvalidPaddingError(QOIFormatError):
    pass


class TruncatedStreamError(QOIFormatError):
    pass
