from .decoder import QOIDecoder
from .encoder import QOIEncoder
from .errors import (
    ImageTooLargeError,
    InvalidChannelsError,
    InvalidColorSpaceError,
    InvalidDimensionsError,
    InvalidMagicError,
    InvalidPaddingError,
    QOIError,
    QOIFormatError,
    QOIImageError,
    TruncatedStreamError,
)
from .files import QOIReader, QOIWriter
from .image import QOIColorModel, QOIColorSpace, QOIImage
from .utils import load_image, png_to_qoi, qoi_to_png


def encode(image: QOIImage) -> bytes:
    return QOIEncoder.encode(image)


def decode(data) -> QOIImage:
    return QOIDecoder.decode(data)


__all__ = [
    "QOIEncoder",
    "QOIDecoder",
    "QOIReader",
    "QOIWriter",
    "QOIImage",
    "QOIColorModel",
    "QOIColorSpace",
    "QOIError",
    "QOIImageError",
    "QOIFormatError",
    "InvalidMagicError",
    "InvalidDimensionsError",
    "ImageTooLargeError",
    "InvalidChannelsError",
    "InvalidColorSpaceError",
    "InvalidPaddingError",
    "TruncatedStreamError",
    "encode",
    "decode",
    "load_image",
    "png_to_qoi",
    "qoi_to_png",
]
