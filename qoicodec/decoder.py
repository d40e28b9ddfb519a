import logging

from .errors import (
    ImageTooLargeError,
    InvalidChannelsError,
    InvalidColorSpaceError,
    InvalidDimensionsError,
    InvalidMagicError,
    InvalidPaddingError,
)
from .image import QOIColorModel, QOIColorSpace, QOIImage
from .qoi import (
    EMPTY,
    QOI_MAGIC,
    QOI_MASK_2,
    QOI_OP_DIFF,
    QOI_OP_INDEX,
    QOI_OP_LUMA,
    QOI_OP_RGB,
    QOI_OP_RGBA,
    QOI_PADDING,
    color_hash,
    is_too_large,
)
from .stream import ByteReader, Source

logger = logging.getLogger(__name__)


def _read_header(reader: ByteReader):
    if reader.read_bytes(4) != QOI_MAGIC:
        raise InvalidMagicError("QOI.decode: The signature of the QOI file is invalid")

    width = reader.read_u32()
    if width <= 0:
        raise InvalidDimensionsError("QOI.decode: Width must be a positive value")

    height = reader.read_u32()
    if height <= 0:
        raise InvalidDimensionsError("QOI.decode: Height must be a positive value")

    if is_too_large(width, height):
        raise ImageTooLargeError(
            f"QOI.decode: Image too large ({width}x{height}), at most 400 million pixels are supported"
        )

    channels = reader.read_u8()
    if channels not in (3, 4):
        raise InvalidChannelsError(
            f"QOI.decode: The number of channels declared in the file is invalid ({channels}, expected 3 or 4)"
        )

    colorspace = reader.read_u8()
    if colorspace > 1:
        raise InvalidColorSpaceError(
            f"QOI.decode: The colorspace declared in the file is invalid ({colorspace}, expected 0 or 1)"
        )

    return width, height, QOIColorModel(channels), QOIColorSpace(colorspace)


class QOIDecoder:
    """
    Decodes QOI (Quite OK Image) files into QOIImage objects.
    """

    @staticmethod
    def read(source: Source) -> QOIImage:
        """
        Decode a QOI file from a binary file object or bytes-like value.

        The source must hold exactly one QOI file: the end marker has to be
        followed by the end of the data.

        :param source: Readable binary stream, bytes, bytearray or memoryview.
        :return: The decoded QOIImage.
        :raises QOIFormatError: If the data is not a valid QOI file.
        """
        reader = ByteReader(source)
        width, height, color_model, color_space = _read_header(reader)
        logger.debug(
            "header: %dx%d %s %s", width, height, color_model.name, color_space.name
        )

        channels = color_model.channels
        pixel_length = width * height * channels
        result = bytearray(pixel_length)

        # Index array: 64 pixels, initialized to (0, 0, 0, 0)
        index = [EMPTY] * 64

        # Initial pixel state (R, G, B, A)
        r, g, b, a = 0, 0, 0, 255
        run = 0

        for pos in range(0, pixel_length, channels):
            # Repeat the previous pixel without consuming input
            if run > 0:
                run -= 1
            else:
                b1 = reader.read_u8()

                if b1 == QOI_OP_RGB:
                    r, g, b = reader.read_bytes(3)

                elif b1 == QOI_OP_RGBA:
                    r, g, b, a = reader.read_bytes(4)

                elif (b1 & QOI_MASK_2) == QOI_OP_INDEX:
                    r, g, b, a = index[b1]

                elif (b1 & QOI_MASK_2) == QOI_OP_DIFF:
                    r = (r + ((b1 >> 4) & 0x03) - 2) & 0xFF
                    g = (g + ((b1 >> 2) & 0x03) - 2) & 0xFF
                    b = (b + (b1 & 0x03) - 2) & 0xFF

                elif (b1 & QOI_MASK_2) == QOI_OP_LUMA:
                    b2 = reader.read_u8()
                    dg = (b1 & 0x3F) - 32
                    r = (r + dg - 8 + ((b2 >> 4) & 0x0F)) & 0xFF
                    g = (g + dg) & 0xFF
                    b = (b + dg - 8 + (b2 & 0x0F)) & 0xFF

                # QOI_OP_RUN: this pixel plus `run` more repeat the previous one
                else:
                    run = b1 & 0x3F

                index[color_hash(r, g, b, a)] = (r, g, b, a)

            result[pos] = r
            result[pos + 1] = g
            result[pos + 2] = b
            if channels == 4:
                result[pos + 3] = a

        padding = reader.read_bytes(len(QOI_PADDING))
        if padding != QOI_PADDING or not reader.exhausted():
            raise InvalidPaddingError("QOI.decode: Invalid padding at the end of the file")

        return QOIImage(bytes(result), width, height, color_model, color_space)

    @staticmethod
    def decode(file_data, byte_offset: int = 0, byte_length: int = None) -> QOIImage:
        """
        Decode a QOI file held in memory.

        :param file_data: Bytes containing the QOI file.
        :param byte_offset: Offset to the start of the QOI file in file_data.
        :param byte_length: Length of the QOI file in bytes, defaults to the rest of file_data.
        :return: The decoded QOIImage.
        """
        if byte_length is None:
            byte_length = len(file_data) - byte_offset

        # memoryview keeps large inputs from being copied by the slice
        data = memoryview(file_data)[byte_offset : byte_offset + byte_length]
        return QOIDecoder.read(data)
