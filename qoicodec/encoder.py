import io
import logging
from typing import IO

from .errors import ImageTooLargeError
from .image import QOIImage
from .qoi import (
    BLACK,
    EMPTY,
    QOI_MAGIC,
    QOI_OP_DIFF,
    QOI_OP_INDEX,
    QOI_OP_LUMA,
    QOI_OP_RGB,
    QOI_OP_RGBA,
    QOI_OP_RUN,
    QOI_PADDING,
    QOI_RUN_MAX,
    color_hash,
    is_too_large,
)
from .stream import ByteWriter

logger = logging.getLogger(__name__)


def _signed_byte(value: int) -> int:
    """Wrap a channel difference to the signed 8-bit range -128..127."""
    value &= 0xFF
    return value - 256 if value > 127 else value


class QOIEncoder:
    @staticmethod
    def write(image: QOIImage, sink: IO[bytes]) -> int:
        """
        Encode `image` and write the QOI file to a binary stream.

        The stream is neither closed nor rewound.

        :param image: QOIImage to encode.
        :param sink: Writable binary stream.
        :return: Number of bytes written.
        :raises ImageTooLargeError: If the image has 400 million pixels or more.
        """
        width = image.width
        height = image.height
        channels = image.channels

        if is_too_large(width, height):
            raise ImageTooLargeError(
                f"QOI.encode: Image too large ({width}x{height}), at most 400 million pixels are supported"
            )

        out = ByteWriter(sink)

        # Header: magic(4), width(4), height(4), channels(1), colorspace(1)
        out.write_bytes(QOI_MAGIC)
        out.write_u32(width)
        out.write_u32(height)
        out.write_u8(channels)
        out.write_u8(image.color_space)

        # Encoding state
        index = [EMPTY] * 64
        prev = BLACK
        run = 0

        pixel_length = len(image.colors)
        last_pixel = pixel_length - channels

        for i in range(0, pixel_length, channels):
            px = image.get_color(i)

            if px == prev:
                run += 1
                # Flush on max run length or at the very last pixel
                if run == QOI_RUN_MAX or i == last_pixel:
                    out.write_u8(QOI_OP_RUN | (run - 1))
                    run = 0
            else:
                # End a pending run before processing the new pixel
                if run > 0:
                    out.write_u8(QOI_OP_RUN | (run - 1))
                    run = 0

                index_pos = color_hash(*px)

                if index[index_pos] == px:
                    out.write_u8(QOI_OP_INDEX | index_pos)
                else:
                    index[index_pos] = px

                    if px.a == prev.a:
                        vr = _signed_byte(px.r - prev.r)
                        vg = _signed_byte(px.g - prev.g)
                        vb = _signed_byte(px.b - prev.b)

                        vg_r = _signed_byte(vr - vg)
                        vg_b = _signed_byte(vb - vg)

                        if -3 < vr < 2 and -3 < vg < 2 and -3 < vb < 2:
                            out.write_u8(
                                QOI_OP_DIFF
                                | (((vr + 2) << 4) & 0xFF)
                                | (((vg + 2) << 2) & 0xFF)
                                | ((vb + 2) & 0xFF)
                            )
                        elif -9 < vg_r < 8 and -33 < vg < 32 and -9 < vg_b < 8:
                            out.write_u8(QOI_OP_LUMA | ((vg + 32) & 0xFF))
                            out.write_u8((((vg_r + 8) << 4) & 0xFF) | ((vg_b + 8) & 0xFF))
                        else:
                            out.write_u8(QOI_OP_RGB)
                            out.write_bytes(px[:3])
                    else:
                        out.write_u8(QOI_OP_RGBA)
                        out.write_bytes(px)

            prev = px

        out.write_bytes(QOI_PADDING)

        logger.debug("encoded %dx%d image into %d bytes", width, height, len(out))
        return out.flush()

    @staticmethod
    def encode(image: QOIImage) -> bytes:
        """
        Encode a QOI file in memory.

        :param image: QOIImage to encode.
        :return: bytes object containing the QOI file content.
        """
        buffer = io.BytesIO()
        QOIEncoder.write(image, buffer)
        return buffer.getvalue()
