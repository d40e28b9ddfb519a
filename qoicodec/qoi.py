from collections import namedtuple

# Chunk tags
QOI_OP_INDEX = 0x00  # 00xxxxxx
QOI_OP_DIFF = 0x40  # 01xxxxxx
QOI_OP_LUMA = 0x80  # 10xxxxxx
QOI_OP_RUN = 0xC0  # 11xxxxxx
QOI_OP_RGB = 0xFE  # 11111110
QOI_OP_RGBA = 0xFF  # 11111111

QOI_MASK_2 = 0xC0  # 11000000

QOI_MAGIC = b"qoif"
QOI_HEADER_SIZE = 14

# Worst case is 5 bytes per pixel, so this keeps files under 2 GB.
QOI_PIXELS_MAX = 400_000_000

# 7 bytes 0x00 followed by 1 byte 0x01
QOI_PADDING = b"\x00\x00\x00\x00\x00\x00\x00\x01"

QOI_RUN_MAX = 62

Color = namedtuple("Color", ["r", "g", "b", "a"])

BLACK = Color(0, 0, 0, 255)
EMPTY = Color(0, 0, 0, 0)


def color_hash(r: int, g: int, b: int, a: int) -> int:
    """Calculates the index position for the color array."""
    return (r * 3 + g * 5 + b * 7 + a * 11) % 64


def is_too_large(width: int, height: int) -> bool:
    return height >= QOI_PIXELS_MAX // width
