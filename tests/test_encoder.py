import io
from types import SimpleNamespace

import numpy as np
import pytest

from qoicodec import (
    ImageTooLargeError,
    QOIColorModel,
    QOIColorSpace,
    QOIDecoder,
    QOIEncoder,
    QOIImage,
    decode,
    encode,
)
from qoicodec.qoi import QOI_HEADER_SIZE

HEADER_16X16_RGB = bytes.fromhex("716f6966 00000010 00000010 03 00")
PADDING = bytes.fromhex("0000000000000001")


def rgb_image(pixels, width=None, height=1):
    colors = [c for px in pixels for c in px]
    width = width or len(pixels)
    return QOIImage(colors, width, height, QOIColorModel.RGB, QOIColorSpace.SRGB)


def rgba_image(pixels):
    colors = [c for px in pixels for c in px]
    return QOIImage(colors, len(pixels), 1, QOIColorModel.RGBA, QOIColorSpace.SRGB)


def body(encoded):
    assert encoded.endswith(PADDING)
    return encoded[QOI_HEADER_SIZE:-8]


def test_header_and_runs_of_blank_image():
    img = QOIImage(bytes(16 * 16 * 3), 16, 16, QOIColorModel.RGB, QOIColorSpace.SRGB)
    encoded = encode(img)

    assert encoded[:QOI_HEADER_SIZE] == HEADER_16X16_RGB
    # 4 full runs of 62 plus one of 8
    assert encoded[QOI_HEADER_SIZE:] == bytes([0xFD, 0xFD, 0xFD, 0xFD, 0xC7]) + PADDING


def test_linear_color_space_in_header():
    img = QOIImage(bytes(4), 1, 1, QOIColorModel.RGBA, QOIColorSpace.LINEAR)
    encoded = encode(img)
    assert encoded[12:14] == b"\x04\x01"


def test_run_of_62_then_change():
    encoded = encode(rgb_image([(0, 0, 0)] * 62 + [(1, 0, 0)]))
    assert body(encoded) == bytes([0xC0 | 61, 0x7A])


def test_single_repeat_is_a_run_not_an_index():
    one, other = (1, 2, 3), (9, 9, 9)
    encoded = encode(rgb_image([one, one, other, one, one]))
    # the repeat of `one` is already in the index, the run still wins
    assert body(encoded) == bytes.fromhex("a279c0a79717c0")


def test_run_of_63_is_split():
    encoded = encode(rgb_image([(0, 0, 0)] * 63))
    assert body(encoded) == bytes([0xFD, 0xC0])


def test_trailing_run_is_flushed():
    encoded = encode(rgb_image([(100, 0, 200)] + [(100, 0, 200)] * 3))
    assert body(encoded) == bytes([0xFE, 100, 0, 200, 0xC2])


def test_index_preferred_over_diff():
    a, b = (10, 10, 10), (11, 10, 10)
    encoded = encode(rgb_image([a, b, a]))
    # luma for a, diff for b, then a is found in slot 11 of the index
    assert body(encoded) == bytes([0xAA, 0x88, 0x7A, 0x0B])


def test_first_transparent_pixel_hits_empty_index():
    encoded = encode(rgba_image([(0, 0, 0, 0)]))
    assert body(encoded) == b"\x00"


def test_diff_wraps_around():
    encoded = encode(rgb_image([(255, 255, 255)]))
    assert body(encoded) == bytes([0x55])


def test_luma_preferred_over_rgb():
    encoded = encode(rgb_image([(40, 30, 25)]))
    # vg = 30, vr - vg = 10 is out of range so this needs a literal
    assert body(encoded)[0] == 0xFE

    encoded = encode(rgb_image([(37, 30, 25)]))
    assert body(encoded) == bytes([0x80 | (30 + 32), ((7 + 8) << 4) | (-5 + 8)])


def test_alpha_change_always_uses_rgba():
    encoded = encode(rgba_image([(0, 0, 1, 254)]))
    assert body(encoded) == bytes([0xFF, 0, 0, 1, 254])


def test_deterministic(rng):
    pixels = rng.integers(0, 256, size=(9, 11, 4), dtype=np.uint8)
    img = QOIImage.from_array(pixels)
    assert encode(img) == encode(img)


@pytest.mark.parametrize("channels", [3, 4])
@pytest.mark.parametrize(
    "pixels",
    [
        lambda rng, gradient, c: np.zeros((7, 5, c), dtype=np.uint8),
        lambda rng, gradient, c: np.full((5, 7, c), 255, dtype=np.uint8),
        lambda rng, gradient, c: rng.integers(0, 256, size=(17, 3, c), dtype=np.uint8),
        lambda rng, gradient, c: gradient(40, 30, c),
    ],
    ids=["zeros", "max", "random", "gradient"],
)
def test_round_trip(rng, gradient, channels, pixels):
    img = QOIImage.from_array(pixels(rng, gradient, channels), QOIColorSpace.LINEAR)
    assert decode(encode(img)) == img


def test_single_pixel_round_trip():
    img = rgba_image([(1, 2, 3, 4)])
    assert decode(encode(img)) == img


def test_write_to_stream_returns_size(gradient):
    img = QOIImage.from_array(gradient(8, 8, 3))
    sink = io.BytesIO()
    size = QOIEncoder.write(img, sink)
    assert size == len(sink.getvalue())
    assert QOIDecoder.read(io.BytesIO(sink.getvalue())) == img


def test_too_large_image_writes_nothing():
    huge = SimpleNamespace(width=20000, height=20000, channels=3)
    sink = io.BytesIO()
    with pytest.raises(ImageTooLargeError):
        QOIEncoder.write(huge, sink)
    assert sink.getvalue() == b""
