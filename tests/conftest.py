import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def _gradient(width, height, channels):
    """Smooth image with a few hard edges, exercises every opcode."""
    y, x = np.mgrid[0:height, 0:width]
    img = np.zeros((height, width, channels), dtype=np.uint8)
    img[..., 0] = (x * 3) % 256
    img[..., 1] = (y * 5 + x) % 256
    img[..., 2] = ((x // 7) * 40) % 256
    if channels == 4:
        img[..., 3] = np.where((x // 5) % 3 == 0, 255, 128)
    img[:, width // 2 :] = img[:, width // 2 : width // 2 + 1]
    return img


@pytest.fixture
def gradient():
    return _gradient
