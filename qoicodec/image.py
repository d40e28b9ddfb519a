import enum
from dataclasses import dataclass, field

import numpy as np

from .errors import QOIImageError
from .qoi import Color


class QOIColorModel(enum.IntEnum):
    RGB = 3
    RGBA = 4

    @property
    def channels(self) -> int:
        return int(self)


class QOIColorSpace(enum.IntEnum):
    """Informative only, pixel values are never converted based on it."""

    SRGB = 0  # sRGB with linear alpha
    LINEAR = 1  # all channels linear


def _to_bytes(colors) -> bytes:
    if isinstance(colors, np.ndarray):
        if not np.issubdtype(colors.dtype, np.integer):
            raise QOIImageError(f"QOIImage: Colors must hold integers, got {colors.dtype}")
        flat = colors.reshape(-1)
        if flat.size and (flat.min() < 0 or flat.max() > 255):
            raise QOIImageError("QOIImage: Color values must be in range 0..255")
        return flat.astype(np.uint8).tobytes()
    # bytes(n) would silently build n zero bytes
    if isinstance(colors, str) or not hasattr(colors, "__len__"):
        raise QOIImageError(
            f"QOIImage: Colors must be a sequence of ints, got {type(colors).__name__}"
        )
    try:
        return bytes(colors)
    except (TypeError, ValueError) as e:
        raise QOIImageError(f"QOIImage: Invalid colors ({e})") from e


@dataclass(frozen=True)
class QOIImage:
    """
    An immutable QOI image.

    :param colors: Raw pixel channel values stored as RGB or RGBA, row by row.
                   Its length must be width * height * color_model.channels.
    :param width: Image width, a positive integer.
    :param height: Image height, a positive integer.
    :param color_model: QOIColorModel (or 3 / 4).
    :param color_space: QOIColorSpace (or 0 / 1).
    :raises QOIImageError: If the arguments don't describe a valid image.
    """

    colors: bytes = field(repr=False)
    width: int
    height: int
    color_model: QOIColorModel = QOIColorModel.RGBA
    color_space: QOIColorSpace = QOIColorSpace.SRGB

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise QOIImageError(f"QOIImage: {name.capitalize()} must be an integer")
            if value <= 0:
                raise QOIImageError(f"QOIImage: {name.capitalize()} must be a positive value")

        try:
            color_model = QOIColorModel(self.color_model)
        except ValueError as e:
            raise QOIImageError("QOIImage: Invalid color model, must be 3 or 4") from e
        try:
            color_space = QOIColorSpace(self.color_space)
        except ValueError as e:
            raise QOIImageError("QOIImage: Invalid color space, must be 0 or 1") from e

        colors = _to_bytes(self.colors)
        if len(colors) != self.width * self.height * color_model.channels:
            raise QOIImageError(
                "QOIImage: The length of colors must be equal to "
                "width * height * color_model.channels"
            )

        # frozen, so bypass __setattr__ for the normalized values
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))
        object.__setattr__(self, "color_model", color_model)
        object.__setattr__(self, "color_space", color_space)
        object.__setattr__(self, "colors", colors)

    @property
    def channels(self) -> int:
        return self.color_model.channels

    @property
    def description(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "channels": self.channels,
            "colorspace": int(self.color_space),
        }

    def get_color(self, offset: int) -> Color:
        """Return the pixel starting at channel offset `offset`."""
        c = self.colors
        if self.channels == 4:
            return Color(c[offset], c[offset + 1], c[offset + 2], c[offset + 3])
        return Color(c[offset], c[offset + 1], c[offset + 2], 255)

    @classmethod
    def from_array(cls, array: np.ndarray, color_space=QOIColorSpace.SRGB) -> "QOIImage":
        """Build an image from a (height, width, 3 | 4) array."""
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise QOIImageError(
                f"QOIImage: Expected an array of shape (height, width, 3 | 4), got {array.shape}"
            )
        height, width, channels = array.shape
        return cls(array, width, height, QOIColorModel(channels), color_space)

    def to_array(self) -> np.ndarray:
        return np.frombuffer(self.colors, dtype=np.uint8).reshape(
            self.height, self.width, self.channels
        )
