import numpy as np
from PIL import Image

from .decoder import QOIDecoder
from .encoder import QOIEncoder
from .image import QOIImage

RAW_EXTENSIONS = ("dng", "cr2", "nef", "arw", "raw")


def load_image(filepath: str) -> tuple[np.ndarray, dict]:
    """Load an image and return pixel data as numpy array + description."""

    ext = filepath.lower().split(".")[-1]

    if ext in RAW_EXTENSIONS:
        # RAW formats - requires rawpy
        import rawpy

        with rawpy.imread(filepath) as raw:
            rgb = raw.postprocess()
        img = Image.fromarray(rgb)
    elif ext == "qoi":
        with open(filepath, "rb") as f:
            image = QOIDecoder.read(f)
        return image.to_array(), image.description
    else:
        # Standard formats (PNG, JPEG, etc.)
        img = Image.open(filepath)

    # Convert to RGB or RGBA
    if img.mode == "RGBA":
        channels = 4
    else:
        img = img.convert("RGB")
        channels = 3

    return np.array(img), {
        "width": img.size[0],
        "height": img.size[1],
        "channels": channels,
        "colorspace": 0,
    }


def png_to_qoi(png_path, qoi_path) -> int:
    pixel_data, _ = load_image(str(png_path))
    encoded = QOIEncoder.encode(QOIImage.from_array(pixel_data))

    with open(qoi_path, "wb") as f:
        return f.write(encoded)


def qoi_to_png(qoi_path, png_path) -> None:
    with open(qoi_path, "rb") as f:
        decoded = QOIDecoder.read(f)

    mode = "RGBA" if decoded.channels == 4 else "RGB"
    img = Image.frombytes(mode, (decoded.width, decoded.height), decoded.colors)
    img.save(png_path)
