#! Our QOI is pure Python while the qoi package (https://pypi.org/project/qoi/) and Pillow are C,
#! so expect the pure Python timings to be far behind.

import time

import numpy as np
from PIL import Image

import qoi as OfficialQOI
from qoicodec import QOIEncoder, QOIImage, load_image

INPUT_IMAGE = "fruits.png"
OUTPUT_QOI = "fruits.qoi"
OUTPUT_PNG = "fruits_compare.png"


def time_compare(pixel_data: np.ndarray):
    # Encode to QOI in pure Python (our implementation)
    start_time = time.time()
    encoded = QOIEncoder.encode(QOIImage.from_array(pixel_data))
    end_time = time.time()
    print(f"Encoded QOI (qoicodec) in {end_time - start_time:.2f} seconds, {len(encoded)} bytes")

    # Encode to QOI in C
    start_time = time.time()
    official = OfficialQOI.encode(pixel_data)
    end_time = time.time()
    print(f"Encoded QOI (qoi) in {end_time - start_time:.2f} seconds, {len(official)} bytes")
    # the binding writes OP_INDEX for a single repeated pixel where we write OP_RUN
    print(
        f"Byte-identical output: {official == encoded} "
        "(a mismatch can still be two valid encodings of the same image)"
    )

    # Encode to PNG in C using Pillow
    start_time = time.time()
    Image.fromarray(pixel_data).save(OUTPUT_PNG, format="PNG")
    end_time = time.time()

    with open(OUTPUT_PNG, "rb") as f:
        png_size = len(f.read())
    print(f"Saved PNG to {OUTPUT_PNG} in {end_time - start_time:.2f} seconds, {png_size} bytes")


if __name__ == "__main__":
    pixel_data, desc = load_image(INPUT_IMAGE)
    print(
        f"Loaded image {INPUT_IMAGE}: {desc['width']}x{desc['height']} Channels: {desc['channels']}"
    )
    print(f"Original {INPUT_IMAGE} {pixel_data.nbytes} bytes")

    time_compare(pixel_data)
