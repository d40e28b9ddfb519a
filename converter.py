from PIL import Image

from qoicodec import png_to_qoi, qoi_to_png

INPUT_IMAGE = "fruits.png"
OUTPUT_QOI = "fruits_converted.qoi"
OUTPUT_PNG = "fruits_reconverted.png"


if __name__ == "__main__":
    size = png_to_qoi(INPUT_IMAGE, OUTPUT_QOI)
    print(f"Converted {INPUT_IMAGE} to {OUTPUT_QOI} ({size} bytes)")

    qoi_to_png(OUTPUT_QOI, OUTPUT_PNG)
    print(f"Converted {OUTPUT_QOI} to {OUTPUT_PNG}")

    original = Image.open(INPUT_IMAGE)
    if original.mode != "RGBA":
        original = original.convert("RGB")
    assert (
        original.tobytes() == Image.open(OUTPUT_PNG).tobytes()
    ), "Reconverted image does not match original!"
