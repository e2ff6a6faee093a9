"""Basic chromaconv usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromaconv import (
    RGB,
    RGBA,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_cmyk,
    hsl_to_hsv,
    rgb_blend,
    rgb_invert,
    hex_websafe,
    convert,
    np_convert,
    np_rgb_blend,
)


def demonstrate_conversions() -> None:
    # Value types unpack like plain tuples.
    accent = RGB(255, 128, 64)
    hsl = rgb_to_hsl(accent)
    print("RGB -> HSL:", hsl)
    print("HSL -> RGB:", hsl_to_rgb(hsl))
    print("HSL -> HSV (direct):", hsl_to_hsv(hsl))
    print("RGB -> CMYK:", rgb_to_cmyk(accent))
    print("hex -> HSV via dispatcher:", convert(0x336699, "hex", "hsv"))


def demonstrate_pixels() -> None:
    background = RGB(10, 20, 30)
    print("Half-transparent blend:", rgb_blend(background, RGBA(200, 100, 50, 128)))
    print("Inverted:", rgb_invert(background))
    print("Web-safe 0x112233:", hex(hex_websafe(0x112233)))

    # Whole images at once; out= writes into the caller's buffer.
    image = np.zeros((4, 4, 3), dtype=np.uint8)
    overlay = np.array([255, 0, 0, 64], dtype=np.uint8)
    np_rgb_blend(image, overlay, out=image)
    print("Blended image corner:", image[0, 0])
    print("Image as HSL:", np_convert(image, "rgb", "hsl")[0, 0])


def main() -> None:
    demonstrate_conversions()
    demonstrate_pixels()


if __name__ == "__main__":
    main()
