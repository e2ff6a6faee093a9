from .color_types import RGB, RGBA, HSL, HSV, CMYK, Hex, ColorSpace

__all__ = ["RGB", "RGBA", "HSL", "HSV", "CMYK", "Hex", "ColorSpace"]
