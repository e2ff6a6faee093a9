from __future__ import annotations
from typing import Literal, NamedTuple, Tuple, TypeAlias, Union


class RGB(NamedTuple):
    """8-bit red, green, blue channels in [0, 255]."""
    r: int
    g: int
    b: int


class RGBA(NamedTuple):
    """8-bit RGB plus alpha; ``a == 255`` is fully opaque."""
    r: int
    g: int
    b: int
    a: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""
    h: float
    s: float
    l: float


class HSV(NamedTuple):
    """Hue in degrees [0, 360), saturation and value in [0, 1]."""
    h: float
    s: float
    v: float


class CMYK(NamedTuple):
    c: float
    m: float
    y: float
    k: float


# 0xRRGGBB, anything above the low 24 bits is ignored on read
Hex: TypeAlias = int

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorTuple = Union[RGB, RGBA, HSL, HSV, CMYK]
ColorElement = Union[ColorTuple, ScalarVector, Hex]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsv", "cmyk", "hex"]

space_to_type: dict[str, type] = {
    "rgb": RGB,
    "rgba": RGBA,
    "hsl": HSL,
    "hsv": HSV,
    "cmyk": CMYK,
}

