"""
Chromaconv - Color Model Conversion Library
===========================================

Deterministic conversions between RGB, RGBA, HSL, HSV, CMYK and packed
hexadecimal colors, with range validators and pixel-level operators.

Key Features
------------
- Immutable value types (RGB, RGBA, HSL, HSV, CMYK) that unpack like tuples
- Pairwise conversions, with HSL ↔ HSV done directly
- Guarded singularities: black, white and gray never divide by zero
- Pixel operators: inversion, alpha blending, web-safe snapping
- Vectorized ``np_`` variants for whole images

Quick Start
-----------
>>> from chromaconv import RGB, rgb_to_hsl, hsl_to_rgb, hex_websafe
>>>
>>> rgb_to_hsl(RGB(255, 0, 0))
HSL(h=0.0, s=1.0, l=0.5)
>>> hsl_to_rgb((0, 1, 0.5))
RGB(r=255, g=0, b=0)
>>> hex(hex_websafe(0x112233))
'0x3333'

Modules
-------
- types: value types and read-only constants
- conversions: color model conversions, validators, ``convert`` dispatcher
- operations: invert, blend, web-safe snap
"""

from .types.color_types import RGB, RGBA, HSL, HSV, CMYK, Hex, ColorSpace

from .conversions import (
    rgb_to_hsl, hsl_to_rgb,
    rgb_to_hsv, hsv_to_rgb,
    rgb_to_cmyk, cmyk_to_rgb,
    rgb_to_hex, hex_to_rgb,
    hsl_to_hsv, hsv_to_hsl,
    np_rgb_to_hsl, np_hsl_to_rgb,
    np_rgb_to_hsv, np_hsv_to_rgb,
    np_rgb_to_cmyk, np_cmyk_to_rgb,
    np_rgb_to_hex, np_hex_to_rgb,
    np_hsl_to_hsv, np_hsv_to_hsl,
    hsl_valid, hsv_valid, cmyk_valid,
    np_hsl_valid, np_hsv_valid, np_cmyk_valid,
    InvalidColorWarning,
    convert, np_convert,
)

from .operations import (
    rgb_to_rgba, rgba_to_rgb, rgb_blend, np_rgb_blend,
    rgb_invert, hsl_invert, np_rgb_invert,
    hex_websafe, rgb_websafe, np_hex_websafe,
)

__version__ = "1.0.0"

__all__ = [
    # Value types
    "RGB", "RGBA", "HSL", "HSV", "CMYK", "Hex", "ColorSpace",

    # Conversions
    "rgb_to_hsl", "hsl_to_rgb",
    "rgb_to_hsv", "hsv_to_rgb",
    "rgb_to_cmyk", "cmyk_to_rgb",
    "rgb_to_hex", "hex_to_rgb",
    "hsl_to_hsv", "hsv_to_hsl",
    "np_rgb_to_hsl", "np_hsl_to_rgb",
    "np_rgb_to_hsv", "np_hsv_to_rgb",
    "np_rgb_to_cmyk", "np_cmyk_to_rgb",
    "np_rgb_to_hex", "np_hex_to_rgb",
    "np_hsl_to_hsv", "np_hsv_to_hsl",

    # Validation
    "hsl_valid", "hsv_valid", "cmyk_valid",
    "np_hsl_valid", "np_hsv_valid", "np_cmyk_valid",
    "InvalidColorWarning",

    # High-level API
    "convert", "np_convert",

    # Pixel operators
    "rgb_to_rgba", "rgba_to_rgb", "rgb_blend", "np_rgb_blend",
    "rgb_invert", "hsl_invert", "np_rgb_invert",
    "hex_websafe", "rgb_websafe", "np_hex_websafe",

    # Version
    "__version__",
]
