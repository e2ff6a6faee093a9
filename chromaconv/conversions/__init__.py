"""
Chromaconv Color Space Conversions
==================================

Scalar and vectorized (numpy) conversions between RGB, HSL, HSV, CMYK and
packed hex colors, plus advisory range validators.

Features
--------
- RGB ↔ HSL, RGB ↔ HSV, RGB ↔ CMYK, RGB ↔ HEX
- HSL ↔ HSV directly, without an RGB round trip
- One hue unit everywhere: degrees in [0, 360)
- Scalar functions take and return the value types from ``chromaconv.types``
- ``np_`` functions take arrays of shape (..., channels)

Conversion Functions
-------------------

RGB → HSL / HSV / CMYK / HEX:
    rgb_to_hsl(rgb), np_rgb_to_hsl(rgb)
    rgb_to_hsv(rgb), np_rgb_to_hsv(rgb)
    rgb_to_cmyk(rgb), np_rgb_to_cmyk(rgb)
    rgb_to_hex(rgb), np_rgb_to_hex(rgb)

HSL / HSV / CMYK / HEX → RGB:
    hsl_to_rgb(hsl), np_hsl_to_rgb(hsl)
    hsv_to_rgb(hsv), np_hsv_to_rgb(hsv)
    cmyk_to_rgb(cmyk), np_cmyk_to_rgb(cmyk)
    hex_to_rgb(code), np_hex_to_rgb(codes)

HSV ↔ HSL:
    hsv_to_hsl(hsv), np_hsv_to_hsl(hsv)
    hsl_to_hsv(hsl), np_hsl_to_hsv(hsl)

Validation
----------
    hsl_valid, hsv_valid, cmyk_valid
    np_hsl_valid, np_hsv_valid, np_cmyk_valid

High-Level API
-------------
    convert(color, from_space, to_space, warn_invalid=False)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from chromaconv.conversions import rgb_to_hsl, hsl_to_rgb, convert
>>> rgb_to_hsl((255, 0, 0))
HSL(h=0.0, s=1.0, l=0.5)
>>> hsl_to_rgb((0, 1, 0.5))
RGB(r=255, g=0, b=0)
>>> convert(0xFFFFFF, "hex", "rgb")
RGB(r=255, g=255, b=255)
"""

# RGB → X
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_hex import rgb_to_hex, np_rgb_to_hex

# X → RGB
from .to_rgb import (
    hsl_to_rgb,
    hsv_to_rgb,
    cmyk_to_rgb,
    hex_to_rgb,
    np_hsl_to_rgb,
    np_hsv_to_rgb,
    np_cmyk_to_rgb,
    np_hex_to_rgb,
)

# HSV ↔ HSL
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

from .validate import (
    hsl_valid,
    hsv_valid,
    cmyk_valid,
    np_hsl_valid,
    np_hsv_valid,
    np_cmyk_valid,
    InvalidColorWarning,
)

# High-level API
from .wrapper import convert, np_convert

__all__ = [
    # RGB → X
    'rgb_to_hsl', 'np_rgb_to_hsl',
    'rgb_to_hsv', 'np_rgb_to_hsv',
    'rgb_to_cmyk', 'np_rgb_to_cmyk',
    'rgb_to_hex', 'np_rgb_to_hex',

    # X → RGB
    'hsl_to_rgb', 'np_hsl_to_rgb',
    'hsv_to_rgb', 'np_hsv_to_rgb',
    'cmyk_to_rgb', 'np_cmyk_to_rgb',
    'hex_to_rgb', 'np_hex_to_rgb',

    # HSV ↔ HSL
    'hsl_to_hsv', 'np_hsl_to_hsv',
    'hsv_to_hsl', 'np_hsv_to_hsl',

    # Validation
    'hsl_valid', 'hsv_valid', 'cmyk_valid',
    'np_hsl_valid', 'np_hsv_valid', 'np_cmyk_valid',
    'InvalidColorWarning',

    # High-level API
    'convert',
    'np_convert',
]
