from typing import Optional

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, HSL
from ..types.limits import BYTE_MASK, HUE_HALF_TURN


def rgb_invert(rgb: RGB) -> RGB:
    """Bitwise complement of each 8-bit channel. Applying it twice is a no-op."""
    return RGB(*(~channel & BYTE_MASK for channel in rgb))


def np_rgb_invert(rgb: NDArray, out: Optional[NDArray] = None) -> NDArray:
    """
    Vectorized: complement every channel of a uint8 image.

    Args:
        rgb: array-like of shape (..., 3) holding 8-bit channels
        out: optional array receiving the result; pass ``rgb`` to invert in place
    """
    arr = np.asarray(rgb)
    if arr.dtype != np.uint8:
        arr = (arr.astype(np.int64) & BYTE_MASK).astype(np.uint8)
    return np.invert(arr, out=out)


def hsl_invert(hsl: HSL) -> HSL:
    """Opposite hue, complementary saturation and lightness."""
    h, s, l = hsl
    h += HUE_HALF_TURN if h < HUE_HALF_TURN else -HUE_HALF_TURN
    return HSL(h, 1 - s, 1 - l)
