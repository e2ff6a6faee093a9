import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, Hex
from ..types.limits import BYTE_MASK


def rgb_to_hex(rgb: RGB) -> Hex:
    """Pack (r, g, b) as 0xRRGGBB."""
    r, g, b = rgb
    return ((r & BYTE_MASK) << 16) | ((g & BYTE_MASK) << 8) | (b & BYTE_MASK)


def np_rgb_to_hex(rgb: NDArray) -> NDArray:
    """
    Vectorized: pack an array of RGB values.

    Args:
        rgb: integer array-like of shape (..., 3)

    Returns:
        int64 array of shape (...)
    """
    arr = np.asarray(rgb).astype(np.int64) & BYTE_MASK
    return (arr[..., 0] << 16) | (arr[..., 1] << 8) | arr[..., 2]
