import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, CMYK
from ..types.limits import CHANNEL_MAX


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    """
    Convert 8-bit RGB to CMYK.

    Pure black (k == 1) yields c = m = y = 0 instead of dividing by zero.
    """
    r, g, b = (channel / CHANNEL_MAX for channel in rgb)
    k = 1 - max(r, g, b)
    if k == 1:
        return CMYK(0.0, 0.0, 0.0, 1.0)
    return CMYK(
        (1 - r - k) / (1 - k),
        (1 - g - k) / (1 - k),
        (1 - b - k) / (1 - k),
        k,
    )


def np_rgb_to_cmyk(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to CMYK.

    Args:
        rgb: array-like of shape (..., 3), channels in [0, 255]

    Returns:
        cmyk: array of shape (..., 4)
    """
    arr = np.asarray(rgb, dtype=float) / CHANNEL_MAX
    k = 1 - np.max(arr, axis=-1)

    # pure black keeps c = m = y = 0
    chromatic = (k != 1)[..., None]
    denom = np.where(chromatic, 1 - k[..., None], 1.0)
    cmy = np.where(chromatic, (1 - arr - k[..., None]) / denom, 0.0)

    return np.concatenate([cmy, k[..., None]], axis=-1)
