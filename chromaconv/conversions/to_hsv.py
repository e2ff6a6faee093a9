import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, HSL, HSV
from ..types.limits import CHANNEL_MAX
from .to_hsl import channel_hue, np_channel_hue


def rgb_to_hsv(rgb: RGB) -> HSV:
    """
    Convert 8-bit RGB to HSV.

    Args:
        rgb: (r, g, b), each in [0, 255]

    Returns:
        HSV: (hue [0, 360), saturation [0, 1], value [0, 1])
    """
    r, g, b = (channel / CHANNEL_MAX for channel in rgb)
    cmax = max(r, g, b)
    d = cmax - min(r, g, b)

    h = 0.0 if d == 0 else channel_hue(r, g, b, cmax, d)
    s = 0.0 if cmax == 0 else d / cmax
    return HSV(h, s, cmax)


def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to HSV.

    Args:
        rgb: array-like of shape (..., 3), channels in [0, 255]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    arr = np.asarray(rgb, dtype=float) / CHANNEL_MAX
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]

    v = np.maximum.reduce([r, g, b])
    d = v - np.minimum.reduce([r, g, b])

    s = np.where(v != 0, d / np.where(v != 0, v, 1.0), 0.0)

    h = np_channel_hue(r, g, b, v, d)
    return np.stack([h, s, v], axis=-1)


def hsl_to_hsv(hsl: HSL) -> HSV:
    """Convert HSL to HSV without going through RGB. Hue passes through unchanged."""
    h, s, l = hsl
    v = l + s * min(l, 1 - l)
    if v == 0:
        return HSV(h, 0.0, v)
    return HSV(h, 2 * (1 - l / v), v)


def np_hsl_to_hsv(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to HSV.

    Args:
        hsl: array-like of shape (..., 3)

    Returns:
        hsv: array of shape (..., 3)
    """
    arr = np.asarray(hsl, dtype=float)
    h, s, l = arr[..., 0], arr[..., 1], arr[..., 2]

    v = l + s * np.minimum(l, 1 - l)
    mask = v != 0
    s_out = np.where(mask, 2 * (1 - l / np.where(mask, v, 1.0)), 0.0)

    return np.stack([h, s_out, v], axis=-1)
