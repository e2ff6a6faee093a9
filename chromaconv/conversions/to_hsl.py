import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, HSL, HSV
from ..types.limits import CHANNEL_MAX, HUE_SECTOR


def channel_hue(r: float, g: float, b: float, cmax: float, d: float) -> float:
    """
    Hue in degrees from normalized channels, picked by the maximal channel.

    ``d`` is ``cmax - cmin`` and must be non-zero.
    """
    if cmax == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif cmax == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h * HUE_SECTOR


def np_channel_hue(r: NDArray, g: NDArray, b: NDArray, cmax: NDArray, d: NDArray) -> NDArray:
    """Vectorized: hue in degrees; zero wherever ``d == 0``."""
    chromatic = d > 0
    safe_d = np.where(chromatic, d, 1.0)

    hue = np.where(
        cmax == r,
        (g - b) / safe_d + np.where(g < b, 6, 0),
        np.where(cmax == g, (b - r) / safe_d + 2, (r - g) / safe_d + 4),
    )
    return np.where(chromatic, hue * HUE_SECTOR, 0.0)


def _split_unit_rgb(rgb: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    arr = np.asarray(rgb, dtype=float) / CHANNEL_MAX
    return arr[..., 0], arr[..., 1], arr[..., 2]


## RGB to HSL

def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert 8-bit RGB to HSL.

    Args:
        rgb: (r, g, b), each in [0, 255]

    Returns:
        HSL: (hue [0, 360), saturation [0, 1], lightness [0, 1])
    """
    r, g, b = (channel / CHANNEL_MAX for channel in rgb)
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    l = (cmax + cmin) / 2

    if cmax == cmin:
        return HSL(0.0, 0.0, l)

    d = cmax - cmin
    denom = 2 - cmax - cmin if l > 0.5 else cmax + cmin
    # only reachable with channels outside [0, 255]
    s = d / denom if denom != 0 else 0.0
    return HSL(channel_hue(r, g, b, cmax, d), s, l)


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to HSL.

    Args:
        rgb: array-like of shape (..., 3), channels in [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = _split_unit_rgb(rgb)

    cmax = np.maximum.reduce([r, g, b])
    cmin = np.minimum.reduce([r, g, b])
    d = cmax - cmin
    l = (cmax + cmin) / 2

    denom = np.where(l > 0.5, 2 - cmax - cmin, cmax + cmin)
    defined = (d > 0) & (denom != 0)
    s = np.where(defined, d / np.where(defined, denom, 1.0), 0.0)

    h = np_channel_hue(r, g, b, cmax, d)
    return np.stack([h, s, l], axis=-1)


## HSV to HSL

def hsv_to_hsl(hsv: HSV) -> HSL:
    """
    Convert HSV to HSL without going through RGB. Hue passes through unchanged.

    Saturation is 0 at the black and white ends where it is undefined.
    """
    h, s, v = hsv
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        return HSL(h, 0.0, l)
    return HSL(h, (v - l) / min(l, 1 - l), l)


def np_hsv_to_hsl(hsv: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to HSL.

    Args:
        hsv: array-like of shape (..., 3)

    Returns:
        hsl: array of shape (..., 3)
    """
    arr = np.asarray(hsv, dtype=float)
    h, s, v = arr[..., 0], arr[..., 1], arr[..., 2]

    l = v * (1 - s / 2)
    mask = (l != 0) & (l != 1)
    denom = np.where(mask, np.minimum(l, 1 - l), 1.0)
    s_out = np.where(mask, (v - l) / denom, 0.0)

    return np.stack([h, s_out, l], axis=-1)
