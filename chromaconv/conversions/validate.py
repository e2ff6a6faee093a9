"""
Advisory range checks for HSL, HSV and CMYK values.

Converters never call these; they exist so a caller can decide whether to
trust a value before converting it. Nothing here normalizes or clamps.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSL, HSV, CMYK
from ..types.limits import HUE_360


class InvalidColorWarning(UserWarning):
    """Emitted by the dispatch layer when an input fails its range check."""


def _unit(value: float) -> bool:
    return 0.0 <= value <= 1.0


def _hue(value: float) -> bool:
    return 0.0 <= value < HUE_360


def hsl_valid(hsl: HSL) -> bool:
    """True iff h in [0, 360) and s, l in [0, 1]."""
    h, s, l = hsl
    return _hue(h) and _unit(s) and _unit(l)


def hsv_valid(hsv: HSV) -> bool:
    """True iff h in [0, 360) and s, v in [0, 1]."""
    h, s, v = hsv
    return _hue(h) and _unit(s) and _unit(v)


def cmyk_valid(cmyk: CMYK) -> bool:
    """True iff every channel is in [0, 1]."""
    return all(_unit(channel) for channel in cmyk)


def _np_hue_unit_valid(arr: NDArray) -> NDArray:
    arr = np.asarray(arr, dtype=float)
    hue = arr[..., 0]
    rest = arr[..., 1:]
    return (hue >= 0) & (hue < HUE_360) & np.all((rest >= 0) & (rest <= 1), axis=-1)


def np_hsl_valid(hsl: NDArray) -> NDArray:
    """
    Vectorized: range-check an array of HSL values.

    Args:
        hsl: array of shape (..., 3)

    Returns:
        boolean mask of shape (...)
    """
    return _np_hue_unit_valid(hsl)


def np_hsv_valid(hsv: NDArray) -> NDArray:
    """Vectorized: range-check an array of HSV values, shape (..., 3) -> (...)."""
    return _np_hue_unit_valid(hsv)


def np_cmyk_valid(cmyk: NDArray) -> NDArray:
    """Vectorized: range-check an array of CMYK values, shape (..., 4) -> (...)."""
    arr = np.asarray(cmyk, dtype=float)
    return np.all((arr >= 0) & (arr <= 1), axis=-1)


validators = {
    "hsl": hsl_valid,
    "hsv": hsv_valid,
    "cmyk": cmyk_valid,
}
