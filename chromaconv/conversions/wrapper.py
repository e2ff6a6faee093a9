import warnings
import numpy as np
from typing import Callable, cast

from ..types.color_types import ColorElement, ColorSpace, ColorTuple, space_to_type
from ..types.limits import ALPHA_OPAQUE
from ..utils import get_dimension
from ..operations.alpha import rgb_to_rgba, rgba_to_rgb

from .to_rgb import (
    hsl_to_rgb, hsv_to_rgb, cmyk_to_rgb, hex_to_rgb,
    np_hsl_to_rgb, np_hsv_to_rgb, np_cmyk_to_rgb, np_hex_to_rgb,
)
from .to_hsl import rgb_to_hsl, hsv_to_hsl, np_rgb_to_hsl, np_hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv, np_rgb_to_hsv, np_hsl_to_hsv
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_hex import rgb_to_hex, np_rgb_to_hex
from .validate import InvalidColorWarning, validators

SPACES = ("rgb", "rgba", "hsl", "hsv", "cmyk", "hex")

# hex is a bare integer, every other space is a fixed-width tuple
channel_counts = {
    "rgb": 3,
    "rgba": 4,
    "hsl": 3,
    "hsv": 3,
    "cmyk": 4,
    "hex": 1,
}

# Pairs with a dedicated routine; anything else goes through rgb
CONVERT_DIRECT: dict[tuple[str, str], Callable] = {
    ("rgb", "rgba"): rgb_to_rgba,
    ("rgba", "rgb"): rgba_to_rgb,
    ("rgb", "hsl"): rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_rgb,
    ("rgb", "hsv"): rgb_to_hsv,
    ("hsv", "rgb"): hsv_to_rgb,
    ("rgb", "cmyk"): rgb_to_cmyk,
    ("cmyk", "rgb"): cmyk_to_rgb,
    ("rgb", "hex"): rgb_to_hex,
    ("hex", "rgb"): hex_to_rgb,
    ("hsl", "hsv"): hsl_to_hsv,
    ("hsv", "hsl"): hsv_to_hsl,
}


def _np_rgb_to_rgba(rgb: np.ndarray) -> np.ndarray:
    rgb = np.asarray(rgb)
    alpha = np.full(rgb.shape[:-1] + (1,), ALPHA_OPAQUE, dtype=rgb.dtype)
    return np.concatenate([rgb, alpha], axis=-1)


def _np_rgba_to_rgb(rgba: np.ndarray) -> np.ndarray:
    return np.asarray(rgba)[..., :3]


CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray], np.ndarray]] = {
    ("rgb", "rgba"): _np_rgb_to_rgba,
    ("rgba", "rgb"): _np_rgba_to_rgb,
    ("rgb", "hsl"): np_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_rgb,
    ("rgb", "hsv"): np_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_rgb,
    ("rgb", "cmyk"): np_rgb_to_cmyk,
    ("cmyk", "rgb"): np_cmyk_to_rgb,
    ("rgb", "hex"): np_rgb_to_hex,
    ("hex", "rgb"): np_hex_to_rgb,
    ("hsl", "hsv"): np_hsl_to_hsv,
    ("hsv", "hsl"): np_hsv_to_hsl,
}


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space


def _route(from_space: str, to_space: str) -> list[tuple[str, str]]:
    if (from_space, to_space) in CONVERT_DIRECT:
        return [(from_space, to_space)]
    return [(from_space, "rgb"), ("rgb", to_space)]


def _coerce(color: ColorElement, space: str) -> ColorElement:
    if space == "hex":
        if not isinstance(color, (int, np.integer)):
            raise ValueError(f"hex expects a packed integer, got {color!r}")
        return int(color)

    expected = channel_counts[space]
    if get_dimension(color) != expected:
        raise ValueError(f"{space} expects {expected} channels, got {color!r}")
    return space_to_type[space](*cast(ColorTuple, color))


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
    warn_invalid: bool = False,
) -> ColorElement:
    """
    Convert a single color between any two supported spaces.

    Args:
        color: value in ``from_space``; a plain tuple works as well as the
            matching value type, hex is a packed integer
        from_space: one of "rgb", "rgba", "hsl", "hsv", "cmyk", "hex"
        to_space: target space, same choices
        warn_invalid: emit ``InvalidColorWarning`` when an HSL, HSV or CMYK
            input fails its range check. The conversion runs either way.

    Returns:
        The converted value type (or int for hex).

    Raises:
        ValueError: unknown space name or wrong number of channels.
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    value = _coerce(color, fs)

    if warn_invalid and fs in validators and not validators[fs](value):
        warnings.warn(
            f"{value!r} is outside the valid {fs} range; result is approximate",
            InvalidColorWarning,
            stacklevel=2,
        )

    if fs == ts:
        return value

    for step in _route(fs, ts):
        value = CONVERT_DIRECT[step](value)
    return value


def np_convert(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """
    Vectorized ``convert`` for arrays of shape (..., channels).

    Hex arrays are integer arrays of shape (...) with no channel axis.
    They need an integer dtype of at least 32 bits, so an 8-bit RGB image
    passed as hex is rejected instead of being unpacked a second time.

    Raises:
        ValueError: unknown space name or mismatched last dimension.
        TypeError: hex input that is not a 32-bit or wider integer array.
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    arr = np.asarray(color)

    if fs == "hex" and not (np.issubdtype(arr.dtype, np.integer) and arr.dtype.itemsize >= 4):
        raise TypeError(f"hex expects packed integers of at least 32 bits, got dtype {arr.dtype}")

    if fs != "hex" and (arr.ndim == 0 or arr.shape[-1] != channel_counts[fs]):
        raise ValueError(
            f"{fs} expects last dimension to be {channel_counts[fs]}, got shape {arr.shape}"
        )

    if fs == ts:
        return arr

    for step in _route(fs, ts):
        arr = CONVERT_NUMPY[step](arr)
    return arr
