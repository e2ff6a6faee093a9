import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, HSL, HSV, CMYK, Hex
from ..types.limits import BYTE_MASK, HUE_SECTOR
from ..utils.num_utils import to_byte, np_to_byte, select_sector, np_select_sector


def _secondary(h: float, c: float) -> float:
    return c * (1 - abs((h / HUE_SECTOR) % 2 - 1))


def _np_secondary(h: NDArray, c: NDArray) -> NDArray:
    return c * (1 - np.abs((h / HUE_SECTOR) % 2 - 1))


def _np_split3(arr) -> tuple[NDArray, NDArray, NDArray]:
    arr = np.asarray(arr, dtype=float)
    return arr[..., 0], arr[..., 1], arr[..., 2]


## HSL to RGB

def hsl_to_rgb(hsl: HSL) -> RGB:
    """
    Convert HSL to 8-bit RGB.

    Args:
        hsl: (hue in degrees, saturation [0, 1], lightness [0, 1])

    Returns:
        RGB with channels truncated to [0, 255]. Zero saturation yields gray.
    """
    h, s, l = hsl
    c = (1 - abs(2 * l - 1)) * s
    m = l - c / 2
    r, g, b = select_sector(h, c, _secondary(h, c))
    return RGB(to_byte(r + m), to_byte(g + m), to_byte(b + m))


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to 8-bit RGB.

    Args:
        hsl: array-like of shape (..., 3)

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    h, s, l = _np_split3(hsl)
    c = (1 - np.abs(2 * l - 1)) * s
    m = l - c / 2
    rgb = np_select_sector(h, c, _np_secondary(h, c))
    return np_to_byte(rgb + m[..., None])


## HSV to RGB

def hsv_to_rgb(hsv: HSV) -> RGB:
    """
    Convert HSV to 8-bit RGB.

    Args:
        hsv: (hue in degrees, saturation [0, 1], value [0, 1])

    Returns:
        RGB with channels truncated to [0, 255].
    """
    h, s, v = hsv
    c = v * s
    m = v - c
    r, g, b = select_sector(h, c, _secondary(h, c))
    return RGB(to_byte(r + m), to_byte(g + m), to_byte(b + m))


def np_hsv_to_rgb(hsv: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to 8-bit RGB.

    Args:
        hsv: array-like of shape (..., 3)

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    h, s, v = _np_split3(hsv)
    c = v * s
    m = v - c
    rgb = np_select_sector(h, c, _np_secondary(h, c))
    return np_to_byte(rgb + m[..., None])


## CMYK to RGB

def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    """Convert CMYK to 8-bit RGB; channels are clamped to [0, 255] and truncated."""
    c, m, y, k = cmyk
    return RGB(
        to_byte((1 - c) * (1 - k)),
        to_byte((1 - m) * (1 - k)),
        to_byte((1 - y) * (1 - k)),
    )


def np_cmyk_to_rgb(cmyk: NDArray) -> NDArray:
    """
    Vectorized: Convert CMYK to 8-bit RGB.

    Args:
        cmyk: array-like of shape (..., 4)

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    arr = np.asarray(cmyk, dtype=float)
    cmy = arr[..., :3]
    k = arr[..., 3:]
    return np_to_byte((1 - cmy) * (1 - k))


## HEX to RGB

def hex_to_rgb(code: Hex) -> RGB:
    """Unpack 0xRRGGBB; bits above the low 24 are ignored."""
    return RGB((code >> 16) & BYTE_MASK, (code >> 8) & BYTE_MASK, code & BYTE_MASK)


def np_hex_to_rgb(codes: NDArray) -> NDArray:
    """
    Vectorized: unpack packed 0xRRGGBB integers.

    Args:
        codes: integer array-like of shape (...)

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    codes = np.asarray(codes, dtype=np.int64)
    return np.stack(
        [(codes >> 16) & BYTE_MASK, (codes >> 8) & BYTE_MASK, codes & BYTE_MASK],
        axis=-1,
    ).astype(np.uint8)
