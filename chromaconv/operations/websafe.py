import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, Hex
from ..types.limits import BYTE_MASK, HEX_MASK, WEBSAFE_LEVELS, WEBSAFE_THRESHOLDS
from ..conversions.to_hex import rgb_to_hex
from ..conversions.to_rgb import hex_to_rgb


def snap_byte(value: int) -> int:
    """Nearest of 0x00, 0x33, 0x66, 0x99, 0xCC, 0xFF for one byte."""
    for level, upper in zip(WEBSAFE_LEVELS, WEBSAFE_THRESHOLDS):
        if value <= upper:
            return level
    return WEBSAFE_LEVELS[-1]


def rgb_websafe(rgb: RGB) -> RGB:
    return RGB(*(snap_byte(channel & BYTE_MASK) for channel in rgb))


def hex_websafe(code: Hex) -> Hex:
    """
    Snap each byte of a packed 0xRRGGBB color to the web-safe palette.

    The three bytes are snapped independently; bits above the low 24 are dropped.
    """
    return rgb_to_hex(rgb_websafe(hex_to_rgb(code)))


def np_hex_websafe(codes: NDArray) -> NDArray:
    """
    Vectorized: snap packed colors to the web-safe palette.

    Args:
        codes: integer array-like of shape (...)

    Returns:
        int64 array of shape (...)
    """
    codes = np.asarray(codes, dtype=np.int64) & HEX_MASK
    shifts = np.array([16, 8, 0])
    channels = (codes[..., None] >> shifts) & BYTE_MASK
    levels = np.array(WEBSAFE_LEVELS, dtype=np.int64)[
        np.searchsorted(WEBSAFE_THRESHOLDS, channels, side="left")
    ]
    return np.bitwise_or.reduce(levels << shifts, axis=-1)
