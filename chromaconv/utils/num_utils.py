import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.limits import CHANNEL_MAX, HUE_SECTOR, SECTOR_PERMUTATIONS


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(value, hi))


def to_byte(unit: float) -> int:
    """Scale a [0, 1] channel to [0, 255], clamped and truncated."""
    return int(clamp(unit * CHANNEL_MAX, 0, CHANNEL_MAX))


def np_to_byte(unit: NDArray) -> NDArray:
    """Vectorized: scale [0, 1] channels to uint8, clamped and truncated."""
    scaled = np.clip(np.asarray(unit, dtype=float) * CHANNEL_MAX, 0, CHANNEL_MAX)
    return np.trunc(scaled).astype(np.uint8)


def hue_sector(h: float) -> int:
    """Index of the 60 degree sector containing ``h``, wrapped into [0, 6)."""
    return int(math.floor(h / HUE_SECTOR)) % 6


def select_sector(h: float, c: float, x: float) -> tuple[float, float, float]:
    """Place chroma ``c``, secondary ``x`` and zero into (r, g, b) for hue ``h``."""
    parts = (c, x, 0.0)
    i, j, k = SECTOR_PERMUTATIONS[hue_sector(h)]
    return parts[i], parts[j], parts[k]


def np_select_sector(h: NDArray, c: NDArray, x: NDArray) -> NDArray:
    """
    Vectorized: place chroma and secondary component per hue sector.

    Returns:
        array of shape (..., 3) with unshifted (r, g, b) in [0, 1]
    """
    sector = np.floor(np.asarray(h, dtype=float) / HUE_SECTOR).astype(int) % 6
    parts = np.stack([c, x, np.zeros_like(c)], axis=-1)
    perm = np.array(SECTOR_PERMUTATIONS)[sector]
    return np.take_along_axis(parts, perm, axis=-1)
