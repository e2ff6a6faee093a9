"""
RGB/RGBA widening and alpha compositing.

``rgb_blend`` composites a translucent foreground over an opaque background
with straight linear interpolation, ``out = dst * (1 - a) + src * a`` where
``a = src.a / 255``. Results are clamped to [0, 255] and truncated.
"""
from typing import Optional

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, RGBA
from ..types.limits import ALPHA_OPAQUE, CHANNEL_MAX
from ..utils.num_utils import clamp


def rgb_to_rgba(rgb: RGB) -> RGBA:
    """Widen to RGBA with full opacity."""
    r, g, b = rgb
    return RGBA(r, g, b, ALPHA_OPAQUE)


def rgba_to_rgb(rgba: RGBA) -> RGB:
    """Drop the alpha channel."""
    r, g, b, _ = rgba
    return RGB(r, g, b)


def rgb_blend(dst: RGB, src: RGBA) -> RGB:
    """
    Alpha-composite ``src`` over ``dst``.

    Args:
        dst: opaque background
        src: foreground; ``a == 255`` replaces dst, ``a == 0`` leaves it as is

    Returns:
        The blended color. ``dst`` itself is not touched; rebind it to the result.
    """
    a = src[3] / CHANNEL_MAX
    return RGB(*(
        int(clamp(d * (1 - a) + s * a, 0, CHANNEL_MAX))
        for d, s in zip(dst, src[:3])
    ))


def np_rgb_blend(dst: NDArray, src: NDArray, out: Optional[NDArray] = None) -> NDArray:
    """
    Vectorized: alpha-composite an RGBA array over an RGB array.

    Args:
        dst: array-like of shape (..., 3)
        src: array-like of shape (..., 4), broadcastable against dst
        out: optional array receiving the result; pass ``dst`` to blend in place

    Returns:
        uint8 array of shape (..., 3), or ``out`` when given
    """
    dst_f = np.asarray(dst, dtype=float)
    src_f = np.asarray(src, dtype=float)
    a = src_f[..., 3:] / CHANNEL_MAX

    blended = dst_f * (1 - a) + src_f[..., :3] * a
    result = np.trunc(np.clip(blended, 0, CHANNEL_MAX)).astype(np.uint8)

    if out is None:
        return result
    out[...] = result
    return out
