"""Pixel operators: inversion, alpha compositing and web-safe snapping."""

from .alpha import rgb_to_rgba, rgba_to_rgb, rgb_blend, np_rgb_blend
from .invert import rgb_invert, hsl_invert, np_rgb_invert
from .websafe import hex_websafe, rgb_websafe, np_hex_websafe

__all__ = [
    "rgb_to_rgba", "rgba_to_rgb", "rgb_blend", "np_rgb_blend",
    "rgb_invert", "hsl_invert", "np_rgb_invert",
    "hex_websafe", "rgb_websafe", "np_hex_websafe",
]
