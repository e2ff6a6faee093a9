from typing import Any
from collections.abc import Sized

from .num_utils import clamp, to_byte, np_to_byte, hue_sector, select_sector, np_select_sector


def get_dimension(element: Any) -> int:
    """Number of channels in a color element; a bare number counts as one."""
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


__all__ = [
    "get_dimension",
    "clamp", "to_byte", "np_to_byte",
    "hue_sector", "select_sector", "np_select_sector",
]
