"""
Color Helpers

Voxel colors are opaque to the engine. Downstream consumers (renderers,
stat printers) usually want them as RGB components, so this module unpacks
the 0xRRGGBB integers used by the palette.
"""

from typing import Sequence, Union
import numpy as np


MAX_COLOR = 0xFFFFFF


def unpack_rgb(colors: Union[Sequence[int], np.ndarray]) -> np.ndarray:
    """
    Unpack 0xRRGGBB integers into RGB components.

    Args:
        colors: Sequence or array of shape (N,) with packed colors

    Returns:
        Array of shape (N, 3) with uint8 RGB values
    """
    packed = np.asarray(colors, dtype=np.int64).reshape(-1)
    if packed.size and (packed.min() < 0 or packed.max() > MAX_COLOR):
        raise ValueError("Colors must be 24-bit 0xRRGGBB integers")

    rgb = np.empty((packed.size, 3), dtype=np.uint8)
    rgb[:, 0] = (packed >> 16) & 0xFF
    rgb[:, 1] = (packed >> 8) & 0xFF
    rgb[:, 2] = packed & 0xFF
    return rgb


def to_hex(color: int) -> str:
    """Format a packed color as '#rrggbb'."""
    if not 0 <= color <= MAX_COLOR:
        raise ValueError(f"Color out of range: {color}")
    return f"#{color:06x}"
