"""
Model Palette and Layout Configuration

Named colors and the floor height read by the model builders. The engine
itself never looks at these: it only sees resolved numbers.
"""

from dataclasses import dataclass


class Colors:
    """Named model colors as 0xRRGGBB integers."""
    DARK = 0x4A3728
    LIGHT = 0x654321
    WHITE = 0xF0F0F0
    GOLD = 0xFFD700
    BLACK = 0x111111
    WOOD = 0x3B2F2F
    GREEN = 0x228B22
    TALON = 0xE5C100
    BLUE = 0x4488CC
    RED = 0xCC3333
    GRAY = 0x888888
    DARK_GRAY = 0x555555
    IVORY = 0xFFFFF0
    ORANGE = 0xE07020
    SCALE_BLUE = 0x3377DD


DEFAULT_FLOOR_Y = -12.0


@dataclass(frozen=True)
class ModelConfig:
    """
    Layout settings shared by the model builders.

    Attributes:
        floor_y: World height of the ground plane grounded models stand on
    """
    floor_y: float = DEFAULT_FLOOR_Y
