"""ColorType enum for paint choices."""

from enum import Enum


class ColorType(Enum):
    """Factory paint colors. There is no default color."""

    FLASHY_RED = 1
    MIDNIGHT_BLACK = 2
    ARCTIC_WHITE = 3
    SILVER_METALLIC = 4
    OCEAN_BLUE = 5
    FOREST_GREEN = 6
