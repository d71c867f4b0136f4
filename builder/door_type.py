"""DoorType enum."""

from enum import Enum


class DoorType(Enum):
    TWO_DOOR = 2
    FOUR_DOOR = 4
