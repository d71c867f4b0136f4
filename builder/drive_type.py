"""DriveType enum."""

from enum import Enum


class DriveType(Enum):
    """Number of driven wheels."""

    TWO_WHEEL_DRIVE = 2
    FOUR_WHEEL_DRIVE = 4
