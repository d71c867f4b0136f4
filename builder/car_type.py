"""CarType enum for body styles."""

from enum import Enum


class CarType(Enum):
    """Body style of the car."""

    COUPE = 1
    SEDAN = 2
    SUV = 3
    CONVERTIBLE = 4
    HATCHBACK = 5
    WAGON = 6
    PICKUP = 7
