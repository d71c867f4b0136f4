"""
Car value object and its fluent builder.

Everything is defaulted except the color. Use it like this:

    car = (
        Car.builder()
        .car_type(CarType.SEDAN)
        .color_type(ColorType.MIDNIGHT_BLACK)
        .build()
    )

All type choices are enums. A Car is immutable once built.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Optional

from .build_exception import BuildException
from .car_type import CarType
from .color_type import ColorType
from .door_type import DoorType
from .drive_type import DriveType
from .top_type import TopType


def _option_name(value: Optional[Any]) -> Optional[str]:
    return value.name if value is not None else None


def _name(value: Optional[Any]) -> str:
    return _option_name(value) or "None"


@dataclass(frozen=True)
class Car:
    """
    A fixed car configuration.

    Build one through Car.builder(); calling Car(...) directly runs the
    same validation, so a Car without a color can never exist.
    """

    car_type: Optional[CarType]
    door_type: Optional[DoorType]
    top_type: Optional[TopType]
    drive_type: Optional[DriveType]
    color_type: ColorType

    def __post_init__(self):
        if self.color_type is None:
            raise BuildException("You must select a color!")

    @staticmethod
    def builder() -> "Car.Builder":
        """Start a new builder with all defaults applied."""
        return Car.Builder()

    def __str__(self) -> str:
        return (
            "Car: ["
            f"car type={_name(self.car_type)}"
            f", door type={_name(self.door_type)}"
            f", top type={_name(self.top_type)}"
            f", drive type={_name(self.drive_type)}"
            f", color={_name(self.color_type)}]"
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        """
        Serialize to the order file format (camelCase keys, enum names).

        A cleared optional field is written as None rather than omitted,
        since an omitted key means "use the default" when loading.
        """
        return {
            "carType": _option_name(self.car_type),
            "doorType": _option_name(self.door_type),
            "topType": _option_name(self.top_type),
            "driveType": _option_name(self.drive_type),
            "colorType": self.color_type.name,
        }

    class Builder:
        """
        Fluent builder for Car.

        Each setter overwrites one slot and returns the builder, so calls
        chain in any order. build() can be called more than once; every
        call returns a new Car from the current state.

        Not safe to share between threads.
        """

        # Color has no default
        DEFAULTS = MappingProxyType(
            {
                "car_type": CarType.COUPE,
                "door_type": DoorType.TWO_DOOR,
                "top_type": TopType.HARDTOP,
                "drive_type": DriveType.TWO_WHEEL_DRIVE,
            }
        )

        def __init__(self):
            self._car_type: Optional[CarType] = self.DEFAULTS["car_type"]
            self._door_type: Optional[DoorType] = self.DEFAULTS["door_type"]
            self._top_type: Optional[TopType] = self.DEFAULTS["top_type"]
            self._drive_type: Optional[DriveType] = self.DEFAULTS["drive_type"]
            self._color_type: Optional[ColorType] = None

        def car_type(self, car_type: Optional[CarType]) -> "Car.Builder":
            self._car_type = car_type
            return self

        def door_type(self, door_type: Optional[DoorType]) -> "Car.Builder":
            self._door_type = door_type
            return self

        def top_type(self, top_type: Optional[TopType]) -> "Car.Builder":
            self._top_type = top_type
            return self

        def drive_type(self, drive_type: Optional[DriveType]) -> "Car.Builder":
            self._drive_type = drive_type
            return self

        def color_type(self, color_type: Optional[ColorType]) -> "Car.Builder":
            self._color_type = color_type
            return self

        def build(self) -> "Car":
            """Create a Car from the current state. Raises BuildException."""
            return Car(
                self._car_type,
                self._door_type,
                self._top_type,
                self._drive_type,
                self._color_type,
            )

        def __repr__(self) -> str:
            return (
                "Car.Builder("
                f"car_type={_name(self._car_type)}, "
                f"door_type={_name(self._door_type)}, "
                f"top_type={_name(self._top_type)}, "
                f"drive_type={_name(self._drive_type)}, "
                f"color_type={_name(self._color_type)})"
            )
