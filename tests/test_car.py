#!/usr/bin/env python3
"""Tests for Car and Car.Builder."""

import dataclasses
import itertools
from enum import Enum

import pytest
from builder import (
    BuildException,
    Car,
    CarType,
    ColorType,
    DoorType,
    DriveType,
    TopType,
)

# =============================================================================
# Builder defaults and scenarios
# =============================================================================


class TestBuilderDefaults:
    """Tests for default values applied by the builder."""

    def test_color_only_uses_defaults(self):
        """Only color set: every other field gets its default."""
        car = Car.builder().color_type(ColorType.FLASHY_RED).build()
        assert car.car_type == CarType.COUPE
        assert car.door_type == DoorType.TWO_DOOR
        assert car.top_type == TopType.HARDTOP
        assert car.drive_type == DriveType.TWO_WHEEL_DRIVE
        assert car.color_type == ColorType.FLASHY_RED

    def test_all_fields_set(self):
        """Every setter overrides its default."""
        car = (
            Car.builder()
            .car_type(CarType.SUV)
            .color_type(ColorType.FLASHY_RED)
            .door_type(DoorType.FOUR_DOOR)
            .drive_type(DriveType.FOUR_WHEEL_DRIVE)
            .top_type(TopType.SOFTTOP)
            .build()
        )
        assert car == Car(
            CarType.SUV,
            DoorType.FOUR_DOOR,
            TopType.SOFTTOP,
            DriveType.FOUR_WHEEL_DRIVE,
            ColorType.FLASHY_RED,
        )

    def test_defaults_table_has_no_color(self):
        assert "color_type" not in Car.Builder.DEFAULTS
        assert Car.Builder.DEFAULTS["car_type"] == CarType.COUPE

    def test_defaults_table_is_read_only(self):
        """Defaults cannot be changed through the shared class table."""
        with pytest.raises(TypeError):
            Car.Builder.DEFAULTS["car_type"] = CarType.SUV
        car = Car.builder().color_type(ColorType.FLASHY_RED).build()
        assert car.car_type == CarType.COUPE

    def test_every_combination_builds(self):
        """All optional combinations with every color build and read back."""
        for car_type, door, top, drive, color in itertools.product(
            CarType, DoorType, TopType, DriveType, ColorType
        ):
            car = (
                Car.builder()
                .car_type(car_type)
                .door_type(door)
                .top_type(top)
                .drive_type(drive)
                .color_type(color)
                .build()
            )
            assert (
                car.car_type,
                car.door_type,
                car.top_type,
                car.drive_type,
                car.color_type,
            ) == (car_type, door, top, drive, color)

    def test_explicit_none_leaves_field_empty(self):
        """Passing None to an optional setter stores None."""
        car = (
            Car.builder()
            .car_type(None)
            .color_type(ColorType.OCEAN_BLUE)
            .build()
        )
        assert car.car_type is None
        assert car.door_type == DoorType.TWO_DOOR


# =============================================================================
# Fluent behavior
# =============================================================================


class TestBuilderFluent:
    """Tests for chaining, order independence, and reuse."""

    def test_setters_return_same_builder(self):
        builder = Car.builder()
        assert builder.car_type(CarType.SEDAN) is builder
        assert builder.door_type(DoorType.FOUR_DOOR) is builder
        assert builder.top_type(TopType.SOFTTOP) is builder
        assert builder.drive_type(DriveType.FOUR_WHEEL_DRIVE) is builder
        assert builder.color_type(ColorType.ARCTIC_WHITE) is builder

    def test_builder_returns_fresh_instances(self):
        assert Car.builder() is not Car.builder()

    def test_setter_order_does_not_matter(self):
        """Any permutation of the same setter calls gives an equal car."""
        calls = [
            ("car_type", CarType.WAGON),
            ("door_type", DoorType.FOUR_DOOR),
            ("top_type", TopType.SOFTTOP),
            ("drive_type", DriveType.FOUR_WHEEL_DRIVE),
            ("color_type", ColorType.FOREST_GREEN),
        ]
        expected = None
        for perm in itertools.permutations(calls):
            builder = Car.builder()
            for setter, value in perm:
                getattr(builder, setter)(value)
            car = builder.build()
            if expected is None:
                expected = car
            assert car == expected

    def test_last_setter_call_wins(self):
        car = (
            Car.builder()
            .color_type(ColorType.FLASHY_RED)
            .color_type(ColorType.MIDNIGHT_BLACK)
            .build()
        )
        assert car.color_type == ColorType.MIDNIGHT_BLACK

    def test_build_twice_gives_distinct_equal_cars(self):
        """The builder is not consumed by build()."""
        builder = Car.builder().color_type(ColorType.SILVER_METALLIC)
        first = builder.build()
        second = builder.build()
        assert first is not second
        assert first == second

    def test_later_changes_do_not_affect_built_car(self):
        builder = Car.builder().color_type(ColorType.FLASHY_RED)
        car = builder.build()
        builder.car_type(CarType.PICKUP).color_type(ColorType.OCEAN_BLUE)
        assert car.car_type == CarType.COUPE
        assert car.color_type == ColorType.FLASHY_RED

    def test_repr_shows_state(self):
        builder = Car.builder().car_type(CarType.SUV)
        assert repr(builder) == (
            "Car.Builder(car_type=SUV, door_type=TWO_DOOR, top_type=HARDTOP, "
            "drive_type=TWO_WHEEL_DRIVE, color_type=None)"
        )


# =============================================================================
# Validation
# =============================================================================


class TestBuildValidation:
    """Tests for the missing color check."""

    def test_build_without_color_fails(self):
        with pytest.raises(BuildException, match="You must select a color!"):
            Car.builder().build()

    def test_message_is_exact(self):
        with pytest.raises(BuildException) as exc_info:
            Car.builder().car_type(CarType.SEDAN).build()
        assert str(exc_info.value) == "You must select a color!"

    def test_explicit_none_color_fails(self):
        with pytest.raises(BuildException):
            Car.builder().color_type(ColorType.FLASHY_RED).color_type(None).build()

    def test_direct_construction_is_validated(self):
        with pytest.raises(BuildException):
            Car(CarType.COUPE, DoorType.TWO_DOOR, TopType.HARDTOP,
                DriveType.TWO_WHEEL_DRIVE, None)

    def test_builder_usable_after_failure(self):
        """A failed build leaves the builder ready for a corrected retry."""
        builder = Car.builder().car_type(CarType.CONVERTIBLE)
        with pytest.raises(BuildException):
            builder.build()
        car = builder.color_type(ColorType.FLASHY_RED).build()
        assert car.car_type == CarType.CONVERTIBLE

    def test_build_exception_is_value_error(self):
        assert issubclass(BuildException, ValueError)


# =============================================================================
# Car value object
# =============================================================================


class TestCar:
    """Tests for Car immutability, equality and rendering."""

    @pytest.fixture
    def jeep(self):
        return (
            Car.builder()
            .car_type(CarType.SUV)
            .color_type(ColorType.FLASHY_RED)
            .door_type(DoorType.FOUR_DOOR)
            .drive_type(DriveType.FOUR_WHEEL_DRIVE)
            .top_type(TopType.SOFTTOP)
            .build()
        )

    def test_immutable(self, jeep):
        with pytest.raises(dataclasses.FrozenInstanceError):
            jeep.color_type = ColorType.OCEAN_BLUE

    def test_equal_cars_hash_equal(self, jeep):
        other = Car(
            CarType.SUV,
            DoorType.FOUR_DOOR,
            TopType.SOFTTOP,
            DriveType.FOUR_WHEEL_DRIVE,
            ColorType.FLASHY_RED,
        )
        assert hash(other) == hash(jeep)

    def test_str(self, jeep):
        assert str(jeep) == (
            "Car: [car type=SUV, door type=FOUR_DOOR, top type=SOFTTOP, "
            "drive type=FOUR_WHEEL_DRIVE, color=FLASHY_RED]"
        )

    def test_str_default_car(self):
        car = Car.builder().color_type(ColorType.FLASHY_RED).build()
        assert str(car) == (
            "Car: [car type=COUPE, door type=TWO_DOOR, top type=HARDTOP, "
            "drive type=TWO_WHEEL_DRIVE, color=FLASHY_RED]"
        )

    def test_str_lists_fields_in_order(self):
        """Rendering keeps car, door, top, drive, color order for every car."""
        for car_type, color in itertools.product(CarType, ColorType):
            text = str(Car.builder().car_type(car_type).color_type(color).build())
            positions = [
                text.index(f"car type={car_type.name}"),
                text.index("door type=TWO_DOOR"),
                text.index("top type=HARDTOP"),
                text.index("drive type=TWO_WHEEL_DRIVE"),
                text.index(f"color={color.name}"),
            ]
            assert positions == sorted(positions)

    def test_str_with_none_field(self):
        car = Car.builder().top_type(None).color_type(ColorType.FLASHY_RED).build()
        assert "top type=None" in str(car)

    def test_to_dict(self, jeep):
        assert jeep.to_dict() == {
            "carType": "SUV",
            "doorType": "FOUR_DOOR",
            "topType": "SOFTTOP",
            "driveType": "FOUR_WHEEL_DRIVE",
            "colorType": "FLASHY_RED",
        }

    def test_to_dict_names_falsy_members(self):
        """A member that is falsy is still written by name, not as None."""

        class Blank(Enum):
            NONE = 0

            def __bool__(self):
                return False

        car = Car(Blank.NONE, DoorType.TWO_DOOR, TopType.HARDTOP,
                  DriveType.TWO_WHEEL_DRIVE, ColorType.FLASHY_RED)
        assert car.to_dict()["carType"] == "NONE"
        assert "car type=NONE" in str(car)

    def test_to_dict_keeps_none(self):
        car = Car.builder().drive_type(None).color_type(ColorType.FLASHY_RED).build()
        assert car.to_dict()["driveType"] is None
