"""
Fluent builder for car configurations.

This package provides:
- CarType, DoorType, TopType, DriveType, ColorType: Option enums
- BuildException: Raised when a required option is missing
- Car: Immutable car value object with a nested fluent Builder
- Order, OrderBook: Named configurations from an order file
- Loader functions for reading and writing YAML order files
"""

from .car_type import CarType
from .door_type import DoorType
from .top_type import TopType
from .drive_type import DriveType
from .color_type import ColorType
from .build_exception import BuildException
from .car import Car
from .order import Order, OrderBook
from .loader import (
    OPTION_FIELDS,
    parse_option,
    builder_from_options,
    load_orders,
    save_order,
    delete_order,
)

__all__ = [
    "CarType",
    "DoorType",
    "TopType",
    "DriveType",
    "ColorType",
    "BuildException",
    "Car",
    "Order",
    "OrderBook",
    "OPTION_FIELDS",
    "parse_option",
    "builder_from_options",
    "load_orders",
    "save_order",
    "delete_order",
]
