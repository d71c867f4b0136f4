"""YAML loading and saving utilities for car order files."""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type, Union

import yaml

from .car import Car
from .car_type import CarType
from .color_type import ColorType
from .door_type import DoorType
from .drive_type import DriveType
from .order import Order, OrderBook
from .top_type import TopType

# Order file key -> (builder setter, enum)
OPTION_FIELDS: Dict[str, Tuple[str, Type[Enum]]] = {
    "carType": ("car_type", CarType),
    "doorType": ("door_type", DoorType),
    "topType": ("top_type", TopType),
    "driveType": ("drive_type", DriveType),
    "colorType": ("color_type", ColorType),
}


def parse_option(enum_cls: Type[Enum], value: Any) -> Optional[Enum]:
    """
    Convert an option value to a member of enum_cls.

    Accepts a member, None, or a member name. Names are matched
    case-insensitively and spaces or hyphens count as underscores,
    so "four-door" and "FOUR_DOOR" are the same choice.
    """
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key in enum_cls.__members__:
            return enum_cls[key]
    allowed = ", ".join(m.name for m in enum_cls)
    raise ValueError(
        f"Unknown {enum_cls.__name__} '{value}' (expected one of: {allowed})"
    )


def builder_from_options(options: Dict[str, Any]) -> Car.Builder:
    """Create a builder and apply every option key present in the mapping."""
    builder = Car.builder()
    for key, (setter, enum_cls) in OPTION_FIELDS.items():
        if key in options:
            getattr(builder, setter)(parse_option(enum_cls, options[key]))
    return builder


def _parse_object(dct: Dict[str, Any]) -> Union[Order, OrderBook, dict]:
    """Parse dictionary into appropriate object type."""
    # Top-level order file
    if "orders" in dct:
        orders = dct["orders"] or []
        for i, order in enumerate(orders):
            if not isinstance(order, Order):
                raise ValueError(f"Order #{i + 1} has no name")
        return OrderBook(dct.get("dealer"), orders)
    # Single order
    elif "name" in dct:
        return Order(str(dct["name"]), builder_from_options(dct))
    else:
        return dct


def load_orders(filename: Union[str, Path]) -> OrderBook:
    """
    Load an order file.

    Builders are returned unbuilt, so an order without a color loads
    fine and only fails when it is built.
    """
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader) or {}
    if not isinstance(data, dict):
        raise ValueError("Order file must be a mapping with an 'orders' list")
    if "orders" not in data:
        data["orders"] = []
    # YAML timestamps (e.g. an order named 2024-05-01) come through as strings
    json_data = json.dumps(data, indent=4, default=str)
    return json.loads(json_data, object_hook=_parse_object)


def save_order(filename: Union[str, Path], name: str, car: Car) -> None:
    """
    Append an order to an order file.

    Creates the file if it does not exist. Loads the raw YAML, appends
    the order to the orders list, and writes back to the file.
    """
    data: Dict[str, Any] = {}
    if Path(filename).exists():
        with open(filename, "r") as fp:
            data = yaml.load(fp, Loader=yaml.SafeLoader) or {}
    if not isinstance(data, dict):
        raise ValueError("Order file must be a mapping with an 'orders' list")

    # Ensure orders list exists
    if data.get("orders") is None:
        data["orders"] = []

    entry: Dict[str, Any] = {"name": name}
    entry.update(car.to_dict())
    data["orders"].append(entry)

    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def delete_order(filename: Union[str, Path], index: int) -> None:
    """
    Remove the order at the given index in an order file.

    Loads the raw YAML, removes orders[index], and writes back to the file.
    """
    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader) or {}

    orders = data.get("orders") or []
    if index < 0 or index >= len(orders):
        raise IndexError(f"Order index {index} out of range (0..{len(orders) - 1})")

    del orders[index]

    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )
