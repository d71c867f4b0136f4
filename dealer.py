#!/usr/bin/env python3
"""
Dealer CLI for building cars with the fluent builder.

Commands:
  demo     - Build the showroom examples, including one that fails
  build    - Build a single car from command-line options
  order    - Build every order in an order file
  add      - Build a car and append it to an order file
  options  - List available options and their defaults
"""

import argparse
import sys
from pathlib import Path
from tabulate import tabulate
from typing import Any, Dict, List, Optional, Tuple

import yaml

from builder import (
    BuildException,
    Car,
    CarType,
    ColorType,
    DoorType,
    DriveType,
    OPTION_FIELDS,
    Order,
    TopType,
    builder_from_options,
    load_orders,
    save_order,
)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_option(value: Optional[Any]) -> str:
    """Format an option value for display."""
    return value.name if value is not None else "-"


def make_car_table(cars: List[Tuple[str, Car]]) -> List[List[str]]:
    """Convert named cars to table rows."""
    rows = []
    for name, car in cars:
        rows.append(
            [
                name,
                format_option(car.car_type),
                format_option(car.door_type),
                format_option(car.top_type),
                format_option(car.drive_type),
                format_option(car.color_type),
            ]
        )
    return rows


CAR_HEADERS = ["Name", "Car Type", "Doors", "Top", "Drive", "Color"]


def options_from_args(args) -> Dict[str, Optional[str]]:
    """Collect the option flags that were given, keyed like an order file."""
    given = {
        "carType": args.car_type,
        "doorType": args.door_type,
        "topType": args.top_type,
        "driveType": args.drive_type,
        "colorType": args.color,
    }
    return {k: v for k, v in given.items() if v is not None}


# =============================================================================
# Demo command
# =============================================================================


def cmd_demo(args):
    """Build the showroom examples, including one that fails."""
    basic = Car.builder().color_type(ColorType.FLASHY_RED).build()
    print(f"Basic={basic}")

    jeep = (
        Car.builder()
        .car_type(CarType.SUV)
        .color_type(ColorType.FLASHY_RED)
        .door_type(DoorType.FOUR_DOOR)
        .drive_type(DriveType.FOUR_WHEEL_DRIVE)
        .top_type(TopType.SOFTTOP)
        .build()
    )
    print(f"Jeep={jeep}")

    try:
        Car.builder().build()
    except BuildException as e:
        print(e)

    return 0


# =============================================================================
# Build command
# =============================================================================


def cmd_build(args):
    """Build a single car from command-line options."""
    try:
        car = builder_from_options(options_from_args(args)).build()
    except (BuildException, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(car)
    print()
    rows = [
        ["Car type", format_option(car.car_type)],
        ["Door type", format_option(car.door_type)],
        ["Top type", format_option(car.top_type)],
        ["Drive type", format_option(car.drive_type)],
        ["Color", format_option(car.color_type)],
    ]
    print(tabulate(rows, headers=["Option", "Value"], tablefmt="simple"))
    return 0


# =============================================================================
# Order command
# =============================================================================


def build_orders(
    orders: List[Order],
) -> Tuple[List[Tuple[str, Car]], List[Tuple[str, str]]]:
    """Build every order. Returns (built cars, failures as (name, message))."""
    built = []
    failed = []
    for order in orders:
        try:
            built.append((order.name, order.build()))
        except BuildException as e:
            failed.append((order.name, str(e)))
    return built, failed


def cmd_order(args):
    """Build every order in an order file."""
    try:
        book = load_orders(args.order_file)
    except (ValueError, yaml.YAMLError, OSError) as e:
        print(f"Error: {e}")
        return 1

    built, failed = build_orders(book.orders)

    print(f"Dealer: {book.title}")
    print(f"Orders: {len(book.orders)}")
    print()

    if not book.orders:
        print("No orders found.")
        return 0

    if built:
        print("BUILT:")
        print(tabulate(make_car_table(built), headers=CAR_HEADERS, tablefmt="simple"))
        print()

    if failed:
        print("FAILED:")
        for name, message in failed:
            print(f"  {name}: {message}")
        print()
        return 1

    return 0


# =============================================================================
# Add command
# =============================================================================


def cmd_add(args):
    """Build a car and append it to an order file."""
    try:
        car = builder_from_options(options_from_args(args)).build()
    except (BuildException, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Adding order to {args.order_file}:")
    print(f"  Name: {args.name}")
    print(f"  Car:  {car}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    try:
        save_order(args.order_file, args.name, car)
    except (ValueError, yaml.YAMLError, OSError) as e:
        print(f"Error: {e}")
        return 1
    print("Order saved.")
    return 0


# =============================================================================
# Options command
# =============================================================================


def cmd_options(args):
    """List available options and their defaults."""
    defaults = Car.Builder.DEFAULTS
    rows = []
    for key, (setter, enum_cls) in OPTION_FIELDS.items():
        default = defaults.get(setter)
        rows.append(
            [
                key,
                ", ".join(m.name for m in enum_cls),
                default.name if default is not None else "(required)",
            ]
        )
    print(tabulate(rows, headers=["Option", "Values", "Default"], tablefmt="simple"))
    return 0


# =============================================================================
# Main
# =============================================================================


def add_option_flags(parser: argparse.ArgumentParser) -> None:
    """Add the five car option flags to a subcommand parser."""
    parser.add_argument(
        "--car-type",
        type=str,
        help="Body style (e.g., 'SUV', 'sedan')",
    )
    parser.add_argument(
        "--door-type",
        type=str,
        help="Doors (e.g., 'FOUR_DOOR', 'four-door')",
    )
    parser.add_argument(
        "--top-type",
        type=str,
        help="Roof (e.g., 'HARDTOP', 'softtop')",
    )
    parser.add_argument(
        "--drive-type",
        type=str,
        help="Drive (e.g., 'FOUR_WHEEL_DRIVE')",
    )
    parser.add_argument(
        "--color",
        type=str,
        help="Paint color, required (e.g., 'FLASHY_RED')",
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Fluent car builder dealer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo
  %(prog)s build --color flashy_red
  %(prog)s build --car-type suv --door-type four-door --color midnight_black
  %(prog)s order orders/showroom.yaml
  %(prog)s add orders/showroom.yaml "weekend car" \\
      --car-type convertible --top-type softtop --color ocean_blue
  %(prog)s options
""",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Demo subcommand
    subparsers.add_parser(
        "demo", help="Build the showroom examples, including one that fails"
    )

    # Build subcommand
    build_parser = subparsers.add_parser(
        "build", help="Build a single car from command-line options"
    )
    add_option_flags(build_parser)

    # Order subcommand
    order_parser = subparsers.add_parser(
        "order", help="Build every order in an order file"
    )
    order_parser.add_argument(
        "order_file",
        type=Path,
        help="Path to order YAML file",
    )

    # Add subcommand
    add_parser = subparsers.add_parser(
        "add", help="Build a car and append it to an order file"
    )
    add_parser.add_argument(
        "order_file",
        type=Path,
        help="Path to order YAML file (created if missing)",
    )
    add_parser.add_argument(
        "name",
        type=str,
        help="Order name (e.g., 'family sedan')",
    )
    add_option_flags(add_parser)
    add_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be added without saving",
    )

    # Options subcommand
    subparsers.add_parser("options", help="List available options and defaults")

    args = parser.parse_args(argv)

    # Validate order file exists
    if args.command == "order" and not args.order_file.exists():
        print(f"Error: File not found: {args.order_file}")
        return 1

    # Dispatch to command handler
    if args.command == "demo":
        return cmd_demo(args)
    elif args.command == "build":
        return cmd_build(args)
    elif args.command == "order":
        return cmd_order(args)
    elif args.command == "add":
        return cmd_add(args)
    elif args.command == "options":
        return cmd_options(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
