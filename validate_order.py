#!/usr/bin/env python3
"""
Validate car order files.

Checks each file against schema.yaml. The allowed values for every
option come from the builder's enums, so the schema always matches the
options the builder accepts. With --strict, every order is also built
and orders that cannot be built (no color) are reported.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from jsonschema import validate, ValidationError

from builder import BuildException, Car, OPTION_FIELDS, load_orders

ORDERS_DIR = Path(__file__).parent / "orders"


def load_schema() -> dict:
    """Load schema.yaml and fill in option enum lists from the builder enums."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        schema = yaml.safe_load(f)

    order_props = schema["definitions"]["order"]["properties"]
    for key, (setter, enum_cls) in OPTION_FIELDS.items():
        allowed: List[Optional[str]] = [m.name for m in enum_cls]
        # Options with a default may be cleared with null; color may not
        if setter in Car.Builder.DEFAULTS:
            allowed.append(None)
        order_props[key] = {"enum": allowed}
    return schema


def validate_order_file(filepath: Path, schema: dict) -> List[str]:
    """Validate a single order file against the schema. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def check_orders_build(filepath: Path) -> List[str]:
    """Build every order in a schema-valid file. Returns list of failures."""
    errors = []
    for order in load_orders(filepath).orders:
        try:
            order.build()
        except BuildException as e:
            errors.append(f"Order '{order.name}': {e}")
    return errors


def find_order_files(paths: List[Path]) -> List[Path]:
    """Expand directories to the YAML files they contain."""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.glob("*.yaml")) + sorted(path.glob("*.yml")))
        else:
            files.append(path)
    return files


def main(argv=None):
    """Validate order files (default: everything in orders/)."""
    parser = argparse.ArgumentParser(description="Validate car order files")
    parser.add_argument(
        "paths",
        type=Path,
        nargs="*",
        help="Order files or directories (default: orders/)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Also build every order and report orders without a color",
    )
    args = parser.parse_args(argv)

    paths = args.paths or [ORDERS_DIR]
    for path in paths:
        if not path.exists():
            print(f"Error: not found: {path}")
            return 1

    yaml_files = find_order_files(paths)
    if not yaml_files:
        print(f"Warning: No YAML files found in {', '.join(str(p) for p in paths)}")
        return 0

    schema = load_schema()
    all_valid = True
    for filepath in yaml_files:
        errors = validate_order_file(filepath, schema)
        if not errors and args.strict:
            errors = check_orders_build(filepath)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
