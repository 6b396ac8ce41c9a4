#!/usr/bin/env python3
"""Validate aircraft maintenance YAML files against the schema."""
import argparse
import json
import os
import sys
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError

from maintenance import parse_iso_date
from maintenance.task import TRACK_INTERVAL, TRACK_ONE_TIME


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def check_due_rules(data: dict) -> list[str]:
    """
    Check rules the schema can't express.

    Enabled date rules need a positive number for Interval tasks and a
    yyyy-MM-dd date for One Time tasks.
    """
    warnings = []
    for task in data.get("tasks") or []:
        if not task.get("isDaysDueEnabled"):
            continue
        value = task.get("daysDueValue")
        track_type = task.get("trackType", TRACK_INTERVAL)
        if track_type == TRACK_ONE_TIME and parse_iso_date(value) is None:
            warnings.append(
                f"Task {task.get('id')}: One Time due date must be YYYY-MM-DD, got {value!r}"
            )
        elif track_type == TRACK_INTERVAL:
            try:
                valid = float(value) > 0
            except (TypeError, ValueError):
                valid = False
            if not valid:
                warnings.append(
                    f"Task {task.get('id')}: interval due value must be a positive number, "
                    f"got {value!r}"
                )
    return warnings


def validate_aircraft_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single aircraft YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            # Unquoted YAML dates load as ISO strings, as in the loader
            data = json.loads(json.dumps(yaml.safe_load(f), default=str))
        validate(instance=data, schema=schema)
        errors.extend(check_due_rules(data))
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def validate_directory(aircraft_dir: Path, schema: dict) -> dict[str, list[str]]:
    """Validate every *.yaml / *.yml file in a directory, keyed by file name."""
    paths = sorted(list(aircraft_dir.glob("*.yaml")) + list(aircraft_dir.glob("*.yml")))
    return {path.name: validate_aircraft_file(path, schema) for path in paths}


def main(argv=None):
    """Validate all aircraft YAML files in a directory (default: aircraft/)."""
    default_dir = os.environ.get("MX_AIRCRAFT_DIR", Path(__file__).parent / "aircraft")
    parser = argparse.ArgumentParser(description="Validate aircraft maintenance YAML files")
    parser.add_argument(
        "aircraft_dir",
        nargs="?",
        type=Path,
        default=Path(default_dir),
        help="Directory of aircraft YAML files",
    )
    args = parser.parse_args(argv)

    if not args.aircraft_dir.is_dir():
        print(f"Error: aircraft directory not found: {args.aircraft_dir}")
        return 1

    results = validate_directory(args.aircraft_dir, load_schema())
    if not results:
        print(f"Warning: No YAML files found in {args.aircraft_dir}")
        return 0

    failed = 0
    for name, errors in results.items():
        print(f"{'FAIL' if errors else 'OK'}: {name}")
        for error in errors:
            print(f"  {error}")
        failed += bool(errors)

    print(f"\n{len(results) - failed}/{len(results)} files valid")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
