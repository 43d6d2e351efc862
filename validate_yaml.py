#!/usr/bin/env python3
"""
Validate vehicle record YAML files.

Two passes per file:
1. JSON schema (schema.yaml): structure, required keys, date shape
2. Record checks the schema cannot express:
   - dates that look right but do not exist (2024-02-30)
   - a NaN service interval
   - the same document kind listed twice
"""
import json
import math
import sys
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jsonschema import Draft7Validator

from vehicle_status.calculations import parse_anchor

VEHICLES_DIR = Path(__file__).parent / "vehicles"


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def _where(path) -> str:
    return ".".join(str(p) for p in path) or "(root)"


def schema_errors(data: Any, schema: dict) -> List[str]:
    """Every schema violation in document order, as 'path: message'."""
    validator = Draft7Validator(schema)
    found = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.path)))
    return [f"{_where(e.path)}: {e.message}" for e in found]


def record_errors(data: Dict[str, Any]) -> List[str]:
    """Checks run once the record matches the schema."""
    errors = []
    dated = [("service", data.get("service") or {}, ["lastServiceDate"])]
    dated += [
        (f"documents.{i}", doc, ["issueDate", "expiryDate"])
        for i, doc in enumerate(data.get("documents") or [])
    ]
    for where, dct, keys in dated:
        for key in keys:
            try:
                parse_anchor(dct.get(key))
            except ValueError:
                errors.append(f"{where}.{key}: not a real date: {dct[key]!r}")

    interval = (data.get("service") or {}).get("intervalMonths")
    if interval is not None and not math.isfinite(interval):
        errors.append(f"service.intervalMonths: not a finite number: {interval!r}")

    seen = {}
    for i, doc in enumerate(data.get("documents") or []):
        kind = doc["kind"].lower()
        if kind in seen:
            errors.append(
                f"documents.{i}.kind: duplicate of documents.{seen[kind]} ({doc['kind']!r})"
            )
        else:
            seen[kind] = i
    return errors


def validate_vehicle_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single vehicle YAML file. Returns list of errors."""
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]

    # Unquoted YAML dates load as date objects; check them as ISO strings
    data = json.loads(json.dumps(data, default=str))
    errors = schema_errors(data, schema)
    if errors:
        return [f"Schema validation error at {e}" for e in errors]
    return record_errors(data)


def main(argv=None):
    """Validate the given vehicle files, or every file in vehicles/."""
    schema = load_schema()
    paths = [Path(p) for p in (argv if argv is not None else sys.argv[1:])]

    if not paths:
        if not VEHICLES_DIR.exists():
            print(f"Error: vehicles directory not found: {VEHICLES_DIR}")
            return 1
        paths = list(VEHICLES_DIR.glob("*.yaml")) + list(VEHICLES_DIR.glob("*.yml"))
        if not paths:
            print(f"Warning: No YAML files found in {VEHICLES_DIR}")
            return 0

    failed = 0
    for filepath in sorted(paths):
        errors = validate_vehicle_file(filepath, schema)
        print(f"{'FAIL' if errors else 'OK'}: {filepath.name}")
        for error in errors:
            print(f"  {error}")
        failed += bool(errors)

    if len(paths) > 1:
        print(f"{len(paths) - failed}/{len(paths)} valid")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
