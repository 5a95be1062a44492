from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"


def schema_path(schema_name: str) -> Path:
    path = SCHEMA_DIR / schema_name
    if not path.is_file():
        raise FileNotFoundError(f"Schema not found: {path}")
    return path


def load_schema(schema_path: Path) -> Dict[str, Any]:
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_json(instance: Any, schema_path: Path) -> None:
    schema = load_schema(schema_path)
    jsonschema.Draft202012Validator(schema).validate(instance)
