from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import ScriptError
from ..exit_codes import ERR_VALIDATION


def schemas_root() -> Path:
    return Path(__file__).resolve().parent / "schemas"


def schema_path_for(schema_name: str) -> Path:
    path = schemas_root() / f"{schema_name}.schema.json"
    if not path.is_file():
        raise ScriptError(f"unknown schema `{schema_name}`", ERR_VALIDATION, "unknown_schema")
    return path


def validate(schema_name: str, payload: Any) -> None:
    schema = json.loads(schema_path_for(schema_name).read_text(encoding="utf-8"))
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ScriptError(
            f"schema validation failed for {schema_name} at {loc}: {exc.message}",
            ERR_VALIDATION,
            "schema_validation",
        ) from exc
