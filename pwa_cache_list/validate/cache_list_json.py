from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import ExecFailureError

_MAX_REPORTED = 8


def _schema_path() -> Path:
    # pwa_cache_list/validate/cache_list_json.py -> pwa_cache_list/schemas/
    return Path(__file__).resolve().parents[1] / "schemas" / "cache-list.schema.json"


def _load_schema(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExecFailureError(f"Failed to read JSON schema: {str(path)!r}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ExecFailureError(f"Invalid JSON schema: {str(path)!r}: {exc}") from exc

    if not isinstance(data, dict):
        raise ExecFailureError(
            f"Invalid JSON schema: {str(path)!r}: root must be object"
        )
    return data


def _format_path(error: jsonschema.ValidationError) -> str:
    if not error.path:
        return "$"
    parts = []
    for p in error.path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append("." + str(p))
    return "$" + "".join(parts)


def _validate_group_semantics(payload: dict[str, Any]) -> list[str]:
    groups = payload.get("groups")
    include = payload.get("include")
    if not isinstance(groups, list) or not isinstance(include, list):
        return []

    flattened: list[object] = []
    for g in groups:
        if isinstance(g, dict) and isinstance(g.get("urls"), list):
            flattened.extend(g["urls"])
    if flattened != include:
        return ["groups urls must concatenate to include"]
    return []


def _raise_if_any(errors: list[str]) -> None:
    if not errors:
        return
    joined = "; ".join(errors[:_MAX_REPORTED])
    extra = len(errors) - _MAX_REPORTED
    more = "" if extra <= 0 else f" (+{extra} more)"
    raise ExecFailureError(f"Cache list JSON validation failed: {joined}{more}")


def validate_cache_list_json(payload: object) -> None:
    if not isinstance(payload, dict):
        raise ExecFailureError("Cache list JSON must be an object")

    schema_path = _schema_path()
    schema = _load_schema(schema_path)

    try:
        validator_cls = jsonschema.validators.validator_for(schema)
        validator_cls.check_schema(schema)
        validator = validator_cls(schema)
    except jsonschema.SchemaError as exc:
        raise ExecFailureError(f"Invalid JSON schema: {schema_path}: {exc}") from exc

    schema_errors = sorted(validator.iter_errors(payload), key=lambda e: list(e.path))
    _raise_if_any([f"{_format_path(e)}: {e.message}" for e in schema_errors])
    _raise_if_any(_validate_group_semantics(payload))
