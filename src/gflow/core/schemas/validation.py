"""Schema validation for gflow configuration.

Schemas are stored as YAML files under ``gflow.data/schemas`` and validated
with JSON Schema (Draft 2020-12).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from gflow.core.exceptions import ConfigError
from gflow.data import read_yaml


@lru_cache(maxsize=8)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema by name (e.g. ``config``)."""
    return read_yaml("schemas", f"{schema_name}.schema.yaml")


def _format_error_path(path: List[Any]) -> str:
    return ".".join(str(p) for p in path) or "<root>"


def validate_payload(payload: Dict[str, Any], schema_name: str) -> None:
    """Validate ``payload`` against a bundled schema.

    Raises:
        ConfigError: listing every violation, sorted by location.
    """
    validator = Draft202012Validator(load_schema(schema_name))
    errors = sorted(validator.iter_errors(payload), key=lambda e: _format_error_path(list(e.path)))
    if not errors:
        return

    details = [f"{_format_error_path(list(e.path))}: {e.message}" for e in errors]
    raise ConfigError(
        f"Invalid {schema_name} configuration: " + "; ".join(details),
        context={"schema": schema_name, "errors": details},
    )


__all__ = ["load_schema", "validate_payload"]
