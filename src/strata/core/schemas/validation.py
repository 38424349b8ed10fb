"""Shared schema validation utilities.

Strata validates the control keys of a context store (``extraContexts``,
``stage``, ``stageContextPath``) using JSON Schema. Schemas are stored as
YAML files under ``strata.data/schemas/`` and loaded in a single, consistent
way.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from jsonschema import Draft202012Validator

from strata.core.exceptions import InvalidContextError
from strata.data import get_data_path, read_yaml

CONTEXT_SCHEMA = "context.schema.yaml"


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema dict.

    Automatically appends ``.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"

    if not get_data_path("schemas", schema_name).exists():
        raise FileNotFoundError(f"Schema not found: {schema_name}")

    schema = read_yaml("schemas", schema_name)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def collect_errors(payload: Mapping[str, Any], schema_name: str) -> List[str]:
    """Validate a payload and return error messages (empty if valid)."""
    validator = Draft202012Validator(load_schema(schema_name))

    errors: List[str] = []
    for error in sorted(validator.iter_errors(dict(payload)), key=lambda e: str(e.path)):
        if error.path:
            path_str = ".".join(str(p) for p in error.path)
            errors.append(f"{path_str}: {error.message}")
        else:
            errors.append(error.message)
    return errors


def validate_control_keys(values: Mapping[str, Any]) -> None:
    """Validate the resolution control keys.

    Args:
        values: Mapping of control key to its value. Absent keys are omitted.

    Raises:
        InvalidContextError: If any control key has the wrong shape.
    """
    errors = collect_errors(values, CONTEXT_SCHEMA)
    if errors:
        raise InvalidContextError(
            "Invalid context control keys: " + "; ".join(errors),
            context={"errors": errors},
        )


__all__ = [
    "CONTEXT_SCHEMA",
    "load_schema",
    "collect_errors",
    "validate_control_keys",
]
