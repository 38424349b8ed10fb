"""Schema validation utilities for Strata."""
from __future__ import annotations

from .validation import (
    CONTEXT_SCHEMA,
    collect_errors,
    load_schema,
    validate_control_keys,
)

__all__ = [
    "CONTEXT_SCHEMA",
    "load_schema",
    "collect_errors",
    "validate_control_keys",
]
