"""Canonical deep merge utilities.

This module provides the single source of truth for layering one context
value over another. Every layer (auxiliary documents, stage documents) goes
through :func:`merge_value`.

Semantics:
- Mappings merge recursively, key by key
- Lists are atomic: an overlay list replaces the base list entirely
- Scalars (str, int, float, bool, None) replace the base value entirely
"""
from __future__ import annotations

from typing import Any, Dict, Mapping


class _Missing:
    """Marker for a key that has no value yet."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_mapping(value: Any) -> bool:
    """Return True for mapping values (never for lists or scalars)."""
    return isinstance(value, Mapping)


def merge_value(base: Any, overlay: Any) -> Any:
    """Merge ``overlay`` onto ``base`` without mutating either.

    Args:
        base: Existing value, or ``MISSING`` when the key is undefined
        overlay: Value from the higher-priority layer

    Returns:
        The merged value. When ``overlay`` is a list or scalar, or ``base``
        is not a mapping, ``overlay`` itself is returned.

    Example:
        >>> merge_value({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
        >>> merge_value({"a": 1}, ["x"])
        ['x']
    """
    if base is MISSING:
        return overlay
    if is_mapping(base) and is_mapping(overlay):
        return deep_merge(base, overlay)
    return overlay


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge mappings without mutating inputs.

    Args:
        base: Base mapping (lower priority)
        override: Override mapping (higher priority)

    Returns:
        New merged dictionary

    Example:
        >>> base = {"api": {"timeout": 30, "retries": 3}}
        >>> override = {"api": {"timeout": 60}}
        >>> deep_merge(base, override)
        {'api': {'timeout': 60, 'retries': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if key in result and is_mapping(result[key]) and is_mapping(value):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


__all__ = ["MISSING", "is_mapping", "merge_value", "deep_merge"]
