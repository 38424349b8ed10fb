"""Shared utilities for Strata core.

- merge: layer merge policy
- io: JSON/YAML parsing
- paths: project root resolution
- timing: optional resolution phase timings
"""
from __future__ import annotations

from .merge import MISSING, deep_merge, is_mapping, merge_value

__all__ = ["MISSING", "deep_merge", "is_mapping", "merge_value"]
