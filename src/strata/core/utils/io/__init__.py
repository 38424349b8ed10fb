"""I/O utilities for Strata.

- JSON: parse helpers
- YAML: parse helpers and suffix detection
"""
from __future__ import annotations

from .json import parse_json_string
from .yaml import YAML_SUFFIXES, is_yaml_path, parse_yaml_string

__all__ = [
    # json
    "parse_json_string",
    # yaml
    "YAML_SUFFIXES",
    "parse_yaml_string",
    "is_yaml_path",
]
