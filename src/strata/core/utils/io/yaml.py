"""YAML parse helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


def parse_yaml_string(content: str) -> Any:
    """Parse YAML text. Raises ``yaml.YAMLError`` on invalid input."""
    return yaml.safe_load(content)


def is_yaml_path(path: Path) -> bool:
    """Return True when ``path`` has a YAML suffix."""
    return Path(path).suffix.lower() in YAML_SUFFIXES


__all__ = [
    "YAML_SUFFIXES",
    "parse_yaml_string",
    "is_yaml_path",
]
