"""JSON parse helpers."""
from __future__ import annotations

import json
from typing import Any


def parse_json_string(content: str) -> Any:
    """Parse JSON text.

    Raises:
        json.JSONDecodeError: If ``content`` is not valid JSON
    """
    return json.loads(content)


__all__ = ["parse_json_string"]
