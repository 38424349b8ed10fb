"""Path utilities for Strata."""
from __future__ import annotations

from .resolver import (
    PROJECT_ROOT_ENV,
    ROOT_MARKERS,
    find_marked_root,
    resolve_project_root,
)

__all__ = [
    "PROJECT_ROOT_ENV",
    "ROOT_MARKERS",
    "find_marked_root",
    "resolve_project_root",
]
