"""Project root resolution for Strata.

Every relative document path (auxiliary contexts, stage contexts, manifests)
is resolved against the project root. Resolution order:

1. An explicit root passed by the caller
2. ``STRATA_PROJECT_ROOT`` environment variable
3. Nearest ancestor of the working directory holding a deployment manifest
   (``cdk.json``, ``cdktf.json``, ``pulumi.json``) or a ``.git`` entry
4. The working directory itself
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence, Union

from strata.core.exceptions import ProjectRootError

PROJECT_ROOT_ENV = "STRATA_PROJECT_ROOT"

ROOT_MARKERS: tuple[str, ...] = ("cdk.json", "cdktf.json", "pulumi.json", ".git")


def find_marked_root(start: Path, markers: Sequence[str] = ROOT_MARKERS) -> Optional[Path]:
    """Return the first directory at or above ``start`` containing a marker."""
    p = Path(start).resolve()
    if p.is_file():
        p = p.parent
    for candidate in [p, *p.parents]:
        if any((candidate / marker).exists() for marker in markers):
            return candidate
    return None


def resolve_project_root(explicit: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the project root.

    Args:
        explicit: Caller-supplied root; wins over every other source.

    Returns:
        Path: Absolute project root

    Raises:
        ProjectRootError: If ``STRATA_PROJECT_ROOT`` points at a missing directory
    """
    if explicit is not None:
        return Path(explicit).expanduser().resolve()

    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if not env_path.is_dir():
            raise ProjectRootError(
                f"{PROJECT_ROOT_ENV} points at missing directory: {env_path}",
                context={"env": PROJECT_ROOT_ENV, "path": str(env_path)},
            )
        return env_path

    cwd = Path.cwd().resolve()
    return find_marked_root(cwd) or cwd


__all__ = [
    "PROJECT_ROOT_ENV",
    "ROOT_MARKERS",
    "find_marked_root",
    "resolve_project_root",
]
