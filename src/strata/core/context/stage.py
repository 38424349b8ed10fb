"""Stage helpers.

A stage names a deployment environment (``dev``, ``tst``, ``uat``, ``prd``)
and selects at most one stage document. The mapping from stage to document
path is a plain function so callers and tests can replace it.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence

DEFAULT_STAGE_CONTEXT_PATH = "cdkEnv"

STAGE_DOCUMENT_EXTENSIONS: tuple[str, ...] = (".json", ".yaml", ".yml")

DEV_STAGE = "dev"
TEST_STAGE = "tst"
UAT_STAGE = "uat"
PRD_STAGE = "prd"

# (stage, stage_context_path) -> candidate document paths, most preferred first
StagePathFn = Callable[[str, str], Sequence[Path]]


def stage_document_paths(stage: str, stage_context_path: str) -> tuple[Path, ...]:
    """Candidate stage document paths for ``stage``.

    Example:
        >>> [str(p) for p in stage_document_paths("prd", "cdkEnv")]
        ['cdkEnv/prd.json', 'cdkEnv/prd.yaml', 'cdkEnv/prd.yml']
    """
    directory = Path(stage_context_path)
    return tuple(directory / f"{stage}{ext}" for ext in STAGE_DOCUMENT_EXTENSIONS)


def is_dev_stage(stage: Optional[str]) -> bool:
    return stage == DEV_STAGE


def is_test_stage(stage: Optional[str]) -> bool:
    return stage == TEST_STAGE


def is_uat_stage(stage: Optional[str]) -> bool:
    return stage == UAT_STAGE


def is_prd_stage(stage: Optional[str]) -> bool:
    return stage == PRD_STAGE


__all__ = [
    "DEFAULT_STAGE_CONTEXT_PATH",
    "STAGE_DOCUMENT_EXTENSIONS",
    "DEV_STAGE",
    "TEST_STAGE",
    "UAT_STAGE",
    "PRD_STAGE",
    "StagePathFn",
    "stage_document_paths",
    "is_dev_stage",
    "is_test_stage",
    "is_uat_stage",
    "is_prd_stage",
]
