"""Layered context resolution.

Layers apply in a fixed order (lowest to highest priority):

1. Base context already present in the store (seeded by the caller)
2. Auxiliary documents listed under ``extraContexts``, in listed order
3. The stage document selected by ``stage`` under ``stageContextPath``

Each document's top-level keys are merged into the store one by one using
:func:`strata.core.utils.merge.merge_value`. The control keys are read once,
from the seeded store, before any layer applies.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from strata.core.context.loader import DocumentLoader
from strata.core.context.stage import (
    DEFAULT_STAGE_CONTEXT_PATH,
    StagePathFn,
    is_dev_stage,
    stage_document_paths,
)
from strata.core.context.store import ContextStore
from strata.core.schemas import validate_control_keys
from strata.core.utils.merge import merge_value
from strata.core.utils.timing import phase

logger = logging.getLogger(__name__)

EXTRA_CONTEXTS_KEY = "extraContexts"
STAGE_KEY = "stage"
STAGE_CONTEXT_PATH_KEY = "stageContextPath"
DEBUG_KEY = "debug"

CONTROL_KEYS: tuple[str, ...] = (EXTRA_CONTEXTS_KEY, STAGE_KEY, STAGE_CONTEXT_PATH_KEY)


@dataclass(frozen=True)
class Layer:
    """One document applied on top of the store."""

    kind: str  # "extra" | "stage"
    path: Path


@dataclass(frozen=True)
class ControlKeys:
    extra_contexts: tuple[str, ...]
    stage: Optional[str]
    stage_context_path: str
    debug: bool


class ContextResolver:
    """Apply auxiliary and stage documents to a :class:`ContextStore`.

    Args:
        project_root: Root for relative document paths (auto-detected if None)
        default_stage_context_path: Stage directory when the store has no
            ``stageContextPath``
        stage_paths: Maps ``(stage, stage_context_path)`` to candidate stage
            document paths; the first existing candidate is loaded
        loader: Document loader (built from ``project_root`` if None)
    """

    def __init__(
        self,
        project_root: Optional[Union[str, Path]] = None,
        *,
        default_stage_context_path: str = DEFAULT_STAGE_CONTEXT_PATH,
        stage_paths: StagePathFn = stage_document_paths,
        loader: Optional[DocumentLoader] = None,
    ) -> None:
        self.loader = loader or DocumentLoader(project_root)
        self.default_stage_context_path = default_stage_context_path
        self.stage_paths = stage_paths
        self.applied_layers: List[Layer] = []

    @property
    def project_root(self) -> Path:
        return self.loader.project_root

    def read_control_keys(self, store: ContextStore) -> ControlKeys:
        """Read and validate the keys that steer resolution.

        Raises:
            InvalidContextError: If a control key has the wrong shape.
        """
        raw = {key: store.get(key) for key in CONTROL_KEYS if key in store}
        validate_control_keys(raw)

        return ControlKeys(
            extra_contexts=tuple(raw.get(EXTRA_CONTEXTS_KEY) or ()),
            stage=raw.get(STAGE_KEY),
            stage_context_path=raw.get(STAGE_CONTEXT_PATH_KEY) or self.default_stage_context_path,
            debug=bool(store.get(DEBUG_KEY)),
        )

    def resolve(self, store: ContextStore) -> None:
        """Layer auxiliary and stage documents into ``store`` (in place).

        Raises:
            MissingDocumentError: If a listed auxiliary document does not exist.
            MalformedDocumentError: If a document fails to parse or is not a mapping.
            InvalidContextError: If a control key has the wrong shape.
        """
        self.applied_layers = []
        with phase("context.resolve.total"):
            controls = self.read_control_keys(store)
            with phase("context.resolve.extra", count=len(controls.extra_contexts)):
                self._apply_extra_contexts(store, controls)
            with phase("context.resolve.stage", stage=controls.stage):
                self._apply_stage_context(store, controls)

    def _narrate(self, controls: ControlKeys, msg: str, *args: Any) -> None:
        logger.log(logging.INFO if controls.debug else logging.DEBUG, msg, *args)

    def _apply_extra_contexts(self, store: ContextStore, controls: ControlKeys) -> None:
        if not controls.extra_contexts:
            self._narrate(controls, "No additional contexts provided. Using default context properties")
            return

        for context in controls.extra_contexts:
            document = self.loader.load(context)
            self._narrate(controls, "Adding additional contexts provided in %s", self.loader.resolve(context))
            self.apply_document(store, document)
            self.applied_layers.append(Layer(kind="extra", path=self.loader.resolve(context)))

    def _apply_stage_context(self, store: ContextStore, controls: ControlKeys) -> None:
        stage = controls.stage
        if stage is None:
            self._narrate(controls, "No stage provided. Skipping stage context properties")
            return

        if is_dev_stage(stage):
            self._narrate(controls, "Development stage. Using default stage context properties")

        path = self.find_stage_document(stage, controls.stage_context_path)
        if path is None:
            self._narrate(
                controls,
                "Stage specific context properties unavailable in path: %s. "
                "Using default stage context properties for %s stage",
                Path(controls.stage_context_path) / stage,
                stage,
            )
            return

        document = self.loader.load(path)
        self._narrate(controls, "Adding additional stage contexts provided in %s", self.loader.resolve(path))
        self.apply_document(store, document)
        self.applied_layers.append(Layer(kind="stage", path=self.loader.resolve(path)))

    def find_stage_document(self, stage: str, stage_context_path: str) -> Optional[Path]:
        """Return the first existing stage document candidate, or None."""
        for candidate in self.stage_paths(stage, stage_context_path):
            if self.loader.exists(candidate):
                return Path(candidate)
        return None

    @staticmethod
    def apply_document(store: ContextStore, document: Mapping[str, Any]) -> None:
        """Merge each top-level key of ``document`` into ``store``."""
        for key, value in document.items():
            store.set(key, merge_value(store.lookup(key), value))


def resolve_context(
    store: ContextStore,
    project_root: Optional[Union[str, Path]] = None,
    **kwargs: Any,
) -> List[Layer]:
    """Resolve ``store`` in place and return the layers that were applied."""
    resolver = ContextResolver(project_root, **kwargs)
    resolver.resolve(store)
    return list(resolver.applied_layers)


__all__ = [
    "EXTRA_CONTEXTS_KEY",
    "STAGE_KEY",
    "STAGE_CONTEXT_PATH_KEY",
    "DEBUG_KEY",
    "CONTROL_KEYS",
    "Layer",
    "ControlKeys",
    "ContextResolver",
    "resolve_context",
]
