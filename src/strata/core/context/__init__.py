"""Context resolution for Strata stacks.

Usage:
    from strata.core.context import ContextStore, ContextResolver, resolve_properties

    store = ContextStore.from_manifest("cdk.json", project_root=root)
    ContextResolver(root).resolve(store)
    props = resolve_properties(store, ["domainName", "stage"])
"""
from __future__ import annotations

from .engine import (
    CONTROL_KEYS,
    DEBUG_KEY,
    EXTRA_CONTEXTS_KEY,
    STAGE_CONTEXT_PATH_KEY,
    STAGE_KEY,
    ContextResolver,
    ControlKeys,
    Layer,
    resolve_context,
)
from .env import ENV_PREFIX, apply_env_overrides, coerce_value
from .loader import DocumentLoader
from .properties import ResolvedProperties, resolve_properties
from .stage import (
    DEFAULT_STAGE_CONTEXT_PATH,
    is_dev_stage,
    is_prd_stage,
    is_test_stage,
    is_uat_stage,
    stage_document_paths,
)
from .store import ContextStore

__all__ = [
    # store
    "ContextStore",
    # loading
    "DocumentLoader",
    # resolution
    "ContextResolver",
    "ControlKeys",
    "Layer",
    "resolve_context",
    "CONTROL_KEYS",
    "DEBUG_KEY",
    "EXTRA_CONTEXTS_KEY",
    "STAGE_KEY",
    "STAGE_CONTEXT_PATH_KEY",
    # properties
    "ResolvedProperties",
    "resolve_properties",
    # stage
    "DEFAULT_STAGE_CONTEXT_PATH",
    "stage_document_paths",
    "is_dev_stage",
    "is_test_stage",
    "is_uat_stage",
    "is_prd_stage",
    # env
    "ENV_PREFIX",
    "apply_env_overrides",
    "coerce_value",
]
