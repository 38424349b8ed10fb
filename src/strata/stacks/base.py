"""Common stack base class.

A stack owns one :class:`ContextStore`. Construction runs, in order:

1. seed the store (caller-supplied store or mapping, else the manifest)
2. apply ``STRATA_CONTEXT_*`` environment overrides to the seed
3. layer auxiliary and stage documents (:class:`ContextResolver`)
4. read the variant's ``PROPERTY_KEYS`` into ``self.props``

Usage:
    class CustomStack(AwsStack):
        PROPERTY_KEYS = AwsStack.PROPERTY_KEYS + ("testAttribute",)

    stack = CustomStack("my-stack", {"stackName": "test"}, project_root=root)
    stack.props["testAttribute"]
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from strata.core.context import (
    ContextResolver,
    ContextStore,
    ResolvedProperties,
    apply_env_overrides,
    resolve_properties,
)
from strata.core.context.env import ENV_PREFIX
from strata.core.context.stage import DEFAULT_STAGE_CONTEXT_PATH, StagePathFn, stage_document_paths

logger = logging.getLogger(__name__)

ContextSeed = Union[ContextStore, Mapping[str, Any], None]


class CommonStack:
    """Base for provider stacks; subclasses declare ``PROPERTY_KEYS``."""

    MANIFEST: str = "cdk.json"
    DEFAULT_STAGE_CONTEXT_PATH: str = DEFAULT_STAGE_CONTEXT_PATH
    PROPERTY_KEYS: tuple[str, ...] = (
        "domainName",
        "extraContexts",
        "stage",
        "subDomain",
    )

    def __init__(
        self,
        name: str,
        props: Optional[Mapping[str, Any]] = None,
        *,
        context: ContextSeed = None,
        project_root: Optional[Union[str, Path]] = None,
        stage_paths: StagePathFn = stage_document_paths,
        env_prefix: Optional[str] = ENV_PREFIX,
    ) -> None:
        self.name = name
        self.resolver = ContextResolver(
            project_root,
            default_stage_context_path=self.DEFAULT_STAGE_CONTEXT_PATH,
            stage_paths=stage_paths,
        )

        self.context = self.seed_context(context, props)
        if env_prefix is not None:
            apply_env_overrides(self.context, prefix=env_prefix)

        # determine extra contexts, then stage contexts
        self.resolver.resolve(self.context)

        self.props: ResolvedProperties = self.determine_construct_props(props or {})

    @property
    def project_root(self) -> Path:
        return self.resolver.project_root

    def seed_context(
        self, context: ContextSeed, props: Optional[Mapping[str, Any]]
    ) -> ContextStore:
        """Return the store this stack resolves into.

        A supplied store is used as is (and mutated); a mapping is wrapped in
        a new store. Without either, the manifest seeds the store when present.
        """
        if isinstance(context, ContextStore):
            return context
        if context is not None:
            return ContextStore(context)

        loader = self.resolver.loader
        if loader.exists(self.MANIFEST):
            logger.debug("Seeding context from %s", loader.resolve(self.MANIFEST))
            return ContextStore.from_manifest(self.MANIFEST, project_root=self.project_root)
        return ContextStore()

    def get_context(self, key: str, default: Any = None) -> Any:
        return self.context.get(key, default)

    def determine_construct_props(self, props: Mapping[str, Any]) -> ResolvedProperties:
        """Read ``PROPERTY_KEYS`` from the resolved context.

        Subclasses extend this to add derived or stack-specific values.
        """
        return resolve_properties(self.context, self.PROPERTY_KEYS)

    def fully_qualified_domain(self) -> Optional[str]:
        """``subDomain.domainName`` when a sub domain is set, else ``domainName``."""
        domain_name = self.props.get("domainName")
        sub_domain = self.props.get("subDomain")
        return f"{sub_domain}.{domain_name}" if sub_domain else domain_name


__all__ = ["CommonStack", "ContextSeed"]
