from __future__ import annotations

from typing import Any, Mapping, Optional

from strata.core.context import ContextStore, ResolvedProperties
from strata.stacks.base import CommonStack, ContextSeed


class CloudflareStack(CommonStack):
    """Cloudflare stack.

    The stack props are the context itself. Without props (or an explicit
    context), ``pulumi.json`` under the project root seeds the store and must
    exist.
    """

    MANIFEST = "pulumi.json"
    DEFAULT_STAGE_CONTEXT_PATH = "env"
    PROPERTY_KEYS = (
        "accountId",
        "apiToken",
        "domainName",
        "extraContexts",
        "skipStageForARecords",
        "stage",
        "stageContextPath",
        "subDomain",
    )

    def seed_context(
        self, context: ContextSeed, props: Optional[Mapping[str, Any]]
    ) -> ContextStore:
        if context is None and props:
            return ContextStore(props)
        if context is None:
            # Raises MissingDocumentError when the manifest is absent.
            return ContextStore.from_manifest(self.MANIFEST, project_root=self.project_root)
        return super().seed_context(context, props)

    def determine_construct_props(self, props: Mapping[str, Any]) -> ResolvedProperties:
        resolved = super().determine_construct_props(props)
        name = self.context.get("resourceGroupName")
        if name is None:
            name = self.context.get("name")
        return resolved.with_values(name=name)


__all__ = ["CloudflareStack"]
