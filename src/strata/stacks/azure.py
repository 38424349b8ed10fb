from __future__ import annotations

from typing import Any, Mapping

from strata.core.context import ResolvedProperties
from strata.stacks.base import CommonStack


class AzureStack(CommonStack):
    """Azure stack; context seeded from ``cdktf.json``.

    The stack ``name`` is the resource group name.
    """

    MANIFEST = "cdktf.json"
    DEFAULT_STAGE_CONTEXT_PATH = "cdkEnv"
    PROPERTY_KEYS = (
        "domainName",
        "extraContexts",
        "features",
        "location",
        "resourceGroupName",
        "globalPrefix",
        "globalSuffix",
        "resourceNameOptions",
        "resourcePrefix",
        "resourceSuffix",
        "skipStageForARecords",
        "stage",
        "subDomain",
        "subscriptionId",
    )

    def determine_construct_props(self, props: Mapping[str, Any]) -> ResolvedProperties:
        resolved = super().determine_construct_props(props)
        return resolved.with_values(name=resolved["resourceGroupName"])


__all__ = ["AzureStack"]
