from __future__ import annotations

from typing import Any, Mapping

from strata.core.context import ResolvedProperties
from strata.stacks.base import CommonStack

DEFAULT_STACK_NAME = "cdk-utils"
NODEJS_RUNTIME = "nodejs22.x"


class AwsStack(CommonStack):
    """AWS stack; context seeded from ``cdk.json``.

    ``nodejsRuntime`` falls back to ``NODEJS_RUNTIME`` when the context has none.
    """

    MANIFEST = "cdk.json"
    NODEJS_RUNTIME = NODEJS_RUNTIME
    DEFAULT_STAGE_CONTEXT_PATH = "cdkEnv"
    PROPERTY_KEYS = (
        "domainName",
        "excludeDomainNameForBuckets",
        "excludeAccountNumberForBuckets",
        "extraContexts",
        "logRetention",
        "nodejsRuntime",
        "region",
        "globalPrefix",
        "globalSuffix",
        "resourceNameOptions",
        "resourcePrefix",
        "resourceSuffix",
        "skipStageForARecords",
        "stage",
        "subDomain",
    )

    def determine_construct_props(self, props: Mapping[str, Any]) -> ResolvedProperties:
        stack_name = props.get("stackName")
        runtime = self.context.get("nodejsRuntime")
        return super().determine_construct_props(props).with_values(
            name=stack_name or DEFAULT_STACK_NAME,
            stackName=stack_name,
            nodejsRuntime=self.NODEJS_RUNTIME if runtime is None else runtime,
        )


__all__ = ["AwsStack", "DEFAULT_STACK_NAME", "NODEJS_RUNTIME"]
