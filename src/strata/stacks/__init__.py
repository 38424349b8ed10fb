"""Provider stack variants.

Each variant declares the context keys its constructs consume; the resolved
values are exposed as ``stack.props``.
"""
from __future__ import annotations

from .aws import AwsStack
from .azure import AzureStack
from .base import CommonStack
from .cloudflare import CloudflareStack

__all__ = ["CommonStack", "AwsStack", "AzureStack", "CloudflareStack"]
