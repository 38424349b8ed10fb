"""
Strata - layered context resolution for infrastructure stacks

Strata seeds a context store from a deployment manifest, layers auxiliary
and stage-specific documents over it, and hands the resolved properties to
AWS, Azure and Cloudflare stacks.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
