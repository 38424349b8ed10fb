"""Seed context keys from environment variables.

``STRATA_CONTEXT_domainName=example.com`` sets ``domainName``;
``STRATA_CONTEXT_api__timeout=60`` sets ``api.timeout`` (merged into any
existing ``api`` mapping). Values are coerced to bool, int, float or a JSON
list/object where they parse, otherwise kept as trimmed strings.

This is a seeding step: callers apply it to a store before resolution.
"""
from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from strata.core.context.store import ContextStore
from strata.core.exceptions import InvalidContextError
from strata.core.utils.merge import merge_value

logger = logging.getLogger(__name__)

ENV_PREFIX = "STRATA_CONTEXT_"


def _as_bool(v: str) -> Optional[bool]:
    low = v.strip().lower()
    if low in {"true", "false"}:
        return low == "true"
    return None


def _as_int(v: str) -> Optional[int]:
    if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
        return int(v)
    return None


def _as_float(v: str) -> Optional[float]:
    s = v.strip()
    if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
        return float(s)
    return None


def _as_json(v: str) -> Optional[Any]:
    s = v.strip()
    if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
        try:
            return json.loads(s)
        except json.JSONDecodeError:
            return None
    return None


def coerce_value(value: str) -> Any:
    """Coerce an environment string to the closest context value."""
    for caster in (_as_bool, _as_int, _as_float, _as_json):
        result = caster(value)
        if result is not None:
            return result
    return value.strip()


def parse_env_key(raw: str) -> List[str]:
    """Split ``api__timeout`` into ``["api", "timeout"]``.

    Raises:
        InvalidContextError: On empty segments (``api____timeout``, trailing ``__``).
    """
    segs = raw.split("__")
    if any(seg == "" for seg in segs):
        raise InvalidContextError(
            f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
            context={"key": raw},
        )
    return segs


def iter_env_overrides(
    environ: Mapping[str, str], *, prefix: str = ENV_PREFIX
) -> Iterator[Tuple[List[str], Any]]:
    for key in sorted(environ.keys()):
        if not key.startswith(prefix):
            continue
        raw = key[len(prefix) :]
        if not raw:
            raise InvalidContextError(f"Malformed {prefix}* key", context={"key": key})
        yield parse_env_key(raw), coerce_value(environ[key])


def _nest(path: List[str], value: Any) -> Any:
    out = value
    for part in reversed(path):
        out = {part: out}
    return out


def _match_key(store: ContextStore, key: str) -> str:
    # Case-insensitive match against existing keys keeps env overrides usable on
    # platforms that upper-case variable names.
    lower_map: Dict[str, str] = {k.lower(): k for k in store.keys()}
    return lower_map.get(key.lower(), key)


def apply_env_overrides(
    store: ContextStore,
    environ: Optional[Mapping[str, str]] = None,
    *,
    prefix: str = ENV_PREFIX,
) -> List[str]:
    """Apply ``prefix``-ed environment variables to ``store``.

    Args:
        store: Store to seed (mutated in place)
        environ: Environment mapping (defaults to ``os.environ``)
        prefix: Variable name prefix

    Returns:
        Top-level keys that were set, in application order.
    """
    env = os.environ if environ is None else environ
    applied: List[str] = []
    for path, value in iter_env_overrides(env, prefix=prefix):
        top = _match_key(store, path[0])
        overlay = _nest(path[1:], value)
        store.set(top, merge_value(store.lookup(top), overlay))
        applied.append(top)
        logger.debug("Seeded context key %s from environment", ".".join([top, *path[1:]]))
    return applied


__all__ = [
    "ENV_PREFIX",
    "coerce_value",
    "parse_env_key",
    "iter_env_overrides",
    "apply_env_overrides",
]
