"""Read-only property snapshots extracted from a resolved context store."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from strata.core.context.store import ContextStore


class ResolvedProperties(Mapping[str, Any]):
    """Immutable mapping of property name to value.

    Values are shared with the store they were read from, not copied.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = MappingProxyType(dict(data))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def with_values(self, **values: Any) -> "ResolvedProperties":
        """Return a new snapshot with ``values`` added or replaced."""
        return ResolvedProperties({**self._data, **values})

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def __repr__(self) -> str:
        return f"ResolvedProperties({dict(self._data)!r})"


def resolve_properties(store: ContextStore, keys: Iterable[str]) -> ResolvedProperties:
    """Read ``keys`` from ``store``; absent keys map to None.

    No defaults are substituted here; consumers apply their own.
    """
    return ResolvedProperties({key: store.get(key) for key in keys})


__all__ = ["ResolvedProperties", "resolve_properties"]
