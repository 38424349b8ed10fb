"""Context store: the single key/value structure every layer writes into."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from strata.core.utils.merge import MISSING, is_mapping


class ContextStore:
    """Mutable mapping of context key to context value.

    A store is owned by exactly one stack. It may have a parent store: reads
    fall back to the parent when a key is not set locally, writes always land
    locally. There is no removal.
    """

    def __init__(
        self,
        values: Optional[Mapping[str, Any]] = None,
        *,
        parent: Optional["ContextStore"] = None,
    ) -> None:
        self._values: Dict[str, Any] = dict(values or {})
        self.parent = parent

    @classmethod
    def from_manifest(
        cls,
        path: Union[str, Path],
        *,
        project_root: Optional[Union[str, Path]] = None,
    ) -> "ContextStore":
        """Seed a store from a deployment manifest.

        ``cdk.json`` and ``cdktf.json`` keep their values under ``context``;
        ``pulumi.json`` style manifests are flat. Both layouts are accepted.

        Raises:
            MissingDocumentError: If the manifest does not exist.
            MalformedDocumentError: If the manifest is not a mapping.
        """
        from strata.core.context.loader import DocumentLoader

        document = DocumentLoader(project_root).load(path)
        nested = document.get("context")
        return cls(nested if is_mapping(nested) else document)

    def lookup(self, key: str) -> Any:
        """Return the value for ``key`` or ``MISSING`` when undefined."""
        if key in self._values:
            return self._values[key]
        if self.parent is not None:
            return self.parent.lookup(key)
        return MISSING

    def get(self, key: str, default: Any = None) -> Any:
        value = self.lookup(key)
        return default if value is MISSING else value

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not MISSING

    def __getitem__(self, key: str) -> Any:
        value = self.lookup(key)
        if value is MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def keys(self) -> list[str]:
        """All visible keys, parent keys first."""
        seen: Dict[str, None] = {}
        if self.parent is not None:
            seen.update(dict.fromkeys(self.parent.keys()))
        seen.update(dict.fromkeys(self._values))
        return list(seen)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())

    def to_dict(self) -> Dict[str, Any]:
        """Flattened view of every visible key (values are not copied)."""
        return {key: self.lookup(key) for key in self.keys()}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContextStore):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __repr__(self) -> str:
        return f"ContextStore({self.to_dict()!r})"


__all__ = ["ContextStore"]
