from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional


class StrataError(Exception):
    """Base exception for Strata."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class DocumentError(StrataError):
    """Base exception for configuration document failures."""

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[Path] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if path is not None:
            ctx["path"] = str(path)
        StrataError.__init__(self, message, context=ctx)
        self.path = path


class MissingDocumentError(DocumentError, FileNotFoundError):
    """Raised when an explicitly named document does not exist."""

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[Path] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        DocumentError.__init__(self, message, path=path, context=context)
        FileNotFoundError.__init__(self, message)


class MalformedDocumentError(DocumentError, ValueError):
    """Raised when a document fails to parse or is not a mapping."""

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[Path] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        DocumentError.__init__(self, message, path=path, context=context)
        ValueError.__init__(self, message)


class InvalidContextError(StrataError, ValueError):
    """Raised when a control key in the context store has the wrong shape."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        StrataError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ProjectRootError(StrataError, ValueError):
    """Raised when the project root cannot be resolved."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        StrataError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "StrataError",
    "DocumentError",
    "MissingDocumentError",
    "MalformedDocumentError",
    "InvalidContextError",
    "ProjectRootError",
]
