"""Configuration document loading.

A document is a JSON or YAML file whose top level is a mapping. The parser
is chosen by suffix: ``.yaml``/``.yml`` use PyYAML, everything else is JSON.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from strata.core.exceptions import MalformedDocumentError, MissingDocumentError
from strata.core.utils.io import is_yaml_path, parse_json_string, parse_yaml_string
from strata.core.utils.merge import is_mapping
from strata.core.utils.paths import resolve_project_root

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Read context documents relative to a project root.

    No caching: every ``load`` call reads the file again.
    """

    def __init__(self, project_root: Optional[Union[str, Path]] = None) -> None:
        self.project_root = resolve_project_root(project_root)

    def resolve(self, path: Union[str, Path]) -> Path:
        """Absolute path for ``path`` (relative paths are project-relative)."""
        p = Path(path).expanduser()
        if not p.is_absolute():
            p = self.project_root / p
        return p

    def exists(self, path: Union[str, Path]) -> bool:
        return self.resolve(path).is_file()

    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Load and parse the document at ``path``.

        Raises:
            MissingDocumentError: If the file does not exist.
            MalformedDocumentError: If decoding or parsing fails, the top level is
                not a mapping, or a top-level key is not a string.
        """
        full_path = self.resolve(path)
        if not full_path.is_file():
            raise MissingDocumentError(
                f"Context document unavailable in path: {full_path}",
                path=full_path,
            )

        data = self._parse(full_path)
        if not is_mapping(data):
            raise MalformedDocumentError(
                f"Context document must be a mapping at the top level, "
                f"got {type(data).__name__}: {full_path}",
                path=full_path,
            )
        bad_keys = [k for k in data if not isinstance(k, str)]
        if bad_keys:
            raise MalformedDocumentError(
                f"Context document keys must be strings, got {bad_keys!r}: {full_path}",
                path=full_path,
            )
        logger.debug("Loaded context document %s (%d keys)", full_path, len(data))
        return dict(data)

    def _parse(self, full_path: Path) -> Any:
        try:
            text = full_path.read_text(encoding="utf-8")
            if is_yaml_path(full_path):
                return parse_yaml_string(text)
            return parse_json_string(text)
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
            raise MalformedDocumentError(
                f"Failed to parse context document {full_path}: {exc}",
                path=full_path,
            ) from exc


__all__ = ["DocumentLoader"]
