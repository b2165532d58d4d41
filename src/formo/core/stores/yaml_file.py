"""Settings loaded from a YAML settings file.

The top level of the document maps section names to settings groups.
``appSettings`` is the default section; other sections are reached with
``store.section(name)``::

    appSettings:
      ApiKey: a0c5837ebb094b578b436f03121bb022
      ThirdPartyApi:
        Key: something
        Secret: blah
    customSection:
      ApiKey: another

Nested groups become dotted keys (``ThirdPartyApi.Key``) and are declared
namespaces even when empty. YAML's own booleans (``true``, ``yes``,
``on`` ...) are this store's native boolean semantics.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Set

import yaml

from ..exceptions import SectionNotFoundError, SettingsFileError
from ..schemas import SETTINGS_SCHEMA, SchemaValidationError, validate_payload
from .base import SettingsStore
from .memory import MappingStore

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "appSettings"


def read_settings_file(path: Path) -> Dict[str, Dict[str, Any]]:
    """Read and validate a YAML settings file.

    Returns:
        Mapping of section name to section contents.

    Raises:
        SettingsFileError: If the file is missing, is not valid YAML, or does
            not match the settings schema.
    """
    path = Path(path)
    if not path.exists():
        raise SettingsFileError(f"Settings file not found: {path}", context={"path": str(path)})
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise SettingsFileError(f"Cannot read settings file {path}: {exc}", context={"path": str(path)}) from exc

    if data is None:
        return {}
    if isinstance(data, dict):
        # An empty section (``customSection:``) is a valid empty group.
        data = {name: {} if body is None else _normalize(body) for name, body in data.items()}
    try:
        validate_payload(data, SETTINGS_SCHEMA)
    except SchemaValidationError as exc:
        raise SettingsFileError(
            f"Invalid settings file {path}: {exc}",
            context={"path": str(path), "errors": exc.errors},
        ) from exc
    return data


def _normalize(value: Any) -> Any:
    # YAML resolves unquoted timestamps; keep their text form.
    if isinstance(value, dict):
        return {key: _normalize(item) for key, item in value.items()}
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


class YamlSettingsStore(MappingStore):
    """Read-only store over one section of a YAML settings file.

    The file is read once, at construction.

    Args:
        path: Settings file path.
        section: Section to expose (default ``appSettings``). A file without
            that section exposes no keys.
    """

    def __init__(
        self,
        path: Path,
        section: str = DEFAULT_SECTION,
        *,
        document: Optional[Mapping[str, Dict[str, Any]]] = None,
    ) -> None:
        self.path = Path(path)
        self.section_name = section
        self._document = dict(document) if document is not None else read_settings_file(self.path)
        super().__init__(self._document.get(section) or {})
        logger.debug("Loaded %d settings from %s [%s]", len(self._values), self.path, section)

    @property
    def sections(self) -> Set[str]:
        return set(self._document)

    def section(self, name: str) -> SettingsStore:
        if name not in self._document:
            raise SectionNotFoundError(name, source=str(self.path))
        return YamlSettingsStore(self.path, name, document=self._document)

    def __repr__(self) -> str:
        return f"YamlSettingsStore({str(self.path)!r}, section={self.section_name!r})"


__all__ = ["DEFAULT_SECTION", "YamlSettingsStore", "read_settings_file"]
