"""In-memory settings store."""
from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Dict, Iterator, Mapping, Optional, Set

from ..exceptions import SectionNotFoundError
from ..request import join_key
from .base import SettingsStore, under_prefix

logger = logging.getLogger(__name__)


def to_text(value: Any) -> str:
    """Render a native scalar the way a text settings file would hold it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def flatten(
    mapping: Mapping[str, Any],
    *,
    prefix: str = "",
    namespaces: Optional[Set[str]] = None,
) -> Dict[str, Any]:
    """Flatten nested mappings into dotted keys.

    Nested mapping paths are recorded in ``namespaces`` when given, so empty
    groups still count as declared namespaces. ``None`` values are dropped.

    Example:
        >>> flatten({"a": {"b": 1}, "c": None})
        {'a.b': 1}
    """
    flat: Dict[str, Any] = {}
    for key, value in mapping.items():
        path = join_key(prefix, str(key))
        if isinstance(value, Mapping):
            if namespaces is not None:
                namespaces.add(path)
            flat.update(flatten(value, prefix=path, namespaces=namespaces))
        elif value is not None:
            flat[path] = value
    return flat


class MappingStore(SettingsStore):
    """Settings held in a Python mapping.

    Keys may be flat dotted strings (``{"ThirdPartyApi.Key": "x"}``) or
    nested mappings (``{"ThirdPartyApi": {"Key": "x"}}``); both address the
    same key. Natively typed booleans are returned unchanged by
    ``get_typed``, other scalars are exposed as text.

    Args:
        mapping: Default section contents.
        sections: Optional named sections, each a mapping of the same shape.
    """

    def __init__(
        self,
        mapping: Optional[Mapping[str, Any]] = None,
        *,
        sections: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> None:
        self._namespaces: Set[str] = set()
        self._values = flatten(mapping or {}, namespaces=self._namespaces)
        self._sections = dict(sections or {})
        logger.debug("MappingStore holds %d keys", len(self._values))

    def get_raw(self, key: str) -> Optional[str]:
        if key not in self._values:
            return None
        return to_text(self._values[key])

    def iter_keys(self, prefix: str = "") -> Iterator[str]:
        for key in sorted(self._values):
            if under_prefix(key, prefix):
                yield key

    def get_value(self, key: str) -> Optional[Any]:
        return self._values.get(key)

    def get_typed(self, key: str, target: type) -> Optional[Any]:
        value = self._values.get(key)
        if target is bool and isinstance(value, bool):
            return value
        return super().get_typed(key, target)

    def declares_namespace(self, path: str) -> bool:
        return path in self._namespaces

    def section(self, name: str) -> SettingsStore:
        if name not in self._sections:
            raise SectionNotFoundError(name, source="mapping")
        return MappingStore(self._sections[name])

    def __repr__(self) -> str:
        return f"MappingStore({len(self._values)} keys)"


__all__ = ["MappingStore", "flatten", "to_text"]
