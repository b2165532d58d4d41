"""Settings store contract.

A store is the read-only key/value provider behind every facade. Keys are
flat strings; namespaces are expressed with the ``.`` separator
(``ThirdPartyApi.Key``). Absence is a normal outcome, never an error.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Iterator, Optional

from babel import Locale

from ..conversion import parse_bool
from ..exceptions import ConversionError, SectionNotFoundError
from ..locale import current_locale
from ..request import SEPARATOR


class SettingsStore(ABC):
    """Abstract base class for settings providers.

    Subclasses implement ``get_raw`` and ``iter_keys``; everything else has a
    working default built on those two.

    Usage:
        class DictStore(SettingsStore):
            def __init__(self, data):
                self._data = data

            def get_raw(self, key):
                return self._data.get(key)

            def iter_keys(self, prefix=""):
                return (k for k in self._data if k == prefix or not prefix
                        or k.startswith(prefix + "."))
    """

    #: Types for which ``get_typed`` is the authoritative accessor.
    native_types: FrozenSet[type] = frozenset({bool})

    @abstractmethod
    def get_raw(self, key: str) -> Optional[str]:
        """Return the stored text for ``key`` or ``None`` when absent."""
        ...

    @abstractmethod
    def iter_keys(self, prefix: str = "") -> Iterator[str]:
        """Yield stored keys equal to ``prefix`` or below it (all keys when empty)."""
        ...

    def get_value(self, key: str) -> Optional[Any]:
        """Return the value as the store holds it (text unless overridden)."""
        return self.get_raw(key)

    def get_typed(self, key: str, target: type) -> Optional[Any]:
        """Native typed accessor.

        The default implementation understands ``bool`` (``true``/``false``,
        case-insensitive) and returns ``None`` for absent keys, the same way
        a plain settings lookup reports absence.

        Raises:
            ConversionError: If the stored text is not a valid ``target``.
            TypeError: If ``target`` is not a native type of this store.
        """
        if target not in self.native_types:
            raise TypeError(f"{type(self).__name__} has no native accessor for {target!r}")
        raw = self.get_raw(key)
        if raw is None:
            return None
        result = parse_bool(raw)
        if result is None:
            raise ConversionError(raw, "bool", str(self.current_locale()), key=key)
        return result

    def has_descendants(self, path: str) -> bool:
        """True when at least one key starts with ``path`` plus the separator."""
        marker = f"{path}{SEPARATOR}"
        return any(key.startswith(marker) for key in self.iter_keys(path))

    def declares_namespace(self, path: str) -> bool:
        """True when the store format declares ``path`` as a namespace up front."""
        return False

    def current_locale(self) -> Locale:
        return current_locale()

    def section(self, name: str) -> "SettingsStore":
        """Return the named settings section of this store."""
        raise SectionNotFoundError(name, source=type(self).__name__)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get_raw(key) is not None


def under_prefix(key: str, prefix: str) -> bool:
    """True when ``key`` equals ``prefix`` or lies below it."""
    if not prefix:
        return True
    return key == prefix or key.startswith(f"{prefix}{SEPARATOR}")


__all__ = ["SettingsStore", "under_prefix"]
