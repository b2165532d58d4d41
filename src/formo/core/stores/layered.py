"""Priority-ordered combination of several stores.

Stores are listed highest priority first; the first store holding a key
wins. This is how environment overrides sit on top of a settings file.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional

from babel import Locale

from ..exceptions import SectionNotFoundError
from .base import SettingsStore

logger = logging.getLogger(__name__)


class LayeredStore(SettingsStore):
    def __init__(self, *stores: SettingsStore) -> None:
        if not stores:
            raise ValueError("LayeredStore requires at least one store")
        self.stores: List[SettingsStore] = list(stores)

    @property
    def native_types(self) -> frozenset:  # type: ignore[override]
        return frozenset().union(*(store.native_types for store in self.stores))

    def _owner(self, key: str) -> Optional[SettingsStore]:
        for store in self.stores:
            if store.get_raw(key) is not None:
                return store
        return None

    def get_raw(self, key: str) -> Optional[str]:
        owner = self._owner(key)
        return owner.get_raw(key) if owner is not None else None

    def get_value(self, key: str) -> Optional[Any]:
        owner = self._owner(key)
        return owner.get_value(key) if owner is not None else None

    def get_typed(self, key: str, target: type) -> Optional[Any]:
        # The owning layer decides what its text means.
        owner = self._owner(key)
        if owner is None or target not in owner.native_types:
            return super().get_typed(key, target)
        return owner.get_typed(key, target)

    def iter_keys(self, prefix: str = "") -> Iterator[str]:
        seen = set()
        for store in self.stores:
            seen.update(store.iter_keys(prefix))
        yield from sorted(seen)

    def has_descendants(self, path: str) -> bool:
        return any(store.has_descendants(path) for store in self.stores)

    def declares_namespace(self, path: str) -> bool:
        return any(store.declares_namespace(path) for store in self.stores)

    def current_locale(self) -> Locale:
        return self.stores[0].current_locale()

    def section(self, name: str) -> SettingsStore:
        found: List[SettingsStore] = []
        for store in self.stores:
            try:
                found.append(store.section(name))
            except SectionNotFoundError:
                logger.debug("%r has no section '%s'; layer skipped", store, name)
                continue
        if not found:
            raise SectionNotFoundError(name, source="any layer")
        return found[0] if len(found) == 1 else LayeredStore(*found)

    def __repr__(self) -> str:
        return f"LayeredStore({', '.join(repr(store) for store in self.stores)})"


__all__ = ["LayeredStore"]
