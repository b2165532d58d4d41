"""Leaf lookup with typed conversion and a default-fallback chain."""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .conversion import NUMBER_TYPES, TypeConverter
from .exceptions import ConversionError
from .request import ABSENT, Outcome, Value
from .stores.base import SettingsStore

logger = logging.getLogger(__name__)


class KeyResolver:
    """Resolve one store key to a value.

    1. A stored value (an empty string counts) is converted to ``target``,
       or returned as text when no target was requested. Targets the store
       handles natively (booleans at least) go through ``store.get_typed``.
       Numbers the store already holds as numbers skip locale parsing.
    2. Otherwise the first non-``None`` default is returned as given.
    3. Otherwise the outcome is ``ABSENT``; the caller decides whether that
       is an error.
    """

    def __init__(self, store: SettingsStore, converter: TypeConverter) -> None:
        self.store = store
        self.converter = converter

    def resolve(self, key: str, target: Optional[type] = None, defaults: Sequence[Any] = ()) -> Outcome:
        raw = self.store.get_raw(key)
        if raw is not None:
            return Value(self._convert(key, raw, target))

        for candidate in defaults:
            if candidate is not None:
                logger.debug("Setting '%s' not stored; using default %r", key, candidate)
                return Value(candidate)

        if target is not None and target in self.store.native_types:
            # Absent typed lookups report whatever the store's own accessor does.
            native = self.store.get_typed(key, target)
            if native is not None:
                return Value(native)
        return ABSENT

    def _convert(self, key: str, raw: str, target: Optional[type]) -> Any:
        if target is None:
            return raw
        try:
            if target in self.store.native_types:
                return self.store.get_typed(key, target)
            held = self.store.get_value(key)
            if target in NUMBER_TYPES and isinstance(held, NUMBER_TYPES) and not isinstance(held, bool):
                return self.converter.from_number(held, target)
            return self.converter.convert(raw, target)
        except ConversionError as exc:
            if exc.key:
                raise
            raise exc.with_key(key) from exc


__all__ = ["KeyResolver"]
