"""Settings read from process environment variables.

``FORMO_ThirdPartyApi__Key=something`` is exposed as the key
``ThirdPartyApi.Key``: the prefix is stripped and ``__`` separates
namespace segments. Case is preserved.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from ..request import SEPARATOR
from .base import SettingsStore, under_prefix

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "FORMO_"
SEGMENT_SEPARATOR = "__"


class EnvironmentStore(SettingsStore):
    """Read-only view of prefixed environment variables.

    The environment is read on every lookup, so a store built over
    ``os.environ`` reflects later changes to the process environment.

    Args:
        prefix: Variable name prefix; variables without it are ignored.
        environ: Mapping to read instead of ``os.environ`` (tests, subprocess envs).
        exclude: Variable names that are never exposed as settings.
    """

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
        *,
        exclude: Iterable[str] = (),
    ) -> None:
        self.prefix = prefix
        self._environ = environ if environ is not None else os.environ
        self._exclude = frozenset(exclude)

    def _parse_env_key(self, raw: str) -> List[str]:
        segs = raw.split(SEGMENT_SEPARATOR)
        if any(seg == "" for seg in segs):
            logger.warning("Ignoring malformed %s* variable: empty segment in '%s'", self.prefix, raw)
            return []
        return segs

    def _keys(self) -> Dict[str, str]:
        keys: Dict[str, str] = {}
        for name in sorted(self._environ.keys()):
            if not name.startswith(self.prefix) or name in self._exclude:
                continue
            raw = name[len(self.prefix):]
            if not raw:
                continue
            path = self._parse_env_key(raw)
            if not path:
                continue
            keys[SEPARATOR.join(path)] = name
        return keys

    def get_raw(self, key: str) -> Optional[str]:
        raw = key.replace(SEPARATOR, SEGMENT_SEPARATOR)
        # Only keys that iter_keys would report for the variable are answered.
        if SEPARATOR.join(raw.split(SEGMENT_SEPARATOR)) != key or not all(key.split(SEPARATOR)):
            return None
        name = self.prefix + raw
        if name in self._exclude:
            return None
        return self._environ.get(name)

    def iter_keys(self, prefix: str = "") -> Iterator[str]:
        for key in self._keys():
            if under_prefix(key, prefix):
                yield key

    def __repr__(self) -> str:
        return f"EnvironmentStore(prefix={self.prefix!r})"


__all__ = ["EnvironmentStore", "DEFAULT_PREFIX", "SEGMENT_SEPARATOR"]
