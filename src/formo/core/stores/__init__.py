"""Settings stores backing the configuration facade.

Usage:
    from formo.core.stores import MappingStore, EnvironmentStore, LayeredStore

    store = LayeredStore(EnvironmentStore("MYAPP_"), MappingStore({"ApiKey": "x"}))
"""
from __future__ import annotations

from .base import SettingsStore, under_prefix
from .environment import EnvironmentStore
from .layered import LayeredStore
from .memory import MappingStore, flatten
from .yaml_file import DEFAULT_SECTION, YamlSettingsStore, read_settings_file

__all__ = [
    "SettingsStore",
    "MappingStore",
    "EnvironmentStore",
    "YamlSettingsStore",
    "LayeredStore",
    "DEFAULT_SECTION",
    "flatten",
    "read_settings_file",
    "under_prefix",
]
