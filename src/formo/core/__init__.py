"""Formo core: the dynamic configuration facade and its collaborators.

Usage:
    from formo.core import Configuration, MappingStore

    config = Configuration(store=MappingStore({"ThirdPartyApi": {"Key": "something"}}))
    config.ThirdPartyApi.Key          # 'something'
    config.call.Missing("fallback")   # 'fallback'
"""
from __future__ import annotations

from .configuration import Configuration, Member, MethodView
from .conversion import TypeConverter, convert
from .defaults import default_store, find_settings_file
from .exceptions import (
    ConversionError,
    FormoError,
    KeyNotFoundError,
    SectionNotFoundError,
    SettingsFileError,
)
from .locale import current_locale, parse_locale
from .navigator import NamespaceNavigator, NodeKind
from .request import ABSENT, Absent, Namespace, Outcome, Request, RequestKind, Value
from .resolver import KeyResolver
from .stores import (
    EnvironmentStore,
    LayeredStore,
    MappingStore,
    SettingsStore,
    YamlSettingsStore,
)

__all__ = [
    # Facade
    "Configuration",
    "MethodView",
    "Member",
    # Resolution
    "Request",
    "RequestKind",
    "Outcome",
    "Value",
    "Absent",
    "Namespace",
    "ABSENT",
    "KeyResolver",
    "NamespaceNavigator",
    "NodeKind",
    "TypeConverter",
    "convert",
    # Stores
    "SettingsStore",
    "MappingStore",
    "EnvironmentStore",
    "YamlSettingsStore",
    "LayeredStore",
    "default_store",
    "find_settings_file",
    # Locale
    "current_locale",
    "parse_locale",
    # Errors
    "FormoError",
    "ConversionError",
    "KeyNotFoundError",
    "SectionNotFoundError",
    "SettingsFileError",
]
