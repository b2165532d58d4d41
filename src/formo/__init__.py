"""
Formo - dynamic, type-converting access to application settings

Formo exposes flat key/value settings, optionally grouped into dotted
namespaces, through attribute access with typed conversion, default
fallbacks and locale-aware parsing.
"""

from formo.core import (
    Configuration,
    ConversionError,
    FormoError,
    KeyNotFoundError,
    SectionNotFoundError,
    SettingsFileError,
)

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "Configuration",
    "ConversionError",
    "FormoError",
    "KeyNotFoundError",
    "SectionNotFoundError",
    "SettingsFileError",
]
