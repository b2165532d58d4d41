from __future__ import annotations

from .validation import (
    SETTINGS_SCHEMA,
    SchemaValidationError,
    iter_errors,
    load_schema,
    validate_payload,
)

__all__ = [
    "SETTINGS_SCHEMA",
    "SchemaValidationError",
    "iter_errors",
    "load_schema",
    "validate_payload",
]
