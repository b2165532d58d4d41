"""Settings file schema validation.

Settings files are validated with JSON Schema before a store exposes them.
Schemas are stored as YAML files (human-readable) and bundled under
``formo.data/schemas/``.
"""
from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from formo.data import get_data_path, read_yaml

SETTINGS_SCHEMA = "settings.schema.yaml"


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""

    def __init__(self, message: str, errors: List[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema.

    Automatically appends ``.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If the schema file doesn't exist.
        ValueError: If the schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"

    schema_path = get_data_path("schemas", schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name}\nSearched:\n- {schema_path.parent}")

    schema = read_yaml("schemas", schema_name)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def iter_errors(payload: Any, schema_name: str = SETTINGS_SCHEMA) -> List[str]:
    """Return readable validation messages for ``payload`` (empty if valid)."""
    validator = Draft202012Validator(load_schema(schema_name))
    errors: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.path]):
        # Build a readable error message with path
        if error.path:
            path_str = ".".join(str(p) for p in error.path)
            errors.append(f"{path_str}: {error.message}")
        else:
            errors.append(error.message)
    return errors


def validate_payload(payload: Any, schema_name: str = SETTINGS_SCHEMA) -> None:
    """Validate a payload against a bundled schema.

    Raises:
        SchemaValidationError: If validation fails; ``errors`` lists every problem.
    """
    errors = iter_errors(payload, schema_name)
    if errors:
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}': {errors[0]}",
            errors,
        )


__all__ = [
    "SETTINGS_SCHEMA",
    "SchemaValidationError",
    "load_schema",
    "iter_errors",
    "validate_payload",
]
