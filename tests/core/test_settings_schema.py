from __future__ import annotations

import pytest

from formo.core.schemas import SETTINGS_SCHEMA, SchemaValidationError, iter_errors, load_schema, validate_payload
from formo.data import get_data_path


def test_schema_is_bundled() -> None:
    assert get_data_path("schemas", SETTINGS_SCHEMA).is_file()
    schema = load_schema("settings.schema")
    assert schema["$schema"].endswith("2020-12/schema")


def test_missing_schema_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_schema("does-not-exist")


def test_valid_document() -> None:
    payload = {
        "appSettings": {
            "ApiKey": "x",
            "Retries": 3,
            "Rate": 1.5,
            "Enabled": True,
            "Unset": None,
            "Group": {"Nested": {"Deep": "y"}, "Empty": {}},
        },
        "customSection": {},
    }
    assert iter_errors(payload) == []
    validate_payload(payload)


def test_errors_carry_the_offending_path() -> None:
    errors = iter_errors({"appSettings": {"Group": {"Items": ["a"]}}})
    assert errors
    assert errors[0].startswith("appSettings.Group:")


def test_empty_setting_name_is_rejected() -> None:
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_payload({"appSettings": {"": "x"}})
    assert excinfo.value.errors
