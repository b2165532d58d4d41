from __future__ import annotations

import logging

import pytest

from formo.core import Configuration, EnvironmentStore


def test_prefix_is_stripped_and_double_underscore_nests() -> None:
    store = EnvironmentStore(
        "FORMO_",
        {"FORMO_ApiKey": "abc", "FORMO_ThirdPartyApi__Key": "something", "OTHER": "x"},
    )
    assert store.get_raw("ApiKey") == "abc"
    assert store.get_raw("ThirdPartyApi.Key") == "something"
    assert store.get_raw("OTHER") is None
    assert list(store.iter_keys()) == ["ApiKey", "ThirdPartyApi.Key"]


def test_keys_are_case_sensitive() -> None:
    store = EnvironmentStore("FORMO_", {"FORMO_ApiKey": "abc"})
    assert store.get_raw("apikey") is None


def test_namespaces_are_derived_from_nesting() -> None:
    store = EnvironmentStore("APP_", {"APP_Db__Host": "localhost", "APP_Db__Port": "5432"})
    config = Configuration(locale="en_US", store=store)
    assert store.has_descendants("Db")
    assert config.Db.Host == "localhost"
    assert config.call.Db.Port[int]() == 5432


def test_malformed_variable_is_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    store = EnvironmentStore("FORMO_", {"FORMO_Bad____Key": "x", "FORMO_Good": "y"})
    with caplog.at_level(logging.WARNING, logger="formo.core.stores.environment"):
        keys = list(store.iter_keys())
    assert keys == ["Good"]
    assert "empty segment" in caplog.text
    assert store.get_raw("Bad..Key") is None


def test_excluded_variables_are_not_settings() -> None:
    environ = {"FORMO_SETTINGS_FILE": "/tmp/app.yaml", "FORMO_ApiKey": "abc"}
    store = EnvironmentStore("FORMO_", environ, exclude={"FORMO_SETTINGS_FILE"})
    assert store.get_raw("SETTINGS_FILE") is None
    assert list(store.iter_keys()) == ["ApiKey"]


def test_reads_live_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    store = EnvironmentStore("FORMO_")
    assert store.get_raw("Later") is None
    monkeypatch.setenv("FORMO_Later", "now")
    assert store.get_raw("Later") == "now"


def test_bool_text_from_environment() -> None:
    store = EnvironmentStore("FORMO_", {"FORMO_Enabled": "True"})
    assert store.get_typed("Enabled", bool) is True


def test_raw_variable_spelling_is_not_a_key() -> None:
    store = EnvironmentStore("FORMO_", {"FORMO_A__B": "x"})
    assert store.get_raw("A.B") == "x"
    assert store.get_raw("A__B") is None
    assert "A__B" not in store
