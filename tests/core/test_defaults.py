from __future__ import annotations

from pathlib import Path

import pytest

from formo.core import (
    Configuration,
    EnvironmentStore,
    LayeredStore,
    SettingsFileError,
    default_store,
    find_settings_file,
)
from formo.core.defaults import SETTINGS_FILE_ENV


def _settings(directory: Path, name: str = "appsettings.yaml") -> Path:
    path = directory / name
    path.write_text("appSettings:\n  ApiKey: from-file\n  Retries: '3'\n", encoding="utf-8")
    return path


def test_explicit_settings_file_wins(tmp_path: Path) -> None:
    explicit = _settings(tmp_path, "custom.yaml")
    _settings(tmp_path)
    assert find_settings_file(environ={SETTINGS_FILE_ENV: str(explicit)}, cwd=tmp_path) == explicit


def test_missing_explicit_settings_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(SettingsFileError, match=SETTINGS_FILE_ENV):
        find_settings_file(environ={SETTINGS_FILE_ENV: str(tmp_path / "nope.yaml")}, cwd=tmp_path)


def test_settings_file_found_in_working_directory(tmp_path: Path) -> None:
    path = _settings(tmp_path, "appsettings.yml")
    assert find_settings_file(environ={}, cwd=tmp_path) == path


def test_no_settings_file(tmp_path: Path) -> None:
    assert find_settings_file(environ={}, cwd=tmp_path) is None
    assert isinstance(default_store(environ={}, cwd=tmp_path), EnvironmentStore)


def test_environment_overrides_settings_file(tmp_path: Path) -> None:
    _settings(tmp_path)
    store = default_store(environ={"FORMO_ApiKey": "from-env"}, cwd=tmp_path)
    assert isinstance(store, LayeredStore)
    assert store.get_raw("ApiKey") == "from-env"
    assert store.get_raw("Retries") == "3"


def test_settings_file_variable_is_not_a_setting(tmp_path: Path) -> None:
    path = _settings(tmp_path)
    store = default_store(environ={SETTINGS_FILE_ENV: str(path)}, cwd=tmp_path)
    assert store.get_raw("SETTINGS_FILE") is None
    assert "SETTINGS_FILE" not in list(store.iter_keys())


def test_configuration_uses_default_store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _settings(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FORMO_Retries", "5")

    config = Configuration()
    assert config.ApiKey == "from-file"
    assert config.call.Retries[int]() == 5
    assert str(config.locale) == "en_US"


def test_named_section_reads_the_file_without_environment_overrides(tmp_path: Path) -> None:
    (tmp_path / "appsettings.yaml").write_text(
        "appSettings:\n  ApiKey: from-file\ncustomSection:\n  ApiKey: custom\n", encoding="utf-8"
    )
    store = default_store(environ={"FORMO_ApiKey": "from-env"}, cwd=tmp_path)

    assert Configuration(locale="en_US", store=store).ApiKey == "from-env"
    assert Configuration("customSection", "en_US", store=store).ApiKey == "custom"
