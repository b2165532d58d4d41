import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"
FIXTURES_ROOT = TESTS_ROOT / "fixtures"

# Make src/ importable as 'formo'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from formo.core import Configuration, YamlSettingsStore  # noqa: E402

# Locale detection reads these variables; a developer shell must not change
# how "1.05" or "11/4/1999" parse under the default locale.
_LOCALE_ENV_KEYS = ["LANGUAGE", "LC_ALL", "LC_CTYPE", "LC_MESSAGES", "LANG"]


@pytest.fixture(autouse=True)
def _pin_default_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make en_US the process default locale and drop FORMO_* overrides."""
    for key in _LOCALE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LC_ALL", "en_US.UTF-8")

    for key in list(os.environ):
        if key.startswith("FORMO_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings_file() -> Path:
    return FIXTURES_ROOT / "appsettings.yaml"


@pytest.fixture
def settings_store(settings_file: Path) -> YamlSettingsStore:
    return YamlSettingsStore(settings_file)


@pytest.fixture(params=[None, "customSection"], ids=["appSettings", "customSection"])
def configuration(request: pytest.FixtureRequest, settings_store: YamlSettingsStore) -> Configuration:
    """Root facade over the fixture file, once per settings section."""
    return Configuration(request.param, store=settings_store)


@pytest.fixture
def german_configuration(settings_store: YamlSettingsStore) -> Configuration:
    return Configuration(locale="de", store=settings_store)
