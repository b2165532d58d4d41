"""Process-wide default settings source.

Configuration sources (highest to lowest priority):
1. Environment variables: FORMO_* (``__`` separates namespaces)
2. Settings file: the YAML file named by FORMO_SETTINGS_FILE, or
   ``appsettings.yaml`` / ``appsettings.yml`` in the working directory

Environment overrides apply to the default ``appSettings`` section only.
``Configuration("customSection")`` over the default store reads that
section from the settings file alone, because environment variables carry
no section name.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from .exceptions import SettingsFileError
from .stores import EnvironmentStore, LayeredStore, SettingsStore, YamlSettingsStore
from .stores.environment import DEFAULT_PREFIX

# Module logger (the package installs no handlers).
logger = logging.getLogger(__name__)

SETTINGS_FILE_ENV = "FORMO_SETTINGS_FILE"
DEFAULT_FILENAMES = ("appsettings.yaml", "appsettings.yml")


def find_settings_file(
    *, environ: Optional[Mapping[str, str]] = None, cwd: Optional[Path] = None
) -> Optional[Path]:
    """Locate the default settings file.

    Returns:
        The explicitly configured file, the first default file name present
        in ``cwd``, or ``None``.

    Raises:
        SettingsFileError: If FORMO_SETTINGS_FILE names a file that does not exist.
    """
    env = environ if environ is not None else os.environ
    explicit = env.get(SETTINGS_FILE_ENV)
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise SettingsFileError(
                f"{SETTINGS_FILE_ENV} points to a missing file: {path}",
                context={"path": str(path)},
            )
        return path

    base = cwd if cwd is not None else Path.cwd()
    for name in DEFAULT_FILENAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def default_store(
    *, environ: Optional[Mapping[str, str]] = None, cwd: Optional[Path] = None
) -> SettingsStore:
    """Build the default store: environment overrides over the settings file.

    Each call builds a fresh store, so later environment or file changes are
    picked up by facades constructed afterwards.
    """
    env_store = EnvironmentStore(DEFAULT_PREFIX, environ, exclude={SETTINGS_FILE_ENV})
    path = find_settings_file(environ=environ, cwd=cwd)
    if path is None:
        logger.debug("No settings file found; using environment variables only")
        return env_store
    logger.debug("Using settings file %s", path)
    return LayeredStore(env_store, YamlSettingsStore(path))


__all__ = ["SETTINGS_FILE_ENV", "DEFAULT_FILENAMES", "find_settings_file", "default_store"]
