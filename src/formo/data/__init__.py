"""
Files shipped inside the formo package.

Only JSON Schemas live here today (``schemas/*.schema.yaml``); they are
looked up through importlib.resources so installed wheels and source
checkouts behave the same.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Path of a bundled data directory, or of a file inside it.

    Example:
        >>> get_data_path("schemas", "settings.schema.yaml").name
        'settings.schema.yaml'
    """
    root = Path(str(resources.files(__name__))) / subpackage
    return root / filename if filename else root


@lru_cache(maxsize=8)
def read_yaml(subpackage: str, filename: str) -> Any:
    """Parse a bundled YAML file once per process."""
    with open(get_data_path(subpackage, filename), "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


__all__ = ["get_data_path", "read_yaml"]
