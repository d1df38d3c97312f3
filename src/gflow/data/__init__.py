"""Files shipped inside the gflow wheel.

``config/`` holds the bundled defaults layer, ``schemas/`` the JSON Schemas
(written as YAML) the merged configuration is checked against.
"""
from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """Filesystem path of ``gflow/data/<subpackage>[/<filename>]``."""
    root = Path(str(resources.files(__name__) / subpackage))
    return root / filename if filename else root


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Parse a bundled YAML file once per process."""
    text = get_data_path(subpackage, filename).read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


__all__ = ["get_data_path", "read_yaml"]
