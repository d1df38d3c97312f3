"""YAML file reading for the config layers."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Parse ``path`` with ``yaml.safe_load``.

    A missing file, an unreadable file or bad YAML yields ``default``; with
    ``raise_on_error`` the underlying ``FileNotFoundError``, ``OSError`` or
    ``yaml.YAMLError`` propagates instead. An empty document also yields
    ``default``.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default
    return default if data is None else data


def iter_yaml_files(directory: Path) -> list[Path]:
    """``*.yaml``/``*.yml`` files directly in ``directory``, by name."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix in {".yaml", ".yml"}),
        key=lambda p: p.name,
    )


__all__ = ["read_yaml", "iter_yaml_files"]
