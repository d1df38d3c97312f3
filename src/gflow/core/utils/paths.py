"""Filesystem locations used by gflow."""
from __future__ import annotations

import os
from pathlib import Path

PROJECT_CONFIG_DIRNAME = ".gflow"
USER_CONFIG_ENV = "GFLOW_CONFIG_HOME"


def get_user_config_dir() -> Path:
    """Return the per-user config directory.

    ``$GFLOW_CONFIG_HOME`` wins, then ``$XDG_CONFIG_HOME/gflow``, then
    ``~/.config/gflow``.
    """
    override = os.environ.get(USER_CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser() / "gflow"
    return Path.home() / ".config" / "gflow"


def get_project_config_dir(repo_root: Path) -> Path:
    return Path(repo_root) / PROJECT_CONFIG_DIRNAME


__all__ = [
    "PROJECT_CONFIG_DIRNAME",
    "USER_CONFIG_ENV",
    "get_user_config_dir",
    "get_project_config_dir",
]
