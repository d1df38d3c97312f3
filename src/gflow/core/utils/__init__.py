"""Shared utilities (subprocess, YAML I/O, merging, paths)."""
from __future__ import annotations

from .io import iter_yaml_files, read_yaml
from .merge import deep_merge, merge_arrays
from .paths import get_project_config_dir, get_user_config_dir
from .subprocess import run_git_command, run_with_timeout

__all__ = [
    "read_yaml",
    "iter_yaml_files",
    "deep_merge",
    "merge_arrays",
    "get_project_config_dir",
    "get_user_config_dir",
    "run_git_command",
    "run_with_timeout",
]
