"""Typed accessors over one section of the merged configuration."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional

from .cache import get_cached_config


class BaseDomainConfig(ABC):
    """One top-level config section exposed as cached properties.

    Subclasses name their section and add a ``cached_property`` per key::

        class TimeoutsConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "timeouts"

    Passing ``config`` skips loading entirely, so tests can hand in a dict.
    """

    def __init__(self, repo_root: Optional[Path] = None, *, config: Optional[Dict[str, Any]] = None) -> None:
        self._repo_root = repo_root
        if config is None:
            config = get_cached_config(repo_root=repo_root)
        self._config = config

    @property
    def repo_root(self) -> Optional[Path]:
        return self._repo_root

    @abstractmethod
    def _config_section(self) -> str: ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        return self._config.get(self._config_section()) or {}


__all__ = ["BaseDomainConfig"]
