"""Domain-specific configuration for gflow's log file."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from ..base import BaseDomainConfig


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def enabled(self) -> bool:
        return bool(self.section.get("enabled", False))

    @cached_property
    def level(self) -> str:
        return str(self.section.get("level", "INFO")).upper()

    @cached_property
    def log_path(self) -> Optional[Path]:
        """Absolute log file path; relative paths resolve against the repo root."""
        raw = self.section.get("path")
        if not raw:
            return None
        path = Path(str(raw)).expanduser()
        if not path.is_absolute():
            if self.repo_root is None:
                return None
            path = Path(self.repo_root) / path
        return path


__all__ = ["LoggingConfig"]
