"""Per-invocation limits for git child processes."""
from __future__ import annotations

from functools import cached_property

from gflow.core.exceptions import ConfigError

from ..base import BaseDomainConfig

LOCAL_KEY = "git_operations_seconds"
NETWORK_KEY = "network_operations_seconds"


class TimeoutsConfig(BaseDomainConfig):
    """Seconds allowed for local git commands and for fetch/pull/push."""

    def _config_section(self) -> str:
        return "timeouts"

    def _seconds(self, key: str) -> float:
        if key not in self.section:
            raise ConfigError(
                f"timeouts.{key} missing from configuration",
                context={"key": f"timeouts.{key}"},
            )
        return float(self.section[key])

    @cached_property
    def git_operations_seconds(self) -> float:
        return self._seconds(LOCAL_KEY)

    @cached_property
    def network_operations_seconds(self) -> float:
        return self._seconds(NETWORK_KEY)


__all__ = ["TimeoutsConfig"]
