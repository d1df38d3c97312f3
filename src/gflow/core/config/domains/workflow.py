"""Domain-specific configuration for branch workflows."""
from __future__ import annotations

from functools import cached_property
from typing import FrozenSet, Tuple

from gflow.core.workflow.settings import WorkflowSettings

from ..base import BaseDomainConfig


class WorkflowConfig(BaseDomainConfig):
    """Typed access to the ``workflow`` section.

    The schema guarantees every key is present, so accessors index directly.
    """

    def _config_section(self) -> str:
        return "workflow"

    @cached_property
    def protected_branches(self) -> FrozenSet[str]:
        return frozenset(str(b).strip() for b in self.section["protected_branches"] if str(b).strip())

    @cached_property
    def remote(self) -> str:
        return str(self.section["remote"])

    @cached_property
    def main_branch_candidates(self) -> Tuple[str, ...]:
        return tuple(str(b) for b in self.section["main_branch_candidates"])

    @cached_property
    def default_main_branch(self) -> str:
        return str(self.section["default_main_branch"])

    @cached_property
    def stash_label(self) -> str:
        return str(self.section["stash_label"])

    def to_settings(self) -> WorkflowSettings:
        """Freeze this section into the value injected into procedures."""
        return WorkflowSettings(
            protected_branches=self.protected_branches,
            remote=self.remote,
            main_branch_candidates=self.main_branch_candidates,
            default_main_branch=self.default_main_branch,
            stash_label=self.stash_label,
        )


__all__ = ["WorkflowConfig"]
