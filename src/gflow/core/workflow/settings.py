from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

DEFAULT_PROTECTED_BRANCHES: FrozenSet[str] = frozenset(
    {"main", "master", "develop", "dev", "staging", "production"}
)


@dataclass(frozen=True)
class WorkflowSettings:
    """Immutable workflow settings injected into every procedure at startup."""

    protected_branches: FrozenSet[str] = field(default=DEFAULT_PROTECTED_BRANCHES)
    remote: str = "origin"
    main_branch_candidates: Tuple[str, ...] = ("main", "master")
    default_main_branch: str = "main"
    stash_label: str = "gflow"

    def __post_init__(self) -> None:
        # Accept any iterable from callers but store immutable containers.
        object.__setattr__(self, "protected_branches", frozenset(self.protected_branches))
        object.__setattr__(self, "main_branch_candidates", tuple(self.main_branch_candidates))

    def is_protected(self, branch: str) -> bool:
        return branch in self.protected_branches


__all__ = ["WorkflowSettings", "DEFAULT_PROTECTED_BRANCHES"]
