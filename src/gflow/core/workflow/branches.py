"""Branch name rules and main-branch resolution."""
from __future__ import annotations

from typing import Optional

from gflow.core.exceptions import ValidationError
from gflow.core.git.protocols import RepositoryPort

from .settings import WorkflowSettings


def require_branch_name(branch: Optional[str], *, procedure: str) -> str:
    name = (branch or "").strip()
    if not name:
        raise ValidationError(
            "Branch name is required",
            context={"procedure": procedure},
        )
    return name


def validate_new_branch_name(
    branch: Optional[str],
    settings: WorkflowSettings,
    repo: RepositoryPort,
) -> str:
    """Return the cleaned name or raise before anything touches the repository."""
    name = require_branch_name(branch, procedure="new-branch")
    if settings.is_protected(name):
        raise ValidationError(
            f"Cannot create or switch to protected branch '{name}'",
            context={"branch": name, "protected": sorted(settings.protected_branches)},
        )
    if not repo.valid_branch_name(name):
        raise ValidationError(f"'{name}' is not a valid branch name", context={"branch": name})
    return name


def resolve_main_branch(repo: RepositoryPort, settings: WorkflowSettings) -> str:
    """Return the first candidate that exists locally or on the remote.

    Falls back to ``settings.default_main_branch`` when none exists.
    """
    for candidate in settings.main_branch_candidates:
        if repo.local_branch_exists(candidate) or repo.remote_branch_exists(candidate):
            return candidate
    return settings.default_main_branch


__all__ = [
    "require_branch_name",
    "validate_new_branch_name",
    "resolve_main_branch",
]
