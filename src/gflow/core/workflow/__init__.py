"""Branch-management procedures and the step runner they share."""
from __future__ import annotations

from .branches import require_branch_name, resolve_main_branch, validate_new_branch_name
from .procedures import (
    CLEAN,
    MERGE_MAIN,
    MERGE_MAIN_WITH_STASH,
    NEW_BRANCH,
    QUICK_COMMIT,
    clean,
    merge_main,
    merge_main_with_stash,
    new_branch,
    quick_commit,
)
from .settings import WorkflowSettings
from .stash import StashState, StashToken, capture_stash, restore_stash
from .steps import NullReporter, ProcedureResult, ProcedureRun, Reporter, StepRecord, run_procedure

__all__ = [
    "CLEAN",
    "MERGE_MAIN",
    "MERGE_MAIN_WITH_STASH",
    "NEW_BRANCH",
    "QUICK_COMMIT",
    "clean",
    "merge_main",
    "merge_main_with_stash",
    "new_branch",
    "quick_commit",
    "require_branch_name",
    "resolve_main_branch",
    "validate_new_branch_name",
    "WorkflowSettings",
    "StashState",
    "StashToken",
    "capture_stash",
    "restore_stash",
    "NullReporter",
    "ProcedureResult",
    "ProcedureRun",
    "Reporter",
    "StepRecord",
    "run_procedure",
]
