"""The five branch-management procedures.

Each procedure validates its arguments first (raising
:class:`~gflow.core.exceptions.ValidationError` before any git command that
changes state), then runs a fixed sequence of steps through
:func:`~gflow.core.workflow.steps.run_procedure`. A failing step stops the
sequence and leaves the repository where it is; nothing is rolled back.
"""
from __future__ import annotations

from typing import Callable, Optional

from gflow.core.exceptions import StepFailedError, ValidationError
from gflow.core.git.protocols import RepositoryPort

from .branches import require_branch_name, resolve_main_branch, validate_new_branch_name
from .settings import WorkflowSettings
from .stash import StashToken, capture_stash, restore_stash, stash_message
from .steps import (
    STATUS_CANCELLED,
    STATUS_NOOP,
    ProcedureResult,
    ProcedureRun,
    Reporter,
    run_procedure,
)

NEW_BRANCH = "new-branch"
MERGE_MAIN = "merge-main"
MERGE_MAIN_WITH_STASH = "merge-main-with-stash"
CLEAN = "clean"
QUICK_COMMIT = "quick-commit"

MERGE_CONFLICT_HINT = "Resolve the conflicts, commit the merge, then push the branch"


def _warn_if_still_stashed(run: ProcedureRun, token: StashToken) -> None:
    if token.stashed and not token.consumed:
        run.warning("Your local changes are still stashed; run 'git stash pop' once the repository is sorted out")


def _sync_main(run: ProcedureRun, repo: RepositoryPort, main: str) -> None:
    run.step("checkout-main", lambda: repo.checkout(main))
    run.step("pull-main", lambda: repo.pull(main))


def new_branch(
    repo: RepositoryPort,
    settings: WorkflowSettings,
    branch: Optional[str],
    *,
    reporter: Optional[Reporter] = None,
) -> ProcedureResult:
    """Start (or resume) work on ``branch`` from an up-to-date main branch.

    Steps: resolve main, stash, fetch, checkout main, pull main, then one of
    - nothing, when ``branch`` is the main branch
    - switch to the remote branch and pull it, when it exists remotely
    - switch to it and publish it, when it exists only locally
    - create it and publish it with upstream tracking
    and finally restore the stash (conflicts are warnings).

    Raises:
        ValidationError: Missing, invalid or protected branch name.
    """
    name = validate_new_branch_name(branch, settings, repo)

    def body(run: ProcedureRun) -> None:
        main = resolve_main_branch(repo, settings)
        run.info(f"Using '{main}' as the main branch")
        token = capture_stash(run, repo, stash_message(settings.stash_label, NEW_BRANCH, name))
        try:
            run.info(f"Updating '{main}' from {repo.remote}")
            run.step("fetch", repo.fetch)
            _sync_main(run, repo, main)

            if name == main:
                run.info(f"'{name}' is the main branch; nothing else to do")
            elif repo.remote_branch_exists(name):
                run.info(f"Branch '{name}' exists on {repo.remote}; switching to it")
                if repo.local_branch_exists(name):
                    run.step("checkout-branch", lambda: repo.checkout(name))
                else:
                    run.step("track-branch", lambda: repo.checkout_tracking(name))
                run.step("pull-branch", lambda: repo.pull(name))
                run.success(f"Switched to '{name}' and pulled the latest changes")
            elif repo.local_branch_exists(name):
                run.info(f"Branch '{name}' exists only locally; publishing it")
                run.step("checkout-branch", lambda: repo.checkout(name))
                run.step("publish-branch", lambda: repo.push(name, set_upstream=True))
                run.success(f"Published '{name}' to {repo.remote}")
            else:
                run.info(f"Creating branch '{name}' from '{main}'")
                run.step("create-branch", lambda: repo.checkout_new(name))
                run.step("publish-branch", lambda: repo.push(name, set_upstream=True))
                run.success(f"Created '{name}' and pushed it to {repo.remote} with upstream tracking")
        except StepFailedError:
            _warn_if_still_stashed(run, token)
            raise

        restore_stash(run, repo, token)

    return run_procedure(NEW_BRANCH, body, reporter)


def _require_local_branch(repo: RepositoryPort, branch: Optional[str], procedure: str) -> str:
    name = require_branch_name(branch, procedure=procedure)
    if not repo.local_branch_exists(name):
        raise ValidationError(
            f"Branch '{name}' does not exist locally",
            context={"branch": name, "procedure": procedure},
        )
    return name


def _merge_main_into(run: ProcedureRun, repo: RepositoryPort, name: str, main: str) -> None:
    run.step("checkout-branch", lambda: repo.checkout(name))
    run.info(f"Merging '{main}' into '{name}'")
    run.step("merge-main", lambda: repo.merge(main), hint=MERGE_CONFLICT_HINT)
    run.step("push-branch", lambda: repo.push(name))
    run.success(f"Merged '{main}' into '{name}' and pushed to {repo.remote}")


def merge_main(
    repo: RepositoryPort,
    settings: WorkflowSettings,
    branch: Optional[str],
    *,
    reporter: Optional[Reporter] = None,
) -> ProcedureResult:
    """Bring ``branch`` up to date with main and push it.

    A merge conflict aborts the run and leaves the repository mid-merge.

    Raises:
        ValidationError: Missing branch name, or the branch does not exist locally.
    """
    name = _require_local_branch(repo, branch, MERGE_MAIN)

    def body(run: ProcedureRun) -> None:
        main = resolve_main_branch(repo, settings)
        run.info(f"Updating '{main}'")
        _sync_main(run, repo, main)
        _merge_main_into(run, repo, name, main)

    return run_procedure(MERGE_MAIN, body, reporter)


def merge_main_with_stash(
    repo: RepositoryPort,
    settings: WorkflowSettings,
    branch: Optional[str],
    *,
    reporter: Optional[Reporter] = None,
) -> ProcedureResult:
    """Like :func:`merge_main`, wrapped in a stash and with an explicit fetch."""
    name = _require_local_branch(repo, branch, MERGE_MAIN_WITH_STASH)

    def body(run: ProcedureRun) -> None:
        main = resolve_main_branch(repo, settings)
        token = capture_stash(run, repo, stash_message(settings.stash_label, MERGE_MAIN_WITH_STASH, name))
        try:
            run.info(f"Updating '{main}' from {repo.remote}")
            run.step("fetch", repo.fetch)
            _sync_main(run, repo, main)
            _merge_main_into(run, repo, name, main)
        except StepFailedError:
            _warn_if_still_stashed(run, token)
            raise

        restore_stash(run, repo, token)

    return run_procedure(MERGE_MAIN_WITH_STASH, body, reporter)


def clean(
    repo: RepositoryPort,
    *,
    confirm: Callable[[], bool],
    force: bool = False,
    reporter: Optional[Reporter] = None,
) -> ProcedureResult:
    """Discard every uncommitted change and untracked file after confirmation.

    ``confirm`` is only consulted when ``force`` is false; a negative answer
    leaves the repository untouched and the result status is ``cancelled``.
    """

    def body(run: ProcedureRun) -> None:
        if not force and not confirm():
            run.info("Clean cancelled; nothing was changed")
            run.finish(STATUS_CANCELLED)
            return
        run.step("reset", repo.reset_hard)
        run.step("clean", repo.clean_untracked)
        run.success("Working tree reset to the last commit and untracked files removed")

    return run_procedure(CLEAN, body, reporter)


def quick_commit(
    repo: RepositoryPort,
    message: Optional[str],
    *,
    push: bool = False,
    reporter: Optional[Reporter] = None,
) -> ProcedureResult:
    """Stage everything and commit it; push the current branch when asked.

    Raises:
        ValidationError: Empty commit message.
    """
    text = (message or "").strip()
    if not text:
        raise ValidationError("Commit message is required", context={"procedure": QUICK_COMMIT})

    def body(run: ProcedureRun) -> None:
        if not repo.has_changes():
            run.warning("No changes to commit")
            run.finish(STATUS_NOOP)
            return
        run.step("stage", repo.add_all)
        run.step("commit", lambda: repo.commit(text))
        run.success(f"Committed: {text}")
        if push:
            current = repo.current_branch()
            run.info(f"Pushing '{current}' to {repo.remote}")
            run.step("push", lambda: repo.push(current))
            run.success(f"Pushed '{current}' to {repo.remote}")

    return run_procedure(QUICK_COMMIT, body, reporter)


__all__ = [
    "NEW_BRANCH",
    "MERGE_MAIN",
    "MERGE_MAIN_WITH_STASH",
    "CLEAN",
    "QUICK_COMMIT",
    "new_branch",
    "merge_main",
    "merge_main_with_stash",
    "clean",
    "quick_commit",
]
