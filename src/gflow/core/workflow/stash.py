"""Stash capture/restore around a procedure."""
from __future__ import annotations

from datetime import datetime
from enum import Enum

from gflow.core.exceptions import GflowError
from gflow.core.git.protocols import RepositoryPort
from gflow.core.git.result import GitResult

from .steps import ProcedureRun


class StashState(str, Enum):
    STASHED = "stashed"
    NONE = "none"


class StashToken:
    """Whether the capture step actually shelved changes.

    A token is consumed by exactly one restore.
    """

    def __init__(self, state: StashState) -> None:
        self.state = state
        self._consumed = False

    def __repr__(self) -> str:
        return f"StashToken({self.state.value}, consumed={self._consumed})"

    @property
    def stashed(self) -> bool:
        return self.state is StashState.STASHED

    @property
    def consumed(self) -> bool:
        return self._consumed

    def consume(self) -> None:
        if self._consumed:
            raise GflowError("Stash token has already been restored", context={"state": self.state.value})
        self._consumed = True


def stash_message(label: str, procedure: str, branch: str) -> str:
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return f"{label}: auto-stash before {procedure} {branch} ({stamp})"


def capture_stash(run: ProcedureRun, repo: RepositoryPort, message: str) -> StashToken:
    """Stash uncommitted and untracked changes if there are any."""
    if not repo.has_changes():
        run.info("No local changes to stash")
        return StashToken(StashState.NONE)

    run.info("Stashing local changes")
    run.step("stash", lambda: repo.stash_push(message))
    return StashToken(StashState.STASHED)


def restore_stash(run: ProcedureRun, repo: RepositoryPort, token: StashToken) -> GitResult | None:
    """Re-apply the stash captured for ``token``; conflicts are warnings."""
    token.consume()
    if not token.stashed:
        return None

    run.info("Restoring stashed changes")
    result = run.step(
        "stash-pop",
        repo.stash_pop,
        soft=True,
        warning="Restoring stashed changes hit conflicts; resolve them manually (the stash entry was kept)",
    )
    if result.ok:
        run.success("Restored stashed changes")
    return result


__all__ = [
    "StashState",
    "StashToken",
    "stash_message",
    "capture_stash",
    "restore_stash",
]
