"""Git repository collaborator backed by the git command-line tool."""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from gflow.core.utils.subprocess import DEFAULT_TIMEOUT_SECONDS, run_git_command

from .result import TIMEOUT_RETURNCODE, GitResult

logger = logging.getLogger(__name__)


class GitRepository:
    """Thin wrappers around git invocations in one working tree.

    Mutating operations return a :class:`GitResult` and never raise on a
    non-zero exit. Queries (``*_exists``, ``has_changes``) return booleans.
    """

    def __init__(
        self,
        path: Path,
        *,
        remote: str = "origin",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        network_timeout: Optional[float] = None,
    ) -> None:
        self.path = Path(path)
        self.remote = remote
        self.timeout = float(timeout)
        self.network_timeout = float(network_timeout) if network_timeout is not None else self.timeout

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r}, remote={self.remote!r})"

    def run(self, args: Sequence[str], *, network: bool = False) -> GitResult:
        """Run ``git <args>`` in this repository and wrap the outcome."""
        argv = ("git", *args)
        timeout = self.network_timeout if network else self.timeout
        try:
            proc = run_git_command(list(args), cwd=self.path, timeout=timeout)
        except subprocess.TimeoutExpired:
            return GitResult(argv=argv, returncode=TIMEOUT_RETURNCODE, stderr=f"timed out after {timeout:.0f}s")
        except FileNotFoundError as exc:
            # Raised for a missing git binary or a vanished working directory.
            return GitResult(argv=argv, returncode=127, stderr=str(exc))
        return GitResult(
            argv=argv,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )

    def ok(self, args: Sequence[str]) -> bool:
        """Return True when git exits with status 0."""
        return self.run(args).ok

    # ---------- queries ----------

    def is_repository(self) -> bool:
        if not self.path.is_dir():
            return False
        result = self.run(["rev-parse", "--is-inside-work-tree"])
        return result.ok and result.stdout.strip() == "true"

    def toplevel(self) -> Optional[Path]:
        result = self.run(["rev-parse", "--show-toplevel"])
        if not result.ok or not result.stdout.strip():
            return None
        return Path(result.stdout.strip())

    def has_changes(self) -> bool:
        result = self.run(["status", "--porcelain", "--untracked-files=all"])
        if not result.ok:
            logger.warning("git status failed: %s", result.reason)
            return False
        return bool(result.stdout.strip())

    def current_branch(self) -> str:
        result = self.run(["symbolic-ref", "--short", "-q", "HEAD"])
        branch = result.stdout.strip() if result.ok else ""
        return branch or "HEAD"

    def local_branch_exists(self, branch: str) -> bool:
        return self.ok(["show-ref", "--verify", "--quiet", f"refs/heads/{branch}"])

    def remote_branch_exists(self, branch: str) -> bool:
        return self.ok(["show-ref", "--verify", "--quiet", f"refs/remotes/{self.remote}/{branch}"])

    def valid_branch_name(self, branch: str) -> bool:
        # --branch would expand @{-N} to an existing branch
        if branch.startswith("-") or branch == "HEAD":
            return False
        return self.ok(["check-ref-format", f"refs/heads/{branch}"])

    # ---------- working tree ----------

    def stash_push(self, message: str) -> GitResult:
        return self.run(["stash", "push", "--include-untracked", "-m", message])

    def stash_pop(self) -> GitResult:
        return self.run(["stash", "pop"])

    def reset_hard(self) -> GitResult:
        return self.run(["reset", "--hard", "HEAD"])

    def clean_untracked(self) -> GitResult:
        return self.run(["clean", "-fd"])

    def add_all(self) -> GitResult:
        return self.run(["add", "-A"])

    def commit(self, message: str) -> GitResult:
        return self.run(["commit", "-m", message])

    # ---------- branches ----------

    def checkout(self, branch: str) -> GitResult:
        return self.run(["checkout", branch])

    def checkout_new(self, branch: str) -> GitResult:
        return self.run(["checkout", "-b", branch])

    def checkout_tracking(self, branch: str) -> GitResult:
        return self.run(["checkout", "-b", branch, "--track", f"{self.remote}/{branch}"])

    def merge(self, branch: str) -> GitResult:
        return self.run(["merge", "--no-edit", branch])

    # ---------- remote ----------

    def fetch(self) -> GitResult:
        return self.run(["fetch", self.remote], network=True)

    def pull(self, branch: str) -> GitResult:
        return self.run(["pull", "--no-edit", self.remote, branch], network=True)

    def push(self, branch: str, *, set_upstream: bool = False) -> GitResult:
        args = ["push"]
        if set_upstream:
            args.append("--set-upstream")
        args += [self.remote, branch]
        return self.run(args, network=True)


__all__ = ["GitRepository"]
