"""Shared CLI utility functions.

Repository precondition, config loading and result reporting used by every
command.
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from gflow.core.config.domains import LoggingConfig, TimeoutsConfig, WorkflowConfig
from gflow.core.exceptions import RepositoryNotFoundError
from gflow.core.git import GitRepository
from gflow.core.stdlib_logging import configure_stdlib_logging
from gflow.core.workflow import ProcedureResult, WorkflowSettings

from ._output import OutputFormatter

ROLLBACK_NOTE = "No rollback was performed; the repository is left as the failed step found it"


@dataclass
class WorkflowContext:
    """Everything a command needs once the repository precondition holds."""

    repo: GitRepository
    settings: WorkflowSettings
    output: OutputFormatter


def resolve_start_path(args: argparse.Namespace) -> Path:
    """Return --repo-root when given, else the current directory."""
    raw = getattr(args, "repo_root", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return Path.cwd()


def require_repository(args: argparse.Namespace) -> Path:
    """Return the repository top-level directory.

    Raises:
        RepositoryNotFoundError: When the start path is not inside a git work tree.
    """
    start = resolve_start_path(args)
    probe = GitRepository(start)
    if not probe.is_repository():
        raise RepositoryNotFoundError(
            f"Not inside a git repository: {start}",
            context={"path": str(start)},
        )
    return probe.toplevel() or start


def build_context(args: argparse.Namespace, output: OutputFormatter) -> WorkflowContext:
    """Check the repository precondition, load config and wire the collaborator."""
    verbose = bool(getattr(args, "verbose", False))
    configure_stdlib_logging(verbose=verbose)

    root = require_repository(args)

    log_cfg = LoggingConfig(repo_root=root)
    configure_stdlib_logging(
        log_path=log_cfg.log_path if log_cfg.enabled else None,
        level=log_cfg.level,
        verbose=verbose,
    )

    settings = WorkflowConfig(repo_root=root).to_settings()
    timeouts = TimeoutsConfig(repo_root=root)
    repo = GitRepository(
        root,
        remote=settings.remote,
        timeout=timeouts.git_operations_seconds,
        network_timeout=timeouts.network_operations_seconds,
    )
    return WorkflowContext(repo=repo, settings=settings, output=output)


def report_result(output: OutputFormatter, result: ProcedureResult) -> int:
    """Print the closing lines for ``result`` and return the exit code."""
    if output.json_mode:
        output.json_output(result.to_dict())
        return 0 if result.ok else 1

    if result.ok:
        return 0

    output.error(result.error or f"{result.procedure} failed")
    if result.hint:
        output.info(result.hint)
    output.info(ROLLBACK_NOTE)
    return 1


def confirm(prompt: str, *, json_mode: bool = False) -> bool:
    """Ask a yes/no question; anything but an answer starting with y is no.

    The prompt goes to stderr in JSON mode so stdout stays parseable.
    """
    stream = sys.stderr if json_mode else sys.stdout
    stream.write(prompt)
    stream.flush()
    answer = sys.stdin.readline()
    return answer.strip()[:1].lower() == "y"


__all__ = [
    "WorkflowContext",
    "resolve_start_path",
    "require_repository",
    "build_context",
    "report_result",
    "confirm",
]
