"""Bounded subprocess execution for git invocations.

Every child process gets a timeout from the ``timeouts`` config section and
is logged at DEBUG with its argv, exit status and duration. Commands are
always passed as argv lists; no shell is involved.
"""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from time import perf_counter
from typing import Any, MutableMapping, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60.0


def run_with_timeout(cmd: Sequence[str], *, timeout: float | None = None, **kwargs: Any) -> subprocess.CompletedProcess:
    """``subprocess.run`` with a mandatory timeout and outcome logging.

    Raises:
        subprocess.TimeoutExpired: The child outlived ``timeout`` seconds.
    """
    limit = DEFAULT_TIMEOUT_SECONDS if timeout is None else float(timeout)
    argv = [str(part) for part in cmd]
    if "cwd" in kwargs and kwargs["cwd"] is not None:
        kwargs["cwd"] = str(kwargs["cwd"])

    started = perf_counter()
    logger.debug("run %s in %s (limit %.1fs)", argv, kwargs.get("cwd"), limit)
    try:
        proc = subprocess.run(argv, timeout=limit, **kwargs)
    except subprocess.TimeoutExpired:
        logger.warning("%s killed after %.1fs", argv, limit)
        raise
    logger.debug("%s -> %s (%.1fms)", argv, proc.returncode, (perf_counter() - started) * 1000.0)
    return proc


def run_git_command(
    args: Sequence[str],
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[MutableMapping[str, str]] = None,
    timeout: Optional[float] = None,
    capture_output: bool = True,
    check: bool = False,
) -> subprocess.CompletedProcess:
    """Run ``git <args>`` in ``cwd`` with text-mode output captured."""
    return run_with_timeout(
        ["git", *args],
        cwd=cwd,
        env=env,
        timeout=timeout,
        capture_output=capture_output,
        text=True,
        check=check,
    )


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "run_with_timeout",
    "run_git_command",
]
