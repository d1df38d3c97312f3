from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_CONFIGURED_LOG_PATH: str | None = None
_GFLOW_FILE_HANDLER: logging.Handler | None = None
_GFLOW_STDERR_HANDLER: logging.Handler | None = None

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(
    *,
    log_path: Optional[Path] = None,
    level: str = "INFO",
    verbose: bool = False,
) -> None:
    """Configure stdlib logging for one CLI invocation.

    Installs a file handler at ``log_path`` when given and, with ``verbose``,
    a DEBUG handler on stderr. Nothing is ever written to stdout, which
    carries the tagged user-facing output.

    Idempotent per-process: if already configured for the same file, the
    file handler is kept.
    """
    global _CONFIGURED_LOG_PATH, _GFLOW_FILE_HANDLER, _GFLOW_STDERR_HANDLER

    root = logging.getLogger()
    levels = []

    if log_path is not None:
        resolved = str(Path(log_path).resolve())
        if _CONFIGURED_LOG_PATH != resolved or _GFLOW_FILE_HANDLER is None:
            if _GFLOW_FILE_HANDLER is not None:
                root.removeHandler(_GFLOW_FILE_HANDLER)
                _GFLOW_FILE_HANDLER.close()
            Path(resolved).parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(resolved, encoding="utf-8")
            fh.setFormatter(logging.Formatter(_FORMAT))
            root.addHandler(fh)
            _GFLOW_FILE_HANDLER = fh
            _CONFIGURED_LOG_PATH = resolved
        _GFLOW_FILE_HANDLER.setLevel(_level_from_name(level))
        levels.append(_level_from_name(level))

    if verbose and _GFLOW_STDERR_HANDLER is None:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(logging.DEBUG)
        sh.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(sh)
        _GFLOW_STDERR_HANDLER = sh
    if _GFLOW_STDERR_HANDLER is not None:
        levels.append(logging.DEBUG)

    if levels:
        root.setLevel(min(levels))
    elif not root.handlers:
        # Keep the implicit lastResort handler from printing warnings
        # into the tagged output.
        root.addHandler(logging.NullHandler())


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: clear configured handlers."""
    global _CONFIGURED_LOG_PATH, _GFLOW_FILE_HANDLER, _GFLOW_STDERR_HANDLER
    root = logging.getLogger()
    for h in (_GFLOW_FILE_HANDLER, _GFLOW_STDERR_HANDLER):
        if h is not None:
            root.removeHandler(h)
            h.close()
    _CONFIGURED_LOG_PATH = None
    _GFLOW_FILE_HANDLER = None
    _GFLOW_STDERR_HANDLER = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
