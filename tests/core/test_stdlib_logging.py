from __future__ import annotations

import logging
from pathlib import Path

from gflow.core.stdlib_logging import configure_stdlib_logging


def test_file_handler_writes_at_configured_level(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "gflow.log"

    configure_stdlib_logging(log_path=log_file, level="warning")
    logging.getLogger("gflow.test").info("hidden")
    logging.getLogger("gflow.test").warning("visible")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "visible" in text
    assert "hidden" not in text


def test_reconfiguring_same_path_keeps_one_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "gflow.log"
    root = logging.getLogger()

    configure_stdlib_logging(log_path=log_file)
    before = len(root.handlers)
    configure_stdlib_logging(log_path=log_file)

    assert len(root.handlers) == before


def test_verbose_logs_to_stderr(capsys) -> None:
    configure_stdlib_logging(verbose=True)

    logging.getLogger("gflow.test").debug("git fetch origin")

    captured = capsys.readouterr()
    assert "git fetch origin" in captured.err
    assert captured.out == ""
