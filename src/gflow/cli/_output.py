"""Unified CLI output formatting.

Text mode prints severity-tagged lines to stdout as they happen. JSON mode
stays silent while a procedure runs and prints one document at the end.
"""
from __future__ import annotations

import json
from typing import Any

from gflow.core.exceptions import GflowError

TAG_INFO = "[INFO]"
TAG_SUCCESS = "[SUCCESS]"
TAG_WARNING = "[WARNING]"
TAG_ERROR = "[ERROR]"


class OutputFormatter:
    """Tagged-line reporter used by every command.

    Implements the workflow ``Reporter`` protocol.
    """

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, suppress tagged lines and emit JSON documents
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def _tagged(self, tag: str, message: str) -> None:
        if not self.json_mode:
            print(f"{tag} {message}", flush=True)

    def info(self, message: str) -> None:
        self._tagged(TAG_INFO, message)

    def success(self, message: str) -> None:
        self._tagged(TAG_SUCCESS, message)

    def warning(self, message: str) -> None:
        self._tagged(TAG_WARNING, message)

    def error(self, message: str) -> None:
        self._tagged(TAG_ERROR, message)

    def failure(self, error: Exception) -> None:
        """Report an exception that ends the command.

        Text mode prints a single tagged line; JSON mode prints the error
        payload.
        """
        if self.json_mode:
            if isinstance(error, GflowError):
                payload = error.to_json_error()
            else:
                payload = {"message": str(error), "code": error.__class__.__name__, "context": {}}
            self.json_output({"status": "error", "error": payload})
        else:
            self.error(str(error))

    def json_output(self, data: Any) -> None:
        """Output raw JSON data."""
        print(json.dumps(data, indent=self.indent, default=str))


__all__ = [
    "OutputFormatter",
    "TAG_INFO",
    "TAG_SUCCESS",
    "TAG_WARNING",
    "TAG_ERROR",
]
