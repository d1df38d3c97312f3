"""Typed outcome of a single git invocation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

TIMEOUT_RETURNCODE = 124


@dataclass(frozen=True)
class GitResult:
    """Success or failure-with-reason of one git command.

    Collaborator calls return this instead of raising on a non-zero exit so
    callers decide whether a failure is fatal or a warning.
    """

    argv: Tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def reason(self) -> str:
        """Short human-readable failure reason (empty on success)."""
        if self.ok:
            return ""
        message = (self.stderr or "").strip() or (self.stdout or "").strip()
        if message:
            # Last line is usually the actionable one ("fatal: ...").
            return message.splitlines()[-1]
        return f"{' '.join(self.argv)} exited with status {self.returncode}"

    @property
    def command(self) -> str:
        return " ".join(self.argv)

    @classmethod
    def success(cls, *argv: str, stdout: str = "") -> "GitResult":
        return cls(argv=tuple(argv), returncode=0, stdout=stdout)

    @classmethod
    def failure(cls, *argv: str, reason: str = "", returncode: int = 1) -> "GitResult":
        return cls(argv=tuple(argv), returncode=returncode, stderr=reason)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "returncode": self.returncode,
            "ok": self.ok,
            "reason": self.reason,
        }


__all__ = ["GitResult", "TIMEOUT_RETURNCODE"]
