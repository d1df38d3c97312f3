from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping

if TYPE_CHECKING:
    from gflow.core.git.result import GitResult


class GflowError(Exception):
    """Base exception for gflow."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ValidationError(GflowError, ValueError):
    """Raised when a command argument is missing, malformed or protected."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        GflowError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class RepositoryNotFoundError(GflowError, FileNotFoundError):
    """Raised when the target directory is not inside a git repository."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        GflowError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ConfigError(GflowError, RuntimeError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        GflowError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class StepFailedError(GflowError):
    """Raised inside a procedure run when a hard step fails."""

    def __init__(self, step: str, result: "GitResult") -> None:
        self.step = step
        self.result = result
        super().__init__(
            f"Step '{step}' failed: {result.reason}",
            context={"step": step, "argv": list(result.argv), "returncode": result.returncode},
        )


__all__ = [
    "GflowError",
    "ValidationError",
    "RepositoryNotFoundError",
    "ConfigError",
    "StepFailedError",
]
