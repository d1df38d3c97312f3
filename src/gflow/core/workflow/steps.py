"""Ordered step execution with step-level short-circuit.

A procedure body calls :meth:`ProcedureRun.step` once per git operation.
Every executed step is recorded in order; the first failing hard step raises
:class:`StepFailedError`, which :func:`run_procedure` turns into a failed
:class:`ProcedureResult`. Nothing is rolled back: the repository is left
where the failing step stopped.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol

from gflow.core.exceptions import StepFailedError
from gflow.core.git.result import GitResult

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"
STATUS_NOOP = "noop"
STATUS_CANCELLED = "cancelled"


class Reporter(Protocol):
    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class NullReporter:
    """Reporter that discards everything (library use and tests)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


@dataclass(frozen=True)
class StepRecord:
    name: str
    result: GitResult
    soft: bool = False

    @property
    def ok(self) -> bool:
        return self.result.ok

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "soft": self.soft, **self.result.to_dict()}


@dataclass
class ProcedureResult:
    """What one procedure run did, step by step."""

    procedure: str
    status: str = STATUS_SUCCESS
    steps: List[StepRecord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None
    error: Optional[str] = None
    hint: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != STATUS_FAILED

    @property
    def step_names(self) -> List[str]:
        return [s.name for s in self.steps]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "procedure": self.procedure,
            "status": self.status,
            "steps": [s.to_dict() for s in self.steps],
            "warnings": list(self.warnings),
            "failed_step": self.failed_step,
            "error": self.error,
            "hint": self.hint,
        }


class ProcedureRun:
    """Mutable state of one procedure while it executes."""

    def __init__(self, procedure: str, reporter: Optional[Reporter] = None) -> None:
        self.result = ProcedureResult(procedure=procedure)
        self.reporter: Reporter = reporter or NullReporter()

    def step(
        self,
        name: str,
        action: Callable[[], GitResult],
        *,
        soft: bool = False,
        warning: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> GitResult:
        """Execute one step and record it.

        Args:
            name: Stable step identifier (e.g. ``"checkout-main"``)
            action: Zero-argument callable performing the git operation
            soft: A failure is downgraded to a warning instead of aborting
            warning: Message reported when a soft step fails
            hint: Follow-up advice attached to the result when a hard step fails

        Raises:
            StepFailedError: When a hard step fails.
        """
        logger.info("%s: step %s", self.result.procedure, name)
        result = action()
        self.result.steps.append(StepRecord(name=name, result=result, soft=soft))
        if result.ok:
            return result

        if soft:
            message = warning or f"{name} failed: {result.reason}"
            logger.warning("%s: soft step %s failed: %s", self.result.procedure, name, result.reason)
            self.warning(message)
            return result

        logger.error("%s: step %s failed: %s", self.result.procedure, name, result.reason)
        if hint:
            self.result.hint = hint
        raise StepFailedError(name, result)

    def info(self, message: str) -> None:
        self.reporter.info(message)

    def success(self, message: str) -> None:
        self.reporter.success(message)

    def warning(self, message: str) -> None:
        self.result.warnings.append(message)
        self.reporter.warning(message)

    def finish(self, status: str) -> None:
        self.result.status = status


def run_procedure(
    procedure: str,
    body: Callable[[ProcedureRun], None],
    reporter: Optional[Reporter] = None,
) -> ProcedureResult:
    """Run ``body`` and convert a failing hard step into a failed result."""
    run = ProcedureRun(procedure, reporter)
    try:
        body(run)
    except StepFailedError as exc:
        run.result.status = STATUS_FAILED
        run.result.failed_step = exc.step
        run.result.error = str(exc)
    return run.result


__all__ = [
    "STATUS_SUCCESS",
    "STATUS_FAILED",
    "STATUS_NOOP",
    "STATUS_CANCELLED",
    "Reporter",
    "NullReporter",
    "StepRecord",
    "ProcedureResult",
    "ProcedureRun",
    "run_procedure",
]
