from __future__ import annotations

from .logging import LoggingConfig
from .timeouts import TimeoutsConfig
from .workflow import WorkflowConfig

__all__ = ["LoggingConfig", "TimeoutsConfig", "WorkflowConfig"]
