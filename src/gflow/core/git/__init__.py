"""Git collaborator for gflow.

- GitResult: typed outcome of one git command
- GitRepository: command-line backed repository
- RepositoryPort: protocol the workflow procedures depend on
"""
from __future__ import annotations

from .protocols import RepositoryPort
from .repository import GitRepository
from .result import TIMEOUT_RETURNCODE, GitResult

__all__ = [
    "GitResult",
    "GitRepository",
    "RepositoryPort",
    "TIMEOUT_RETURNCODE",
]
