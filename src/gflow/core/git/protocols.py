"""Capability surface the workflow procedures need from a repository."""
from __future__ import annotations

from typing import Protocol

from .result import GitResult


class RepositoryPort(Protocol):
    remote: str

    def is_repository(self) -> bool: ...

    def has_changes(self) -> bool:
        """True when there are staged, unstaged or untracked changes."""
        ...

    def current_branch(self) -> str: ...

    def local_branch_exists(self, branch: str) -> bool: ...

    def remote_branch_exists(self, branch: str) -> bool: ...

    def valid_branch_name(self, branch: str) -> bool: ...

    def stash_push(self, message: str) -> GitResult: ...

    def stash_pop(self) -> GitResult: ...

    def fetch(self) -> GitResult: ...

    def checkout(self, branch: str) -> GitResult: ...

    def checkout_new(self, branch: str) -> GitResult: ...

    def checkout_tracking(self, branch: str) -> GitResult: ...

    def pull(self, branch: str) -> GitResult: ...

    def merge(self, branch: str) -> GitResult: ...

    def push(self, branch: str, *, set_upstream: bool = False) -> GitResult: ...

    def reset_hard(self) -> GitResult: ...

    def clean_untracked(self) -> GitResult: ...

    def add_all(self) -> GitResult: ...

    def commit(self, message: str) -> GitResult: ...


__all__ = ["RepositoryPort"]
