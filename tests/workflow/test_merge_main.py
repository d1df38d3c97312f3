from __future__ import annotations

import pytest

from gflow.core.exceptions import ValidationError
from gflow.core.workflow import WorkflowSettings, merge_main
from gflow.core.workflow.procedures import MERGE_CONFLICT_HINT
from gflow.core.workflow.steps import STATUS_FAILED
from helpers.fake_repo import FakeRepository


def _repo(**kwargs) -> FakeRepository:
    kwargs.setdefault("local", {"main", "feature/x"})
    kwargs.setdefault("remote_branches", {"main", "feature/x"})
    return FakeRepository(**kwargs)


def test_merges_main_into_branch_and_pushes(settings: WorkflowSettings) -> None:
    repo = _repo()

    result = merge_main(repo, settings, "feature/x")

    assert result.ok
    assert result.step_names == ["checkout-main", "pull-main", "checkout-branch", "merge-main", "push-branch"]
    assert ("merge", ("main",)) in repo.calls
    assert ("push", ("feature/x", False)) in repo.calls
    assert repo.current == "feature/x"


def test_does_not_stash_or_fetch(settings: WorkflowSettings) -> None:
    repo = _repo(dirty=True)

    merge_main(repo, settings, "feature/x")

    assert not repo.called("stash_push")
    assert not repo.called("fetch")


def test_missing_local_branch_fails_without_any_checkout(settings: WorkflowSettings) -> None:
    repo = _repo(local={"main"})

    with pytest.raises(ValidationError, match="does not exist locally"):
        merge_main(repo, settings, "feature/x")

    assert repo.mutations == []


def test_missing_name_is_rejected(settings: WorkflowSettings) -> None:
    repo = _repo()

    with pytest.raises(ValidationError, match="Branch name is required"):
        merge_main(repo, settings, None)

    assert repo.calls == []


def test_merge_conflict_stops_before_push(settings: WorkflowSettings) -> None:
    repo = _repo(fail={"merge": "CONFLICT (content): Merge conflict in README.md"})

    result = merge_main(repo, settings, "feature/x")

    assert result.status == STATUS_FAILED
    assert result.failed_step == "merge-main"
    assert result.hint == MERGE_CONFLICT_HINT
    assert "CONFLICT" in (result.error or "")
    assert "push" not in repo.mutations


def test_failed_checkout_of_main_stops_everything(settings: WorkflowSettings) -> None:
    repo = _repo(fail={"checkout": "error: Your local changes would be overwritten by checkout"})

    result = merge_main(repo, settings, "feature/x")

    assert result.failed_step == "checkout-main"
    assert repo.mutations == ["checkout"]


def test_master_repository(settings: WorkflowSettings) -> None:
    repo = FakeRepository(local={"master", "topic"}, remote_branches={"master"}, current="topic")

    result = merge_main(repo, settings, "topic")

    assert result.ok
    assert ("merge", ("master",)) in repo.calls
