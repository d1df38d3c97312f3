"""End-to-end runs of every command against real repositories.

Each test works in a fresh ``work`` clone of a bare ``origin``; a second
clone stands in for a teammate pushing to the shared remote.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from gflow.cli._dispatcher import main
from helpers.git_helpers import (
    clone,
    current_branch,
    git,
    git_commit,
    head_subject,
    init_with_remote,
    remote_branches,
    rev,
    stash_count,
    status_porcelain,
)


def _gflow(work: Path, *argv: str) -> int:
    return main([*argv, "--repo-root", str(work)])


def _teammate_commits_to_main(remote: Path, tmp_path: Path, filename: str, content: str) -> None:
    mate = clone(remote, tmp_path / "teammate")
    (mate / filename).write_text(content, encoding="utf-8")
    git_commit(mate, f"teammate adds {filename}")
    git(mate, "push", "origin", "main")


def _feature_branch(work: Path, name: str = "feature/x") -> None:
    git(work, "checkout", "-b", name)
    (work / "feature.txt").write_text("feature work\n", encoding="utf-8")
    git_commit(work, "feature work")
    git(work, "push", "-u", "origin", name)


def test_new_branch_from_dirty_tree(git_workspace, capsys) -> None:
    work, remote = git_workspace
    (work / "README.md").write_text("# Test Project\nlocal edit\n", encoding="utf-8")
    (work / "notes.txt").write_text("scratch\n", encoding="utf-8")

    assert _gflow(work, "-n", "feature/x") == 0

    out = capsys.readouterr().out
    assert "[SUCCESS] Restored stashed changes" in out
    assert current_branch(work) == "feature/x"
    assert "feature/x" in remote_branches(remote)
    assert git(work, "rev-parse", "--abbrev-ref", "feature/x@{upstream}").strip() == "origin/feature/x"
    assert (work / "notes.txt").read_text(encoding="utf-8") == "scratch\n"
    assert "local edit" in (work / "README.md").read_text(encoding="utf-8")
    assert stash_count(work) == 0


def test_new_branch_starts_from_latest_main(git_workspace, tmp_path: Path) -> None:
    work, remote = git_workspace
    _teammate_commits_to_main(remote, tmp_path, "shared.txt", "from teammate\n")

    assert _gflow(work, "--new", "feature/y") == 0

    assert (work / "shared.txt").exists()
    assert rev(work, "feature/y") == rev(work, "origin/main")


def test_new_branch_switches_to_existing_remote_branch(git_workspace, tmp_path: Path) -> None:
    work, remote = git_workspace
    mate = clone(remote, tmp_path / "teammate")
    git(mate, "checkout", "-b", "feature/shared")
    (mate / "shared.txt").write_text("wip\n", encoding="utf-8")
    git_commit(mate, "shared wip")
    git(mate, "push", "-u", "origin", "feature/shared")

    assert _gflow(work, "-n", "feature/shared") == 0

    assert current_branch(work) == "feature/shared"
    assert head_subject(work) == "shared wip"
    assert git(work, "rev-parse", "--abbrev-ref", "feature/shared@{upstream}").strip() == "origin/feature/shared"


def test_new_branch_with_master_as_main(tmp_path: Path) -> None:
    work, remote = init_with_remote(tmp_path, branch="master")

    assert _gflow(work, "-n", "feature/x") == 0

    assert current_branch(work) == "feature/x"
    assert rev(work, "feature/x") == rev(work, "master")
    assert "feature/x" in remote_branches(remote)


def test_merge_main_brings_branch_up_to_date(git_workspace, tmp_path: Path) -> None:
    work, remote = git_workspace
    _feature_branch(work)
    _teammate_commits_to_main(remote, tmp_path, "shared.txt", "from teammate\n")

    assert _gflow(work, "-m", "feature/x") == 0

    assert current_branch(work) == "feature/x"
    assert (work / "shared.txt").exists()
    assert (work / "feature.txt").exists()
    assert rev(work, "feature/x") == git(remote, "rev-parse", "feature/x").strip()


def test_merge_main_missing_branch(git_workspace, capsys) -> None:
    work, _ = git_workspace

    assert _gflow(work, "-m", "feature/nope") == 1

    assert "[ERROR] Branch 'feature/nope' does not exist locally" in capsys.readouterr().out
    assert current_branch(work) == "main"


def test_merge_conflict_is_left_for_the_user(git_workspace, tmp_path: Path, capsys) -> None:
    work, remote = git_workspace
    git(work, "checkout", "-b", "feature/x")
    (work / "README.md").write_text("feature version\n", encoding="utf-8")
    git_commit(work, "feature edits readme")
    git(work, "push", "-u", "origin", "feature/x")
    _teammate_commits_to_main(remote, tmp_path, "README.md", "main version\n")
    before = git(remote, "rev-parse", "feature/x").strip()

    assert _gflow(work, "-m", "feature/x") == 1

    out = capsys.readouterr().out
    assert "[ERROR] Step 'merge-main' failed" in out
    assert "Resolve the conflicts" in out
    assert "No rollback was performed" in out
    assert current_branch(work) == "feature/x"
    assert (work / ".git" / "MERGE_HEAD").exists()
    assert git(remote, "rev-parse", "feature/x").strip() == before


def test_merge_stash_restores_local_edits(git_workspace, tmp_path: Path) -> None:
    work, remote = git_workspace
    _feature_branch(work)
    _teammate_commits_to_main(remote, tmp_path, "shared.txt", "from teammate\n")
    (work / "feature.txt").write_text("feature work\nmore\n", encoding="utf-8")
    (work / "draft.md").write_text("draft\n", encoding="utf-8")

    assert _gflow(work, "-ms", "feature/x") == 0

    assert (work / "shared.txt").exists()
    assert (work / "feature.txt").read_text(encoding="utf-8") == "feature work\nmore\n"
    assert (work / "draft.md").exists()
    assert stash_count(work) == 0
    assert rev(work, "feature/x") == git(remote, "rev-parse", "feature/x").strip()


def test_merge_stash_conflict_keeps_stash(git_workspace, tmp_path: Path, capsys) -> None:
    work, remote = git_workspace
    git(work, "checkout", "-b", "feature/x")
    (work / "README.md").write_text("feature version\n", encoding="utf-8")
    git_commit(work, "feature edits readme")
    _teammate_commits_to_main(remote, tmp_path, "README.md", "main version\n")
    (work / "draft.md").write_text("draft\n", encoding="utf-8")

    assert _gflow(work, "--merge-stash", "feature/x") == 1

    out = capsys.readouterr().out
    assert "still stashed" in out
    assert stash_count(work) == 1


def test_quick_commit_without_push(git_workspace) -> None:
    work, remote = git_workspace
    (work / "bug.py").write_text("fixed = True\n", encoding="utf-8")

    assert _gflow(work, "-qc", "fix bug") == 0

    assert head_subject(work) == "fix bug"
    assert status_porcelain(work) == ""
    assert git(remote, "log", "-1", "--format=%s", "main").strip() == "Initial commit"


def test_quick_commit_with_push(git_workspace) -> None:
    work, remote = git_workspace
    (work / "bug.py").write_text("fixed = True\n", encoding="utf-8")

    assert _gflow(work, "--quick-commit", "fix bug", "-p") == 0

    assert git(remote, "log", "-1", "--format=%s", "main").strip() == "fix bug"


def test_quick_commit_message_starting_with_dash(git_workspace, capsys) -> None:
    work, _ = git_workspace
    (work / "bug.py").write_text("x\n", encoding="utf-8")

    assert main(["-qc", "--repo-root", str(work), "--", "-wip"]) == 0

    assert head_subject(work) == "-wip"
    assert "unrecognized arguments" not in capsys.readouterr().out


def test_quick_commit_requires_message(git_workspace, capsys) -> None:
    work, _ = git_workspace
    (work / "bug.py").write_text("x\n", encoding="utf-8")

    assert _gflow(work, "-qc") == 1

    assert "[ERROR] Commit message is required" in capsys.readouterr().out
    assert head_subject(work) == "Initial commit"


@pytest.mark.parametrize("flag", ["--force", "-f"])
def test_forced_clean(git_workspace, flag: str) -> None:
    work, _ = git_workspace
    (work / "README.md").write_text("edited\n", encoding="utf-8")
    (work / "tmp").mkdir()
    (work / "tmp" / "junk.txt").write_text("junk\n", encoding="utf-8")

    assert _gflow(work, "-c", flag) == 0

    assert status_porcelain(work) == ""
    assert not (work / "tmp").exists()
