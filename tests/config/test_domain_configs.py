from __future__ import annotations

from pathlib import Path

import pytest

from gflow.core.config.cache import clear_all_caches, get_cached_config
from gflow.core.config.domains import LoggingConfig, TimeoutsConfig, WorkflowConfig
from gflow.core.exceptions import ConfigError
from gflow.core.workflow import WorkflowSettings


def test_workflow_config_freezes_into_settings(tmp_path: Path) -> None:
    settings = WorkflowConfig(repo_root=tmp_path).to_settings()

    assert isinstance(settings, WorkflowSettings)
    assert settings == WorkflowSettings()


def test_workflow_config_reads_project_overrides(tmp_path: Path) -> None:
    cfg_dir = tmp_path / ".gflow"
    cfg_dir.mkdir()
    (cfg_dir / "config.yaml").write_text(
        "workflow:\n"
        "  remote: upstream\n"
        "  protected_branches: [main, release]\n"
        "  main_branch_candidates: [trunk]\n"
        "  default_main_branch: trunk\n",
        encoding="utf-8",
    )

    settings = WorkflowConfig(repo_root=tmp_path).to_settings()

    assert settings.remote == "upstream"
    assert settings.protected_branches == frozenset({"main", "release"})
    assert settings.main_branch_candidates == ("trunk",)
    assert settings.default_main_branch == "trunk"


def test_timeouts_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GFLOW_TIMEOUTS__GIT_OPERATIONS_SECONDS", "7")

    cfg = TimeoutsConfig(repo_root=tmp_path)

    assert cfg.git_operations_seconds == 7.0
    assert cfg.network_operations_seconds == 300.0


def test_timeouts_config_requires_keys() -> None:
    cfg = TimeoutsConfig(config={"timeouts": {"git_operations_seconds": 1}})

    with pytest.raises(ConfigError, match="network_operations_seconds") as excinfo:
        _ = cfg.network_operations_seconds

    assert excinfo.value.context == {"key": "timeouts.network_operations_seconds"}


def test_logging_path_resolves_against_repo_root(tmp_path: Path) -> None:
    cfg = LoggingConfig(
        repo_root=tmp_path,
        config={"logging": {"enabled": True, "level": "debug", "path": "logs/gflow.log"}},
    )

    assert cfg.enabled is True
    assert cfg.level == "DEBUG"
    assert cfg.log_path == tmp_path / "logs" / "gflow.log"


def test_logging_relative_path_without_root_is_dropped() -> None:
    cfg = LoggingConfig(config={"logging": {"path": "gflow.log"}})

    assert cfg.log_path is None
    assert cfg.enabled is False


def test_cache_reloads_after_file_change(tmp_path: Path) -> None:
    cfg_file = tmp_path / ".gflow" / "config.yaml"
    cfg_file.parent.mkdir()
    cfg_file.write_text("workflow:\n  remote: one\n", encoding="utf-8")
    assert get_cached_config(tmp_path)["workflow"]["remote"] == "one"

    cfg_file.write_text("workflow:\n  remote: two-two\n", encoding="utf-8")

    assert get_cached_config(tmp_path)["workflow"]["remote"] == "two-two"
    clear_all_caches()
    assert get_cached_config(tmp_path)["workflow"]["remote"] == "two-two"
