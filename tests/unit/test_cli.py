"""Unit tests for the CLI."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from typer.testing import CliRunner

import github_notion_sync.configuration.cli
from github_notion_sync.configuration.cli import typer_app
from github_notion_sync.synchronize.results import RepoSyncResult, SyncRunResult

ENVIRONMENT = {
    "GITHUB_PAT_TOKEN": "gh-token",
    "GITHUB_REPO_OWNER": "acme",
    "GITHUB_REPO_PROJECTS": "widgets=Widgets",
    "NOTION_KEY": "notion-key",
    "NOTION_DATABASE_TASKS_ID": "tasks-db",
    "NOTION_DATABASE_PROJECTS_ID": "projects-db",
}


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run from an empty directory with no synchronization variables set."""
    monkeypatch.chdir(tmp_path)
    for name in [*ENVIRONMENT, "GITHUB_REPO_NAMES", "REPO_PROJECT_NAMES", "GITHUB_NOTION_USERS", "GITHUB_USERNAMES", "NOTION_USERNAMES"]:
        monkeypatch.delenv(name, raising=False)


def test_missing_configuration_exits_with_error() -> None:
    """Test that the CLI reports a missing required setting."""
    result = CliRunner().invoke(typer_app, [])
    assert result.exit_code == 1
    assert "GITHUB_PAT_TOKEN" in result.output


def test_sync_reports_results(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a successful run prints a summary per repository."""
    for name, value in ENVIRONMENT.items():
        monkeypatch.setenv(name, value)
    run_sync = AsyncMock(return_value=SyncRunResult([RepoSyncResult(repo="widgets", issue_count=5, created_count=2, updated_count=3)]))
    monkeypatch.setattr(github_notion_sync.configuration.cli, "run_sync", run_sync)

    result = CliRunner().invoke(typer_app, ["--operation-batch-size", "4"])

    assert result.exit_code == 0, result.output
    assert "widgets: 5 issues, 2 tasks created, 3 tasks updated" in result.output
    config = run_sync.await_args.args[0]
    assert config.repo_projects == {"widgets": "Widgets"}
    assert config.operation_batch_size == 4
