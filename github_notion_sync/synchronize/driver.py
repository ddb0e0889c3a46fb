"""Orchestrates the synchronization of GitHub issues into Notion."""

import time

import structlog

from github_notion_sync.configuration.models import SyncConfig
from github_notion_sync.configuration.reconcile import validate_project_mapping
from github_notion_sync.github.abc import GitHubClientBase
from github_notion_sync.github.adapter import GitHubKitAdapter
from github_notion_sync.notion.client import NotionClient
from github_notion_sync.synchronize.batch import create_tasks, update_tasks
from github_notion_sync.synchronize.diff import plan_sync_operations
from github_notion_sync.synchronize.issues import fetch_github_issues
from github_notion_sync.synchronize.models import NotionSnapshot
from github_notion_sync.synchronize.notion import build_notion_snapshot
from github_notion_sync.synchronize.results import RepoSyncResult, SyncRunResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def sync_repository(
    repo: str,
    project_id: str,
    config: SyncConfig,
    snapshot: NotionSnapshot,
    github_adapter: GitHubClientBase,
    notion_client: NotionClient,
) -> RepoSyncResult:
    """Bring the Notion tasks of one repository in line with its GitHub issues."""
    issues = await fetch_github_issues(github_adapter, repo)
    plan = plan_sync_operations(issues, snapshot.tasks_for_repo(repo), repo)
    logger.info(
        "Planned Notion operations",
        repo=repo,
        issue_count=len(issues),
        create_count=len(plan.creates),
        update_count=len(plan.updates),
    )

    created = await create_tasks(
        plan.creates,
        notion_client,
        config.notion_tasks_database_id,
        snapshot.users,
        project_id,
        config.user_mapping,
        config.operation_batch_size,
    )
    updated = await update_tasks(
        plan.updates,
        notion_client,
        snapshot.users,
        project_id,
        config.user_mapping,
        config.operation_batch_size,
    )
    return RepoSyncResult(repo=repo, issue_count=len(issues), created_count=created, updated_count=updated)


async def run_sync_workflow(config: SyncConfig, github_adapter: GitHubClientBase, notion_client: NotionClient) -> SyncRunResult:
    """Synchronize every configured repository, one after another.

    The Notion snapshot is read once up front; tasks created for one repository
    are not visible to the diff of a later one.
    """
    start_time = time.time()
    snapshot = await build_notion_snapshot(notion_client, config.notion_tasks_database_id, config.notion_projects_database_id)
    project_id_by_repo = validate_project_mapping(config.repo_projects, snapshot.projects)

    repo_results: list[RepoSyncResult] = []
    for repo in config.repos:
        repo_results.append(await sync_repository(repo, project_id_by_repo[repo], config, snapshot, github_adapter, notion_client))

    result = SyncRunResult(repo_results)
    logger.info(
        "Synchronized GitHub issues to Notion",
        repo_count=len(repo_results),
        created_count=result.created_count,
        updated_count=result.updated_count,
        duration=round(time.time() - start_time, 2),
    )
    return result


async def run_sync(config: SyncConfig) -> SyncRunResult:
    """Build the GitHub and Notion clients from configuration and run the sync."""
    github_adapter = await GitHubKitAdapter.create(
        owner=config.github_repo_owner,
        github_pat_token=config.github_pat_token,
        github_api_url=config.github_api_url,
    )
    async with NotionClient(
        api_key=config.notion_key,
        api_url=config.notion_api_url,
        notion_version=config.notion_version,
    ) as notion_client:
        return await run_sync_workflow(config, github_adapter, notion_client)
