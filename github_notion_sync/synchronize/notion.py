"""Reads the current state of the Notion workspace into a snapshot."""

import re
import time
from typing import Any

import structlog

from github_notion_sync.notion.client import NotionClient
from github_notion_sync.synchronize.models import NotionSnapshot, NotionUser, ProjectRecord, TaskRecord
from github_notion_sync.synchronize.pagination import fetch_all_pages
from github_notion_sync.utils.constants import (
    NOTION_PROJECT_NAME_PROPERTY,
    NOTION_TASK_PROJECT_PROPERTY,
    NOTION_TASK_TITLE_PROPERTY,
    TASK_TITLE_PATTERN,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_TASK_TITLE_RE = re.compile(TASK_TITLE_PATTERN)


def parse_task_title(title: str) -> tuple[str, int] | None:
    """Extract the repository and issue number from a `<repo>#<number>: <text>` title.

    Returns None for titles that don't follow the pattern.
    """
    match = _TASK_TITLE_RE.match(title)
    if match is None:
        return None
    repo = match.group("repo").strip()
    if not repo:
        return None
    return repo, int(match.group("number"))


def get_title_text(page: dict[str, Any], property_name: str) -> str:
    """Concatenate the plain text of a page's title property.

    Raises:
        ValueError: If the page has no property with that name.
    """
    properties = page.get("properties", {})
    if property_name not in properties:
        raise ValueError(f"Notion page {page.get('id')} has no '{property_name}' property")
    segments = properties[property_name].get("title") or []
    parts: list[str] = []
    for segment in segments:
        if "plain_text" in segment:
            parts.append(segment["plain_text"])
        else:
            parts.append(segment.get("text", {}).get("content", ""))
    return "".join(parts)


def to_task_record(page: dict[str, Any]) -> TaskRecord | None:
    """Build a TaskRecord from a tasks database page, or None if it doesn't track an issue."""
    title = get_title_text(page, NOTION_TASK_TITLE_PROPERTY)
    parsed = parse_task_title(title)
    if parsed is None:
        logger.debug("Skipping Notion task without an issue reference", page_id=page.get("id"), title=title)
        return None
    repo, issue_number = parsed
    relation = page.get("properties", {}).get(NOTION_TASK_PROJECT_PROPERTY, {}).get("relation") or []
    return TaskRecord(
        page_id=page.get("id"),
        issue_number=issue_number,
        repo=repo,
        project_id=relation[0]["id"] if relation else None,
    )


def to_project_record(page: dict[str, Any]) -> ProjectRecord | None:
    """Build a ProjectRecord from a projects database page, or None if it has no name."""
    name = get_title_text(page, NOTION_PROJECT_NAME_PROPERTY)
    if not name:
        return None
    return ProjectRecord(id=page["id"], name=name)


async def fetch_task_records(notion_client: NotionClient, database_id: str) -> list[TaskRecord]:
    """Fetch all tasks that reference a GitHub issue."""
    pages = await fetch_all_pages(lambda cursor: notion_client.query_database(database_id, start_cursor=cursor))
    records = [record for record in (to_task_record(page) for page in pages) if record is not None]
    logger.info("Fetched Notion tasks", page_count=len(pages), tracked_task_count=len(records))
    return records


async def fetch_notion_users(notion_client: NotionClient) -> list[NotionUser]:
    """Fetch every user of the workspace, people and bots alike."""
    users = await fetch_all_pages(lambda cursor: notion_client.list_users(start_cursor=cursor))
    logger.info("Fetched Notion users", user_count=len(users))
    return [NotionUser(id=user["id"], name=user.get("name")) for user in users]


async def fetch_projects(notion_client: NotionClient, database_id: str) -> list[ProjectRecord]:
    """Fetch all named projects."""
    pages = await fetch_all_pages(lambda cursor: notion_client.query_database(database_id, start_cursor=cursor))
    projects = [project for project in (to_project_record(page) for page in pages) if project is not None]
    logger.info("Fetched Notion projects", page_count=len(pages), project_count=len(projects))
    return projects


async def build_notion_snapshot(notion_client: NotionClient, tasks_database_id: str, projects_database_id: str) -> NotionSnapshot:
    """Read tasks, users and projects once for the whole run."""
    start_time = time.time()
    tasks = await fetch_task_records(notion_client, tasks_database_id)
    users = await fetch_notion_users(notion_client)
    projects = await fetch_projects(notion_client, projects_database_id)
    logger.info("Built Notion snapshot", duration=round(time.time() - start_time, 2))
    return NotionSnapshot(tasks=tuple(tasks), users=tuple(users), projects=tuple(projects))
