"""Writes Notion tasks in fixed-size concurrent batches."""

import asyncio
import time
from typing import Any, Awaitable, Callable, Mapping, Sequence, TypeVar

import structlog

from github_notion_sync.notion.client import NotionClient
from github_notion_sync.synchronize.models import CreateOperation, NotionUser, UpdateOperation
from github_notion_sync.synchronize.properties import get_properties_from_issue
from github_notion_sync.utils.helpers import chunk

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")


async def run_in_batches(operations: Sequence[T], batch_size: int, handler: Callable[[T], Awaitable[Any]]) -> int:
    """Run `handler` over operations, one batch at a time.

    Operations within a batch run concurrently and the whole batch is awaited
    before the next starts. The first failure propagates and no later batch
    runs. Returns the number of operations completed.
    """
    completed = 0
    batches = chunk(operations, batch_size)
    for batch_number, batch in enumerate(batches, start=1):
        await asyncio.gather(*(handler(operation) for operation in batch))
        completed += len(batch)
        logger.info("Completed batch", batch_number=batch_number, batch_count=len(batches), batch_size=len(batch))
    return completed


async def create_tasks(
    operations: Sequence[CreateOperation],
    notion_client: NotionClient,
    database_id: str,
    users: Sequence[NotionUser],
    project_id: str,
    user_mapping: Mapping[str, str],
    batch_size: int,
) -> int:
    """Create a Notion task for each operation."""

    async def create(operation: CreateOperation) -> None:
        properties = get_properties_from_issue(operation.issue, users, project_id, operation.repo, user_mapping)
        await notion_client.create_page(database_id, properties)
        logger.debug("Created Notion task", repo=operation.repo, issue_number=operation.issue.number)

    start_time = time.time()
    created = await run_in_batches(operations, batch_size, create)
    logger.info("Created Notion tasks", task_count=created, duration=round(time.time() - start_time, 2))
    return created


async def update_tasks(
    operations: Sequence[UpdateOperation],
    notion_client: NotionClient,
    users: Sequence[NotionUser],
    project_id: str,
    user_mapping: Mapping[str, str],
    batch_size: int,
) -> int:
    """Refresh the properties of the Notion task behind each operation."""

    async def update(operation: UpdateOperation) -> None:
        properties = get_properties_from_issue(operation.issue, users, project_id, operation.repo, user_mapping)
        await notion_client.update_page(operation.page_id, properties)
        logger.debug("Updated Notion task", repo=operation.repo, issue_number=operation.issue.number, page_id=operation.page_id)

    start_time = time.time()
    updated = await run_in_batches(operations, batch_size, update)
    logger.info("Updated Notion tasks", task_count=updated, duration=round(time.time() - start_time, 2))
    return updated
