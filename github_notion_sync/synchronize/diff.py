"""Decides which GitHub issues need a Notion task created or updated."""

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import structlog

from github_notion_sync.synchronize.models import CreateOperation, GitHubIssue, TaskRecord, UpdateOperation

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass
class SyncPlan:
    """Create and update operations for one repository, in GitHub listing order."""

    creates: list[CreateOperation] = field(default_factory=list)
    updates: list[UpdateOperation] = field(default_factory=list)


def index_tasks_by_issue_number(tasks: Iterable[TaskRecord], repo: str) -> dict[int, TaskRecord]:
    """Map issue numbers to the repository's tasks. The first task wins on duplicates."""
    task_by_number: dict[int, TaskRecord] = {}
    for task in tasks:
        if task.repo != repo:
            continue
        if task.issue_number in task_by_number:
            logger.warning(
                "Multiple Notion tasks track the same issue; keeping the first",
                repo=repo,
                issue_number=task.issue_number,
                kept_page_id=task_by_number[task.issue_number].page_id,
                ignored_page_id=task.page_id,
            )
            continue
        task_by_number[task.issue_number] = task
    return task_by_number


def plan_sync_operations(issues: Sequence[GitHubIssue], tasks: Iterable[TaskRecord], repo: str) -> SyncPlan:
    """Split a repository's issues into tasks to create and tasks to update."""
    task_by_number = index_tasks_by_issue_number(tasks, repo)
    plan = SyncPlan()
    for issue in issues:
        task = task_by_number.get(issue.number)
        if task is not None and task.page_id:
            plan.updates.append(UpdateOperation(issue=issue, repo=repo, page_id=task.page_id))
        else:
            plan.creates.append(CreateOperation(issue=issue, repo=repo))
    return plan
