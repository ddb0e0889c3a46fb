"""Maps GitHub issues onto the Notion tasks database properties."""

from typing import Any, Mapping, Sequence

from github_notion_sync.synchronize.models import GitHubIssue, NotionUser
from github_notion_sync.utils.constants import (
    NOTION_TASK_ASSIGNEE_PROPERTY,
    NOTION_TASK_PROJECT_PROPERTY,
    NOTION_TASK_STATUS_PROPERTY,
    NOTION_TASK_TITLE_PROPERTY,
    STATUS_DONE,
    STATUS_IN_PROGRESS,
    STATUS_NOT_STARTED,
)


def format_task_title(repo: str, issue: GitHubIssue) -> str:
    """Build the task title that identifies the issue on later runs."""
    return f"{repo}#{issue.number}: {issue.title}"


def get_issue_status(issue: GitHubIssue) -> str:
    """Derive the Notion status from the issue state and assignment."""
    if issue.state == "closed":
        return STATUS_DONE
    if issue.assignees:
        return STATUS_IN_PROGRESS
    return STATUS_NOT_STARTED


def get_assignee_people(issue: GitHubIssue, users: Sequence[NotionUser], user_mapping: Mapping[str, str]) -> list[dict[str, str]]:
    """Resolve issue assignees to Notion people.

    An assignee whose login isn't mapped, or whose mapped name matches no
    Notion user, is left out.
    """
    people: list[dict[str, str]] = []
    for assignee in issue.assignees:
        notion_name = user_mapping.get(assignee.login)
        if notion_name is None:
            continue
        user = next((user for user in users if user.name == notion_name), None)
        if user is None:
            continue
        person = {"id": user.id}
        if person not in people:
            people.append(person)
    return people


def get_properties_from_issue(
    issue: GitHubIssue,
    users: Sequence[NotionUser],
    project_id: str,
    repo: str,
    user_mapping: Mapping[str, str],
) -> dict[str, Any]:
    """Build the full property payload for a task tracking `issue`."""
    return {
        NOTION_TASK_TITLE_PROPERTY: {
            "title": [{"type": "text", "text": {"content": format_task_title(repo, issue)}}],
        },
        NOTION_TASK_STATUS_PROPERTY: {
            "status": {"name": get_issue_status(issue)},
        },
        NOTION_TASK_ASSIGNEE_PROPERTY: {
            "people": get_assignee_people(issue, users, user_mapping),
        },
        NOTION_TASK_PROJECT_PROPERTY: {
            "relation": [{"id": project_id}],
        },
    }
