"""Contains unit tests for mapping issues onto Notion properties."""

from typing import Literal

import pytest

from github_notion_sync.synchronize.models import GitHubIdentity, GitHubIssue, NotionUser
from github_notion_sync.synchronize.properties import (
    format_task_title,
    get_assignee_people,
    get_issue_status,
    get_properties_from_issue,
)

USERS = (
    NotionUser(id="u1", name="Alice W"),
    NotionUser(id="u2", name="Bob"),
    NotionUser(id="bot", name=None),
)


def make_issue(state: Literal["open", "closed"] = "open", assignees: tuple[str, ...] = ()) -> GitHubIssue:
    """Build an issue with the given state and assignee logins."""
    return GitHubIssue(
        number=42,
        title="Fix bug",
        state=state,
        comment_count=3,
        url="https://github.com/acme/widgets/issues/42",
        assignees=tuple(GitHubIdentity(login=login) for login in assignees),
    )


@pytest.mark.parametrize(
    "state, assignees, expected",
    [
        pytest.param("closed", (), "Done", id="closed unassigned"),
        pytest.param("closed", ("alice",), "Done", id="closed assigned"),
        pytest.param("open", (), "Not started", id="open unassigned"),
        pytest.param("open", ("alice",), "In progress", id="open assigned"),
        pytest.param("open", ("stranger",), "In progress", id="open assigned to unmapped login"),
    ],
)
def test_get_issue_status(state: Literal["open", "closed"], assignees: tuple[str, ...], expected: str) -> None:
    """Test the get_issue_status function."""
    assert get_issue_status(make_issue(state, assignees)) == expected


def test_get_assignee_people_maps_known_login() -> None:
    """Test that a mapped login resolves to the Notion user ID."""
    people = get_assignee_people(make_issue(assignees=("alice",)), USERS, {"alice": "Alice W"})
    assert people == [{"id": "u1"}]


def test_get_assignee_people_drops_unmapped_login() -> None:
    """Test that logins without a mapping are left out."""
    people = get_assignee_people(make_issue(assignees=("mallory",)), USERS, {"alice": "Alice W"})
    assert people == []


def test_get_assignee_people_drops_unknown_notion_name() -> None:
    """Test that mapped names matching no Notion user are left out."""
    people = get_assignee_people(make_issue(assignees=("alice", "bob")), USERS, {"alice": "Alice Wonder", "bob": "Bob"})
    assert people == [{"id": "u2"}]


def test_get_assignee_people_without_mapping() -> None:
    """Test that an empty mapping always yields no people."""
    assert get_assignee_people(make_issue(assignees=("alice", "bob")), USERS, {}) == []


def test_get_assignee_people_deduplicates() -> None:
    """Test that two logins mapped to the same Notion user produce one person."""
    people = get_assignee_people(make_issue(assignees=("alice", "alice-work")), USERS, {"alice": "Alice W", "alice-work": "Alice W"})
    assert people == [{"id": "u1"}]


def test_format_task_title() -> None:
    """Test that the title embeds the repository and issue number."""
    assert format_task_title("widgets", make_issue()) == "widgets#42: Fix bug"


def test_get_properties_from_issue() -> None:
    """Test the full property payload."""
    properties = get_properties_from_issue(make_issue(assignees=("alice",)), USERS, "project-1", "widgets", {"alice": "Alice W"})

    assert properties == {
        "Task": {"title": [{"type": "text", "text": {"content": "widgets#42: Fix bug"}}]},
        "Status": {"status": {"name": "In progress"}},
        "Assign": {"people": [{"id": "u1"}]},
        "Projects": {"relation": [{"id": "project-1"}]},
    }
