"""Data models shared by the synchronization workflow."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class SyncDecision(str, Enum):
    """Enum for the write a GitHub issue requires in Notion."""

    CREATE = "create"
    UPDATE = "update"


class GitHubIdentity(BaseModel):
    """A GitHub account assigned to an issue."""

    model_config = ConfigDict(frozen=True)

    login: str


class GitHubIssue(BaseModel):
    """Canonical form of a GitHub issue, independent of the API client's models."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    state: Literal["open", "closed"]
    comment_count: int = 0
    url: str
    assignees: tuple[GitHubIdentity, ...] = ()


class NotionUser(BaseModel):
    """A Notion workspace user."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None


class TaskRecord(BaseModel):
    """A Notion task page that tracks a GitHub issue."""

    model_config = ConfigDict(frozen=True)

    page_id: str | None
    issue_number: int
    repo: str
    project_id: str | None = None


class ProjectRecord(BaseModel):
    """A Notion project page that tasks relate to."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class CreateOperation(BaseModel):
    """A GitHub issue that has no Notion task yet."""

    model_config = ConfigDict(frozen=True)

    decision: Literal[SyncDecision.CREATE] = SyncDecision.CREATE
    issue: GitHubIssue
    repo: str


class UpdateOperation(BaseModel):
    """A GitHub issue whose Notion task must be refreshed."""

    model_config = ConfigDict(frozen=True)

    decision: Literal[SyncDecision.UPDATE] = SyncDecision.UPDATE
    issue: GitHubIssue
    repo: str
    page_id: str


SyncOperation = CreateOperation | UpdateOperation


@dataclass(frozen=True)
class NotionSnapshot:
    """Read-only copy of the Notion state fetched once at the start of a run."""

    tasks: tuple[TaskRecord, ...]
    users: tuple[NotionUser, ...]
    projects: tuple[ProjectRecord, ...]

    def tasks_for_repo(self, repo: str) -> list[TaskRecord]:
        """Return tracked tasks belonging to a repository, in index order."""
        return [task for task in self.tasks if task.repo == repo]
