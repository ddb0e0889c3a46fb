"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any, Literal

from github_notion_sync.synchronize.pagination import Page


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    @abstractmethod
    async def list_issues_page(
        self,
        repo: str,
        page: int = 1,
        per_page: int = 100,
        state: Literal["open", "closed", "all"] = "all",
    ) -> Page[Any]:
        """List a single page of issues for a repository."""
        pass

    @abstractmethod
    async def list_issues(self, repo: str, state: Literal["open", "closed", "all"] = "all", per_page: int = 100) -> list[Any]:
        """List all issues for a repository."""
        pass
