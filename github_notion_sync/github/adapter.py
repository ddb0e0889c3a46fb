"""GitHub client adapter for the githubkit library."""

from typing import Literal, Self

import structlog
from githubkit import Response
from githubkit.versions.latest.models import Issue

from github_notion_sync.synchronize.pagination import Page, fetch_all_pages
from github_notion_sync.utils.constants import DEFAULT_GITHUB_API_URL, GITHUB_ISSUES_PAGE_SIZE

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library.

    One adapter serves every repository owned by `owner`.
    """

    def __init__(self, client: GitHubClient, owner: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner

    @classmethod
    async def create(cls, owner: str, github_pat_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Account that owns the synchronized repositories
            github_pat_token: Personal access token
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url, owner=owner)
        client = await get_github_client(github_pat_token=github_pat_token, github_api_url=github_api_url)
        return cls(client, owner)

    async def list_issues_page(
        self,
        repo: str,
        page: int = 1,
        per_page: int = GITHUB_ISSUES_PAGE_SIZE,
        state: Literal["open", "closed", "all"] = "all",
    ) -> Page[Issue]:
        """List one page of issues for a repository.

        The next cursor is the following page number, or None once a short page
        signals the end of the listing.
        """
        response: Response[list[Issue]] = await self.client.rest.issues.async_list_for_repo(
            owner=self.owner,
            repo=repo,
            state=state,
            per_page=per_page,
            page=page,
        )
        issues: list[Issue] = response.parsed_data
        next_page = page + 1 if len(issues) == per_page else None
        return Page(items=issues, next_cursor=next_page)

    async def list_issues(
        self,
        repo: str,
        state: Literal["open", "closed", "all"] = "all",
        per_page: int = GITHUB_ISSUES_PAGE_SIZE,
    ) -> list[Issue]:
        """List all issues (pull requests included) for a repository, handling pagination."""

        async def fetch_page(page: int | None) -> Page[Issue]:
            return await self.list_issues_page(repo, page=page or 1, per_page=per_page, state=state)

        return await fetch_all_pages(fetch_page, first_cursor=1)
