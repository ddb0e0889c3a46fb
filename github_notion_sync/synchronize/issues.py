"""Reads GitHub issues and normalizes them for synchronization."""

import time
from typing import Any

import structlog

from github_notion_sync.github.abc import GitHubClientBase
from github_notion_sync.synchronize.models import GitHubIdentity, GitHubIssue

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def is_pull_request(issue: Any) -> bool:
    """GitHub lists pull requests as issues carrying a `pull_request` field."""
    return bool(getattr(issue, "pull_request", None))


def to_github_issue(issue: Any) -> GitHubIssue:
    """Project a githubkit issue onto the canonical issue model."""
    assignees = getattr(issue, "assignees", None) or []
    return GitHubIssue(
        number=issue.number,
        title=issue.title,
        state=issue.state,
        comment_count=issue.comments or 0,
        url=issue.html_url,
        assignees=tuple(GitHubIdentity(login=assignee.login) for assignee in assignees),
    )


async def fetch_github_issues(github_adapter: GitHubClientBase, repo: str) -> list[GitHubIssue]:
    """Fetch every issue of a repository in any state, excluding pull requests.

    Order follows the GitHub listing. Duplicates are not removed.
    """
    start_time = time.time()
    logger.info("Fetching issues from GitHub repository", repo=repo)
    raw_issues = await github_adapter.list_issues(repo, state="all")
    issues = [to_github_issue(issue) for issue in raw_issues if not is_pull_request(issue)]
    logger.info(
        "Fetched issues from GitHub repository",
        repo=repo,
        issue_count=len(issues),
        pull_request_count=len(raw_issues) - len(issues),
        duration=round(time.time() - start_time, 2),
    )
    return issues
