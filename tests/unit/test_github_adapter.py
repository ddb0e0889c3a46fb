"""Unit tests for the GitHubKitAdapter class."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from github_notion_sync.github.adapter import GitHubKitAdapter


class DummyResponse:
    """A dummy response object to mock GitHub API responses."""

    def __init__(self, parsed_data: list[object]) -> None:
        """Initialize the dummy response with parsed data."""
        self.status_code: int = 200
        self.parsed_data = parsed_data


@pytest.mark.asyncio
async def test_list_issues_page_full_page_has_next_cursor() -> None:
    """Test that a full page points at the following page."""
    adapter = GitHubKitAdapter(MagicMock(), "acme")
    adapter.client.rest.issues.async_list_for_repo = AsyncMock(return_value=DummyResponse(["a", "b"]))

    page = await adapter.list_issues_page("widgets", page=3, per_page=2)

    assert page.items == ["a", "b"]
    assert page.next_cursor == 4
    adapter.client.rest.issues.async_list_for_repo.assert_awaited_once_with(owner="acme", repo="widgets", state="all", per_page=2, page=3)


@pytest.mark.asyncio
async def test_list_issues_page_short_page_ends_listing() -> None:
    """Test that a short page has no next cursor."""
    adapter = GitHubKitAdapter(MagicMock(), "acme")
    adapter.client.rest.issues.async_list_for_repo = AsyncMock(return_value=DummyResponse(["a"]))

    page = await adapter.list_issues_page("widgets", per_page=2)

    assert page.next_cursor is None


@pytest.mark.asyncio
async def test_list_issues_follows_pages() -> None:
    """Test that list_issues accumulates pages 2/2/1 into five issues."""
    adapter = GitHubKitAdapter(MagicMock(), "acme")
    adapter.client.rest.issues.async_list_for_repo = AsyncMock(
        side_effect=[DummyResponse(["a", "b"]), DummyResponse(["c", "d"]), DummyResponse(["e"])]
    )

    issues = await adapter.list_issues("widgets", per_page=2)

    assert issues == ["a", "b", "c", "d", "e"]
    pages = [call.kwargs["page"] for call in adapter.client.rest.issues.async_list_for_repo.await_args_list]
    assert pages == [1, 2, 3]


@pytest.mark.asyncio
async def test_list_issues_exact_multiple_of_page_size() -> None:
    """Test that an empty trailing page ends the listing."""
    adapter = GitHubKitAdapter(MagicMock(), "acme")
    adapter.client.rest.issues.async_list_for_repo = AsyncMock(side_effect=[DummyResponse(["a", "b"]), DummyResponse([])])

    assert await adapter.list_issues("widgets", per_page=2) == ["a", "b"]
    assert adapter.client.rest.issues.async_list_for_repo.await_count == 2


@pytest.mark.asyncio
async def test_list_issues_propagates_errors() -> None:
    """Test that a failing page aborts the listing."""
    adapter = GitHubKitAdapter(MagicMock(), "acme")
    adapter.client.rest.issues.async_list_for_repo = AsyncMock(side_effect=[DummyResponse(["a", "b"]), Exception("Server error")])

    with pytest.raises(Exception, match="Server error"):  # noqa: B017
        await adapter.list_issues("widgets", per_page=2)
