"""Contains unit tests for cursor-based pagination."""

import pytest

from github_notion_sync.synchronize.pagination import Page, fetch_all_pages


@pytest.mark.asyncio
async def test_fetch_all_pages_accumulates_in_order() -> None:
    """Test that items from every page are returned in upstream order."""
    pages = {
        None: Page(items=[1, 2], next_cursor="page2"),
        "page2": Page(items=[3, 4], next_cursor="page3"),
        "page3": Page(items=[5], next_cursor=None),
    }
    seen_cursors: list[str | None] = []

    async def fetch_page(cursor: str | None) -> Page[int]:
        seen_cursors.append(cursor)
        return pages[cursor]

    items = await fetch_all_pages(fetch_page)

    assert items == [1, 2, 3, 4, 5]
    assert seen_cursors == [None, "page2", "page3"]


@pytest.mark.asyncio
async def test_fetch_all_pages_single_empty_page() -> None:
    """Test that an empty first page without a cursor ends the fetch."""

    async def fetch_page(cursor: str | None) -> Page[int]:
        return Page(items=[], next_cursor=None)

    assert await fetch_all_pages(fetch_page) == []


@pytest.mark.asyncio
async def test_fetch_all_pages_uses_first_cursor() -> None:
    """Test that the first call receives the provided starting cursor."""
    seen_cursors: list[int | None] = []

    async def fetch_page(cursor: int | None) -> Page[str]:
        seen_cursors.append(cursor)
        return Page(items=["a"], next_cursor=2 if cursor == 1 else None)

    assert await fetch_all_pages(fetch_page, first_cursor=1) == ["a", "a"]
    assert seen_cursors == [1, 2]


@pytest.mark.asyncio
async def test_fetch_all_pages_propagates_errors() -> None:
    """Test that a failing page aborts the whole fetch."""
    calls = 0

    async def fetch_page(cursor: str | None) -> Page[int]:
        nonlocal calls
        calls += 1
        if cursor == "page2":
            raise RuntimeError("boom")
        return Page(items=[1], next_cursor="page2")

    with pytest.raises(RuntimeError, match="boom"):
        await fetch_all_pages(fetch_page)
    assert calls == 2
