"""Cursor-based pagination shared by the GitHub and Notion readers."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Generic, TypeVar

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of results and the cursor for the next one, if any."""

    items: list[T] = field(default_factory=list)
    next_cursor: Any | None = None


async def fetch_all_pages(fetch_page: Callable[[Any | None], Awaitable[Page[T]]], first_cursor: Any | None = None) -> list[T]:
    """Call `fetch_page` until a page reports no next cursor, accumulating items in order.

    The first call receives `first_cursor`; every later call receives the
    previous page's `next_cursor`. Errors raised by `fetch_page` propagate and
    discard any items accumulated so far.
    """
    items: list[T] = []
    cursor = first_cursor
    page_count = 0
    while True:
        page = await fetch_page(cursor)
        page_count += 1
        items.extend(page.items)
        if not page.next_cursor:
            break
        cursor = page.next_cursor
    logger.debug("Fetched all pages", page_count=page_count, item_count=len(items))
    return items
