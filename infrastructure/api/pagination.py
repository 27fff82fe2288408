"""Offset/limit paging over collection endpoints shaped ``{"items": [...]}``."""
from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Awaitable, Callable, List, Mapping

logger = logging.getLogger(__name__)

PageFetcher = Callable[[int, int], Awaitable[Any]]


def page_items(payload: Any) -> List[Any]:
    """Items of a collection page; anything malformed counts as an empty page."""
    if isinstance(payload, Mapping):
        items = payload.get("items")
        if isinstance(items, list):
            return items
    return []


async def iter_pages(
    fetch_page: PageFetcher,
    page_size: int,
    *,
    stop_on_short_page: bool = True,
) -> AsyncIterator[List[Any]]:
    """
    Yield successive non-empty pages.

    The offset advances by the number of items actually received, so an
    API that returns fewer rows than asked is still walked to the end.
    Paging stops at the first empty page and, unless disabled, after the
    first page shorter than ``page_size``.
    """
    offset = 0
    while True:
        items = page_items(await fetch_page(offset, page_size))
        if not items:
            return
        logger.debug(f"page offset={offset} size={len(items)}")
        yield items
        if stop_on_short_page and len(items) < page_size:
            return
        offset += len(items)


async def collect_all(
    fetch_page: PageFetcher,
    page_size: int,
    *,
    stop_on_short_page: bool = True,
) -> List[Any]:
    """All items across all pages, in upstream order."""
    out: List[Any] = []
    async for items in iter_pages(fetch_page, page_size, stop_on_short_page=stop_on_short_page):
        out.extend(items)
    return out
