import asyncio

from infrastructure.api import collect_all, iter_pages, page_items


class PageSource:
    """Serves fixed pages by call order and records the requested offsets."""

    def __init__(self, *pages):
        self.pages = list(pages)
        self.offsets = []

    async def __call__(self, offset, limit):
        self.offsets.append(offset)
        if not self.pages:
            return {"items": []}
        return {"items": self.pages.pop(0)}


def test_collects_pages_until_short_page():
    source = PageSource([1, 2, 3], [4, 5, 6], [7])

    items = asyncio.run(collect_all(source, 3))

    assert items == [1, 2, 3, 4, 5, 6, 7]
    assert source.offsets == [0, 3, 6]


def test_offset_advances_by_items_received():
    # the API returned fewer rows than asked without being the last page
    source = PageSource([1, 2, 3], [4, 5], [])

    items = asyncio.run(collect_all(source, 3, stop_on_short_page=False))

    assert items == [1, 2, 3, 4, 5]
    assert source.offsets == [0, 3, 5]


def test_empty_first_page_stops_immediately():
    source = PageSource([])

    assert asyncio.run(collect_all(source, 10)) == []
    assert source.offsets == [0]


def test_full_last_page_needs_one_more_request():
    source = PageSource([1, 2], [3, 4])

    assert asyncio.run(collect_all(source, 2)) == [1, 2, 3, 4]
    assert source.offsets == [0, 2, 4]


def test_iter_pages_yields_page_by_page():
    source = PageSource(["a", "b"], ["c"])

    async def _pages():
        return [page async for page in iter_pages(source, 2)]

    assert asyncio.run(_pages()) == [["a", "b"], ["c"]]


def test_malformed_payload_is_an_empty_page():
    assert page_items(None) == []
    assert page_items({"items": "nope"}) == []
    assert page_items({"data": [1]}) == []
    assert page_items({"items": [1]}) == [1]
