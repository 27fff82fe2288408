"""Name → id resolution for organizers, championships, leaderboards and players."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from config import settings
from domain.entities import Organizer
from domain.exceptions import NotFoundError, UpstreamError
from infrastructure.api import FaceitAPIClient, iter_pages, page_items

logger = logging.getLogger(__name__)

ORGANIZER_QUERY_PARAMS = ("name", "search", "query")


def _find(items: Iterable[Any], predicate: Callable[[dict], bool]) -> Optional[dict]:
    return next((i for i in items if isinstance(i, dict) and predicate(i)), None)


def _leaderboard_name(item: dict) -> str:
    return str(item.get("name") or item.get("title") or "")


class NameResolverService:
    """
    Resolves human-readable names to FACEIT identifiers.

    Every lookup prefers an exact name match over a substring match so
    that a short query does not pick a longer name that merely contains it.
    Paged lookups keep walking until the first empty page.
    """

    def __init__(self, api_client: FaceitAPIClient):
        self.api_client = api_client

    async def organizer_by_name(self, name: str) -> Organizer:
        """
        Find an organizer by name, case-insensitively.

        The search parameter name is not reliably documented upstream, so
        each candidate is tried in turn; a request error moves on to the
        next one.
        """
        needle = name.lower()
        for param in ORGANIZER_QUERY_PARAMS:
            try:
                data = await self.api_client.search_organizers(
                    param, name, limit=settings.ORGANIZER_PAGE_SIZE, offset=0
                )
            except UpstreamError as e:
                logger.debug(f"organizer search with '{param}' failed: {e}")
                continue
            items = page_items(data)
            for predicate in (
                lambda o: str(o.get("name") or "").lower() == needle,
                lambda o: needle in str(o.get("name") or "").lower(),
            ):
                hit = _find(items, predicate)
                if hit and hit.get("organizer_id"):
                    logger.info(f"Resolved organizer '{name}' → {hit['organizer_id']}")
                    return Organizer(id=str(hit["organizer_id"]), name=str(hit.get("name") or ""))
        raise NotFoundError("Organizer", name)

    async def championship_id_by_name(self, organizer_id: str, champ_name: str, game_id: str = "cs2") -> str:
        """Page through an organizer's championships for one of ``game_id`` with this name."""
        pages = iter_pages(
            lambda offset, limit: self.api_client.list_organizer_championships(
                organizer_id, limit=limit, offset=offset
            ),
            settings.CHAMPIONSHIP_PAGE_SIZE,
            stop_on_short_page=False,
        )
        async for items in pages:
            for predicate in (
                lambda c: str(c.get("name") or "").strip() == champ_name,
                lambda c: champ_name in str(c.get("name") or ""),
            ):
                hit = _find(items, lambda c: predicate(c) and c.get("game_id") == game_id)
                if hit and hit.get("championship_id"):
                    logger.info(f"Resolved championship '{champ_name}' → {hit['championship_id']}")
                    return str(hit["championship_id"])
        raise NotFoundError("Championship", champ_name, f"organizer {organizer_id}")

    async def leaderboard_group_by_name(self, championship_id: str, lb_name: str) -> int:
        """Group index of the championship leaderboard with this name (``name`` or ``title``)."""
        pages = iter_pages(
            lambda offset, limit: self.api_client.list_championship_leaderboards(
                championship_id, limit=limit, offset=offset
            ),
            settings.LEADERBOARD_PAGE_SIZE,
            stop_on_short_page=False,
        )
        async for items in pages:
            for predicate in (
                lambda lb: _leaderboard_name(lb).strip() == lb_name,
                lambda lb: lb_name in _leaderboard_name(lb),
            ):
                hit = _find(items, predicate)
                if hit is not None and hit.get("group") is not None:
                    logger.info(f"Resolved leaderboard '{lb_name}' → group {hit['group']}")
                    return int(hit["group"])
        raise NotFoundError("Leaderboard", lb_name, championship_id)

    async def player_id_by_nickname(self, nickname: str) -> str:
        data = await self.api_client.search_player(nickname)
        player_id = data.get("player_id") if isinstance(data, dict) else None
        if not player_id:
            raise NotFoundError("Player", nickname)
        return str(player_id)
