"""Match repository implementation."""
import asyncio
import dataclasses
import logging
from typing import List, Sequence

from config import settings
from domain.entities import MatchRecord
from domain.exceptions import PARTIAL_DATA, FaceitExportError
from domain.interfaces import IMatchRepository
from infrastructure.api import FaceitAPIClient, collect_all

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match data using the FACEIT Data API."""

    def __init__(self, api_client: FaceitAPIClient, delay_s: float = None):
        """
        Initialize match repository.

        Args:
            api_client: FACEIT API client instance
            delay_s: Pause after each statistics request (defaults to settings)
        """
        self.api_client = api_client
        self.delay_s = settings.MATCH_STATS_DELAY_S if delay_s is None else delay_s
        self.skipped = 0

    async def list_matches(self, championship_id: str) -> List[MatchRecord]:
        items = await collect_all(
            lambda offset, limit: self.api_client.list_championship_matches(
                championship_id, limit=limit, offset=offset
            ),
            settings.MATCH_PAGE_SIZE,
        )
        return [MatchRecord.from_payload(i) for i in items if isinstance(i, dict)]

    async def attach_stats(self, matches: Sequence[MatchRecord]) -> List[MatchRecord]:
        """
        Fetch statistics for each match, one request at a time.

        A failed fetch leaves ``stats`` unset for that match; the rest of
        the batch is unaffected.
        """
        out: List[MatchRecord] = []
        for match in matches:
            stats = None
            try:
                payload = await self.api_client.get_match_stats(match.match_id)
                stats = payload if isinstance(payload, dict) else None
            except FaceitExportError as e:
                self.skipped += 1
                logger.warning(f"stats for match {match.match_id} skipped: {e}", extra=PARTIAL_DATA)
            out.append(dataclasses.replace(match, stats=stats))
            await asyncio.sleep(self.delay_s)
        return out
