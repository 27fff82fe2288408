"""Championship, leaderboard and standings repository."""
import logging
from typing import List, Optional

from config import settings
from domain.entities import Championship, LeaderboardDescriptor, StandingsRow
from domain.exceptions import PARTIAL_DATA, FaceitExportError
from domain.interfaces import IChampionshipRepository
from infrastructure.api import FaceitAPIClient, collect_all

logger = logging.getLogger(__name__)


class ChampionshipRepository(IChampionshipRepository):
    """Repository for championship data using the FACEIT Data API."""

    def __init__(self, api_client: FaceitAPIClient):
        self.api_client = api_client
        self.skipped = 0

    async def get_championship(self, championship_id: str) -> Optional[Championship]:
        """
        Get championship details.

        Args:
            championship_id: FACEIT championship id

        Returns:
            Championship entity; the id alone when the payload is unusable
        """
        data = await self.api_client.get_championship(championship_id)
        if not isinstance(data, dict):
            return Championship(id=championship_id, name='', game_id='')
        champ = Championship.from_payload(data)
        return champ if champ.id else Championship(id=championship_id, name=champ.name, game_id=champ.game_id)

    async def list_leaderboards(self, championship_id: str) -> List[LeaderboardDescriptor]:
        items = await collect_all(
            lambda offset, limit: self.api_client.list_championship_leaderboards(
                championship_id, limit=limit, offset=offset
            ),
            settings.LEADERBOARD_PAGE_SIZE,
        )
        return [LeaderboardDescriptor.from_payload(i) for i in items if isinstance(i, dict)]

    async def get_standings(
        self,
        championship_id: str,
        leaderboard: LeaderboardDescriptor,
    ) -> List[StandingsRow]:
        """
        Standings of one division; the leaderboard id is preferred over the group.

        Failures are logged and yield an empty list so the export can go on
        without standings.
        """
        try:
            if leaderboard.leaderboard_id:
                items = await collect_all(
                    lambda offset, limit: self.api_client.get_leaderboard_standings(
                        leaderboard.leaderboard_id, limit=limit, offset=offset
                    ),
                    settings.LEADERBOARD_STANDINGS_PAGE_SIZE,
                )
            elif leaderboard.group_index is not None:
                items = await collect_all(
                    lambda offset, limit: self.api_client.get_group_standings(
                        championship_id, leaderboard.group_index, limit=limit, offset=offset
                    ),
                    settings.GROUP_STANDINGS_PAGE_SIZE,
                )
            else:
                logger.warning("no leaderboard group available for standings", extra=PARTIAL_DATA)
                return []
        except FaceitExportError as e:
            self.skipped += 1
            logger.warning(
                f"fetching standings failed; continuing without standings. {e}", extra=PARTIAL_DATA
            )
            return []

        return [StandingsRow.from_payload(i) for i in items if isinstance(i, dict)]
