"""Team repository implementation."""
import asyncio
import logging
from typing import List, Sequence

from config import settings
from domain.entities import TeamDetail
from domain.exceptions import PARTIAL_DATA, FaceitExportError
from domain.interfaces import ITeamRepository
from infrastructure.api import FaceitAPIClient

logger = logging.getLogger(__name__)


class TeamRepository(ITeamRepository):
    """Repository for team data using the FACEIT Data API."""

    def __init__(self, api_client: FaceitAPIClient, delay_s: float = None):
        self.api_client = api_client
        self.delay_s = settings.TEAM_DETAIL_DELAY_S if delay_s is None else delay_s
        self.skipped = 0

    async def get_team_details(self, team_ids: Sequence[str]) -> List[TeamDetail]:
        """
        Get details for each team id.

        Args:
            team_ids: Team ids in the order they should be returned

        Returns:
            TeamDetail entities; teams whose fetch failed are omitted
        """
        teams: List[TeamDetail] = []
        for team_id in team_ids:
            try:
                data = await self.api_client.get_team(team_id)
            except FaceitExportError as e:
                self.skipped += 1
                logger.warning(f"team {team_id} skipped: {e}", extra=PARTIAL_DATA)
                data = None
            if isinstance(data, dict):
                teams.append(TeamDetail.from_payload(data))
            await asyncio.sleep(self.delay_s)
        return teams
