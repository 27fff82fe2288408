"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..entities import (
    Championship, LeaderboardDescriptor, MatchRecord, StandingsRow, TeamDetail,
)


class IChampionshipRepository(ABC):
    """Interface for championship, leaderboard and standings data."""

    @abstractmethod
    async def get_championship(self, championship_id: str) -> Optional[Championship]:
        """Get championship details, or None when the lookup fails."""
        pass

    @abstractmethod
    async def list_leaderboards(self, championship_id: str) -> List[LeaderboardDescriptor]:
        """All leaderboards (divisions) of a championship."""
        pass

    @abstractmethod
    async def get_standings(
        self,
        championship_id: str,
        leaderboard: LeaderboardDescriptor,
    ) -> List[StandingsRow]:
        """Standings of one division in upstream (rank) order."""
        pass


class IMatchRepository(ABC):
    """Interface for match data repository."""

    @abstractmethod
    async def list_matches(self, championship_id: str) -> List[MatchRecord]:
        """All matches of a championship."""
        pass

    @abstractmethod
    async def attach_stats(self, matches: Sequence[MatchRecord]) -> List[MatchRecord]:
        """Copies of ``matches`` carrying their statistics payload where available."""
        pass


class ITeamRepository(ABC):
    """Interface for team data repository."""

    @abstractmethod
    async def get_team_details(self, team_ids: Sequence[str]) -> List[TeamDetail]:
        """Details for each team that could be fetched, in input order."""
        pass
