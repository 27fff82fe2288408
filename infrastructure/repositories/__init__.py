"""Infrastructure repositories module."""
from .championship_repository import ChampionshipRepository
from .match_repository import MatchRepository
from .team_repository import TeamRepository

__all__ = [
    'ChampionshipRepository',
    'MatchRepository',
    'TeamRepository',
]
