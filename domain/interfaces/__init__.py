"""Domain interfaces."""
from .collaborators import IJsonFetcher, IRecordSink
from .repository import IChampionshipRepository, IMatchRepository, ITeamRepository

__all__ = [
    'IJsonFetcher',
    'IRecordSink',
    'IChampionshipRepository',
    'IMatchRepository',
    'ITeamRepository',
]
