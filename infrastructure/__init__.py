"""Infrastructure layer - API client, repositories and record sinks."""
from .api import FaceitAPIClient, RateLimitRetryPolicy
from .repositories import ChampionshipRepository, MatchRepository, TeamRepository
from .sinks import CsvRecordSink

__all__ = [
    'FaceitAPIClient',
    'RateLimitRetryPolicy',
    'ChampionshipRepository',
    'MatchRepository',
    'TeamRepository',
    'CsvRecordSink',
]
