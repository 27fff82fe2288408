"""Domain layer - Entities, enums, exceptions and collaborator interfaces."""
from .entities import (
    TeamIdentity, RosterMember, TeamDetail,
    Organizer, Championship, LeaderboardDescriptor, StandingsRow,
    MatchRecord, PlayerStatLine,
    PlayerAggregate, TeamMapAggregate, OpponentAggregate, TeamOverall,
)
from .enums import MatchOutcome
from .exceptions import (
    FaceitExportError, ConfigurationError, NotFoundError,
    UpstreamError, RateLimitExceeded, PartialDataWarning, PARTIAL_DATA,
)
from .interfaces import (
    IJsonFetcher, IRecordSink,
    IChampionshipRepository, IMatchRepository, ITeamRepository,
)

__all__ = [
    # Entities
    'TeamIdentity',
    'RosterMember',
    'TeamDetail',
    'Organizer',
    'Championship',
    'LeaderboardDescriptor',
    'StandingsRow',
    'MatchRecord',
    'PlayerStatLine',
    'PlayerAggregate',
    'TeamMapAggregate',
    'OpponentAggregate',
    'TeamOverall',
    # Enums
    'MatchOutcome',
    # Exceptions
    'FaceitExportError',
    'ConfigurationError',
    'NotFoundError',
    'UpstreamError',
    'RateLimitExceeded',
    'PartialDataWarning',
    'PARTIAL_DATA',
    # Interfaces
    'IJsonFetcher',
    'IRecordSink',
    'IChampionshipRepository',
    'IMatchRepository',
    'ITeamRepository',
]
