"""Domain entities."""
from .team import TeamIdentity, RosterMember, TeamDetail
from .competition import Organizer, Championship, LeaderboardDescriptor, StandingsRow
from .match import MatchRecord
from .stats import PlayerStatLine
from .aggregates import PlayerAggregate, TeamMapAggregate, OpponentAggregate, TeamOverall

__all__ = [
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
]
