"""Application layer - Services and use cases."""
from .services import NameResolverService, LeaderboardSelector, OutcomeClassifier
from .use_cases import ResolveTargetUseCase, ExportLeagueUseCase

__all__ = [
    'NameResolverService',
    'LeaderboardSelector',
    'OutcomeClassifier',
    'ResolveTargetUseCase',
    'ExportLeagueUseCase',
]
