"""Application use cases."""
from .resolve_target import ResolveTargetUseCase, ResolvedTarget
from .export_league import ExportLeagueUseCase, ExportSummary

__all__ = [
    'ResolveTargetUseCase',
    'ResolvedTarget',
    'ExportLeagueUseCase',
    'ExportSummary',
]
