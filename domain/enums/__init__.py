"""Domain enumerations."""
from .match_outcome import MatchOutcome

__all__ = [
    'MatchOutcome',
]
