"""Match outcome enumeration."""
from enum import Enum


class MatchOutcome(Enum):
    """Result of a match from one team's point of view."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"
    UNKNOWN = "unknown"

    @property
    def is_decided(self) -> bool:
        return self is not MatchOutcome.UNKNOWN
