"""Win/loss/draw classification of a match for one team."""
from __future__ import annotations

from typing import Optional, Sequence

from config import settings
from domain.entities import MatchRecord
from domain.enums import MatchOutcome
from .numeric import parse_number


class OutcomeClassifier:
    """
    Classifies a match from one team's point of view.

    The declared winner is authoritative: it is used whenever it resolves
    to one of the match's teams, either directly or through a positional
    marker. Only otherwise are the two scores compared.

    ``winner_markers`` are the positional winner values in competitor
    order; they default to ``settings.WINNER_MARKERS``.
    """

    def __init__(self, winner_markers: Optional[Sequence[str]] = None):
        self.winner_markers = tuple(winner_markers or settings.WINNER_MARKERS)

    def winner_id(self, match: MatchRecord) -> Optional[str]:
        winner = match.winner
        if not winner:
            return None
        if winner in self.winner_markers:
            return match.team_at(self.winner_markers.index(winner)).team_id
        return winner

    def classify(self, match: MatchRecord, team_id: str) -> MatchOutcome:
        winner = self.winner_id(match)
        if winner and winner in match.team_ids:
            return MatchOutcome.WIN if winner == team_id else MatchOutcome.LOSS
        return self._by_score(match, team_id)

    def _by_score(self, match: MatchRecord, team_id: str) -> MatchOutcome:
        if match.team_at(0).team_id == team_id:
            mine, theirs = 0, 1
        elif match.team_at(1).team_id == team_id:
            mine, theirs = 1, 0
        else:
            return MatchOutcome.UNKNOWN

        my_score = self._score(match, mine)
        their_score = self._score(match, theirs)
        if my_score is None or their_score is None:
            return MatchOutcome.UNKNOWN
        if my_score > their_score:
            return MatchOutcome.WIN
        if my_score < their_score:
            return MatchOutcome.LOSS
        return MatchOutcome.DRAW

    def _score(self, match: MatchRecord, index: int) -> Optional[float]:
        # Scores are keyed by team id, or by the positional marker.
        keys = [match.team_at(index).team_id]
        if index < len(self.winner_markers):
            keys.append(self.winner_markers[index])
        for key in keys:
            if key and key in match.scores:
                return parse_number(match.scores[key])
        return None
