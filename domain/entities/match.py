"""Match entity representing one championship match."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..team_shapes import extract_teams_basic
from .team import TeamIdentity

TERMINAL_STATUSES = frozenset({"finished", "closed"})


def _mapping(value: Any) -> Dict[str, Any]:
    """A shallow copy of ``value`` when it is a dict, else an empty dict."""
    return dict(value) if isinstance(value, dict) else {}


@dataclass(frozen=True)
class MatchRecord:
    """A match with its two competitors normalized to a fixed-order pair."""

    match_id: str
    teams: Tuple[TeamIdentity, ...]
    scheduled_at: Optional[Any] = None
    finished_at: Optional[Any] = None
    status: str = ""

    # Raw result fields; the outcome is derived, never stored upstream.
    winner: Optional[str] = None
    scores: Dict[str, Any] = field(default_factory=dict)

    # Map voting as returned by the match endpoint ({"pick": [...], "ban": [...]})
    map_voting: Dict[str, Any] = field(default_factory=dict)

    # Statistics payload attached after a successful stats fetch
    stats: Optional[Dict[str, Any]] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "MatchRecord":
        results = _mapping(data.get('results'))
        voting_map = _mapping(_mapping(data.get('voting')).get('map'))
        winner = results.get('winner')
        return cls(
            match_id=str(data.get('match_id') or ''),
            teams=tuple(extract_teams_basic(data.get('teams'))),
            scheduled_at=data.get('scheduled_at'),
            finished_at=data.get('finished_at'),
            status=str(data.get('status') or ''),
            winner=str(winner) if winner not in (None, '') else None,
            scores=_mapping(results.get('score')),
            map_voting=voting_map,
        )

    @property
    def is_finished(self) -> bool:
        """Finished once a finish time is set or the status is terminal."""
        return bool(self.finished_at) or self.status.lower() in TERMINAL_STATUSES

    @property
    def team_ids(self) -> List[str]:
        return [t.team_id for t in self.teams if t.team_id]

    @property
    def picks(self) -> List[str]:
        picks = self.map_voting.get('pick')
        return [str(p) for p in picks] if isinstance(picks, list) else []

    @property
    def bans(self) -> List[str]:
        bans = self.map_voting.get('ban')
        return [str(b) for b in bans] if isinstance(bans, list) else []

    def involves(self, team_id: str) -> bool:
        return team_id in self.team_ids

    def team_at(self, index: int) -> TeamIdentity:
        """Competitor at a position, or an empty identity when absent."""
        if 0 <= index < len(self.teams):
            return self.teams[index]
        return TeamIdentity(team_id=None, name=None)
