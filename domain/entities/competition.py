"""Competition entities: organizer, championship, leaderboards and standings."""
from dataclasses import dataclass
from typing import Any, Dict, Optional


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


@dataclass(frozen=True)
class Organizer:
    id: str
    name: str


@dataclass(frozen=True)
class Championship:
    id: str
    name: str
    game_id: str

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Championship":
        return cls(
            id=str(data.get('championship_id') or data.get('id') or ''),
            name=str(data.get('name') or ''),
            game_id=str(data.get('game_id') or data.get('game') or ''),
        )


@dataclass(frozen=True)
class LeaderboardDescriptor:
    """
    A division of a championship.

    ``group_index`` and ``leaderboard_id`` are alternate keys into the same
    division; depending on the lookup path either may be unknown.
    """

    name: str = ""
    group_index: Optional[int] = None
    leaderboard_id: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "LeaderboardDescriptor":
        group = data.get('group')
        lb_id = _first_present(data, 'leaderboard_id', 'id')
        return cls(
            name=str(_first_present(data, 'leaderboard_name', 'name', 'title') or ''),
            group_index=group if isinstance(group, int) and not isinstance(group, bool) else None,
            leaderboard_id=str(lb_id) if lb_id is not None else None,
        )

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        if self.group_index is not None:
            return f"Group {self.group_index}"
        return "(by id)"

    def to_dict(self) -> dict:
        return {
            'id': self.leaderboard_id,
            'group': self.group_index,
            'name': self.name,
        }


@dataclass(frozen=True)
class StandingsRow:
    """One team's line in a leaderboard; upstream order is the ranking."""

    position: Any
    team_id: str
    team_name: str
    points: Any
    wins: Any
    losses: Any

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "StandingsRow":
        team = data.get('team') if isinstance(data.get('team'), dict) else {}
        return cls(
            position=_first_present(data, 'position', 'rank'),
            team_id=str(_first_present(team, 'team_id') or data.get('entity_id') or ''),
            team_name=str(_first_present(team, 'name') or data.get('entity_name') or ''),
            points=_first_present(data, 'points', 'score'),
            wins=data.get('wins'),
            losses=data.get('losses'),
        )

    def to_dict(self) -> dict:
        return {
            'position': '' if self.position is None else self.position,
            'team_id': self.team_id,
            'team_name': self.team_name,
            'points': '' if self.points is None else self.points,
            'wins': '' if self.wins is None else self.wins,
            'losses': '' if self.losses is None else self.losses,
        }
