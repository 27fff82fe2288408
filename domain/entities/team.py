"""Team entities: match-side identities and detailed team rosters."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class TeamIdentity:
    """A competitor as seen inside a match payload; either field may be missing."""

    team_id: Optional[str]
    name: Optional[str] = None


@dataclass(frozen=True)
class RosterMember:
    """A player listed on a team page."""

    team_id: str
    team_name: str
    player_id: str
    nickname: str
    role: str = ""

    def to_dict(self) -> dict:
        return {
            'team_id': self.team_id,
            'team_name': self.team_name,
            'player_id': self.player_id,
            'nickname': self.nickname,
            'role': self.role,
        }


@dataclass(frozen=True)
class TeamDetail:
    """Team details from the team endpoint."""

    team_id: str
    name: str
    created_at: Optional[Any] = None
    members: Tuple[RosterMember, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "TeamDetail":
        team_id = str(data.get('team_id') or '')
        name = str(data.get('name') or '')
        members = tuple(
            RosterMember(
                team_id=team_id,
                team_name=name,
                player_id=str(m.get('player_id') or ''),
                nickname=str(m.get('nickname') or ''),
                role=str(m.get('role') or m.get('membership_type') or ''),
            )
            for m in (data.get('members') or [])
            if isinstance(m, dict)
        )
        return cls(team_id=team_id, name=name, created_at=data.get('creation_date'), members=members)

    def to_dict(self) -> dict:
        return {
            'team_id': self.team_id,
            'team_name': self.name,
            'created_at': self.created_at,
        }
