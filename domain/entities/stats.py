"""Per-player, per-map statistic line."""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PlayerStatLine:
    """
    One player's statistics on one map of one match.

    Stat values are kept exactly as upstream sent them (usually strings);
    numeric parsing happens in the aggregator so the raw export stays
    faithful to the API.
    """

    match_id: str
    map: str
    team_id: str
    team_name: str
    nickname: str
    kills: Any = ""
    deaths: Any = ""
    assists: Any = ""
    kd: Any = ""
    kr: Any = ""
    hs_pct: Any = ""
    mvps: Any = ""

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'map': self.map,
            'team_id': self.team_id,
            'team_name': self.team_name,
            'nickname': self.nickname,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kd': self.kd,
            'kr': self.kr,
            'hs_pct': self.hs_pct,
            'mvps': self.mvps,
        }
