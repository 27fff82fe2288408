"""Derived summary entities produced by the statistics aggregator."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlayerAggregate:
    """Totals for one player, keyed by (team_id, nickname)."""

    team_id: str
    team_name: str
    nickname: str
    maps_played: int
    kills: float
    deaths: float
    assists: float
    mvps: float
    kd: float
    kr_avg: float
    hs_pct_avg: float
    player_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'team_id': self.team_id,
            'team_name': self.team_name,
            'nickname': self.nickname,
            'maps_played': self.maps_played,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kd': self.kd,
            'kr_avg': self.kr_avg,
            'hs_pct_avg': self.hs_pct_avg,
            'mvps': self.mvps,
        }

    def to_roster_dict(self) -> dict:
        """Row shape for a single team's player table."""
        return {
            'player_id': self.player_id or '',
            'nickname': self.nickname,
            'team_name': self.team_name,
            'maps_played': self.maps_played,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kd': self.kd,
            'kr_avg': self.kr_avg,
            'hs_pct_avg': self.hs_pct_avg,
            'mvps': self.mvps,
        }


@dataclass(frozen=True)
class TeamMapAggregate:
    """One team's totals on one map of one match, keyed by (match_id, map)."""

    match_id: str
    map: str
    team_name: str
    kills: float
    deaths: float
    assists: float
    mvps: float
    kd: float
    kr_avg: float
    hs_pct_avg: float

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'map': self.map,
            'team_name': self.team_name,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kd': self.kd,
            'kr_avg': self.kr_avg,
            'hs_pct_avg': self.hs_pct_avg,
            'mvps': self.mvps,
        }


@dataclass(frozen=True)
class OpponentAggregate:
    """Head-to-head record against one opponent."""

    opponent_id: str
    opponent_name: str
    played: int
    wins: int
    losses: int
    draws: int

    def to_dict(self) -> dict:
        return {
            'opponent_id': self.opponent_id,
            'opponent_name': self.opponent_name,
            'played': self.played,
            'wins': self.wins,
            'losses': self.losses,
            'draws': self.draws,
        }


@dataclass(frozen=True)
class TeamOverall:
    """Season summary for a single team."""

    team_id: str
    team_name: str
    matches_total: int
    matches_finished: int
    maps_played: int
    wins: int
    losses: int
    draws: int
    kills: float
    deaths: float
    assists: float
    kd: float
    kr_avg: float
    mvps: float

    def to_dict(self) -> dict:
        return {
            'team_id': self.team_id,
            'team_name': self.team_name,
            'matches_total': self.matches_total,
            'matches_finished': self.matches_finished,
            'maps_played': self.maps_played,
            'wins': self.wins,
            'losses': self.losses,
            'draws': self.draws,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kd': self.kd,
            'kr_avg': self.kr_avg,
            'mvps': self.mvps,
        }
