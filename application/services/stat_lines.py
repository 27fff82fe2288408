"""Flattening of match statistics payloads into per-player, per-map lines."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from domain.entities import MatchRecord, PlayerStatLine

# column -> player_stats keys, first present wins
STAT_KEYS = {
    'kills':   ("Kills",),
    'deaths':  ("Deaths",),
    'assists': ("Assists",),
    'kd':      ("K/D Ratio", "KDRatio"),
    'kr':      ("K/R Ratio", "KRRatio"),
    'hs_pct':  ("Headshots %", "Headshots"),
    'mvps':    ("MVPs",),
}


def team_names_by_id(matches: Iterable[MatchRecord]) -> Dict[str, str]:
    """``team_id → name`` from every match team that carries both; later matches win."""
    names: Dict[str, str] = {}
    for match in matches:
        for team in match.teams:
            if team.team_id and team.name:
                names[team.team_id] = team.name
    return names


def _stat(player_stats: Mapping[str, Any], keys: tuple) -> Any:
    for key in keys:
        value = player_stats.get(key)
        if value is not None:
            return value
    return ""


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def flatten_match(match: MatchRecord, team_names: Mapping[str, str]) -> List[PlayerStatLine]:
    """
    One line per player per round (map) of a match's statistics.

    The stats team is identified by its own ``team_id``/``faction_id``,
    else by matching its name against the match teams case-insensitively.
    A missing team name is filled in from ``team_names``.
    """
    if not isinstance(match.stats, dict):
        return []
    id_by_name = {
        team.name.lower(): team.team_id
        for team in match.teams
        if team.team_id and team.name
    }

    lines: List[PlayerStatLine] = []
    for rnd in _list(match.stats.get('rounds')):
        if not isinstance(rnd, dict):
            continue
        round_stats = rnd.get('round_stats') if isinstance(rnd.get('round_stats'), dict) else {}
        map_name = str(round_stats.get('Map') or '')
        for team in _list(rnd.get('teams')):
            if not isinstance(team, dict):
                continue
            team_name = str(team.get('team') or team.get('name') or '').strip()
            team_id = str(
                team.get('team_id')
                or team.get('faction_id')
                or (id_by_name.get(team_name.lower()) if team_name else '')
                or ''
            )
            final_name = team_name or (team_names.get(team_id, '') if team_id else '')
            for player in _list(team.get('players')):
                if not isinstance(player, dict):
                    continue
                stats = player.get('player_stats') if isinstance(player.get('player_stats'), dict) else {}
                lines.append(PlayerStatLine(
                    match_id=match.match_id,
                    map=map_name,
                    team_id=team_id,
                    team_name=final_name,
                    nickname=str(player.get('nickname') or ''),
                    **{column: _stat(stats, keys) for column, keys in STAT_KEYS.items()},
                ))
    return lines


def flatten_matches(matches: Iterable[MatchRecord], team_names: Mapping[str, str]) -> List[PlayerStatLine]:
    """Lines of all matches, in match order then round, team and player order."""
    lines: List[PlayerStatLine] = []
    for match in matches:
        lines.extend(flatten_match(match, team_names))
    return lines
