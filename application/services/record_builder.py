"""Flat record builders for the exported tables."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence

from domain.entities import MatchRecord, PlayerStatLine, RosterMember


def _team_name(match: MatchRecord, index: int, team_names: Mapping[str, str]) -> str:
    team = match.team_at(index)
    if team.name:
        return team.name
    return team_names.get(team.team_id, "") if team.team_id else ""


def match_row(
    match: MatchRecord,
    team_names: Mapping[str, str],
    include_map: bool = True,
) -> Dict[str, Any]:
    """One match as a row; ``map`` is the first picked map."""
    row: Dict[str, Any] = {
        'match_id': match.match_id,
        'scheduled_at': match.scheduled_at,
        'finished_at': match.finished_at,
    }
    if include_map:
        row['map'] = match.picks[0] if match.picks else ''
    row.update({
        'team1_id': match.team_at(0).team_id or '',
        'team1_name': _team_name(match, 0, team_names),
        'team2_id': match.team_at(1).team_id or '',
        'team2_name': _team_name(match, 1, team_names),
        'result_winner': match.winner or '',
    })
    return row


def veto_row(match: MatchRecord, map_pool: Sequence[str]) -> Dict[str, Any]:
    """
    Map veto summary of a match.

    Bans alternate between the teams (0 and 2 for the first, 1 and 3 for
    the second); picks 0 and 1 belong to the first and second team. The
    leftover map is reported only when exactly one pool map is unused.
    """
    bans = match.bans
    picks = match.picks
    used = {m for m in bans + picks if m}
    leftover = [m for m in map_pool if m not in used]
    return {
        'match_id': match.match_id,
        'team1_name': match.team_at(0).name or '',
        'team2_name': match.team_at(1).name or '',
        'team1_bans': ",".join(b for b in bans[0:4:2] if b),
        'team2_bans': ",".join(b for b in bans[1:4:2] if b),
        'team1_pick': picks[0] if len(picks) > 0 else '',
        'team2_pick': picks[1] if len(picks) > 1 else '',
        'leftover_map': leftover[0] if len(leftover) == 1 else '',
        'picks': ",".join(picks),
        'bans': ",".join(bans),
        'map_voting_json': json.dumps(match.map_voting, separators=(",", ":")),
    }


def team_roster(
    players: Sequence[RosterMember],
    lines: Sequence[PlayerStatLine],
    team_id: str,
    team_names: Mapping[str, str],
) -> List[RosterMember]:
    """
    A team's roster from its team page, else from the nicknames in its stat lines.

    The derived roster has no player ids or roles.
    """
    roster = [p for p in players if p.team_id == team_id]
    if roster:
        return roster

    team_lines = [ln for ln in lines if ln.team_id == team_id]
    team_name: Optional[str] = team_names.get(team_id) or next(
        (ln.team_name for ln in team_lines if ln.team_name), ''
    )
    nicknames = list(dict.fromkeys(ln.nickname for ln in team_lines))
    return [
        RosterMember(team_id=team_id, team_name=team_name or '', player_id='', nickname=nick)
        for nick in nicknames
    ]
