"""
Normalization of the two-team structure found in match payloads.

Upstream returns match teams either as a list or as a mapping keyed by
faction ("faction1", "faction2"), and spells the team id as ``team_id``,
``faction_id`` or ``team.team_id``. Every reader of match teams goes
through these helpers and only sees the normalized TeamIdentity pair.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from domain.entities.team import TeamIdentity

_ID_PATHS = (("team_id",), ("faction_id",), ("team", "team_id"))
_NAME_PATHS = (("name",), ("team", "name"))


def _lookup(entry: Any, path: tuple) -> Any:
    node = entry
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def _first(entry: Any, paths: tuple) -> Optional[str]:
    for path in paths:
        value = _lookup(entry, path)
        if value is not None:
            return str(value)
    return None


def extract_team_entries(teams: Any) -> List[Any]:
    """Ordered team entries: a list as-is, mapping values in order, anything else empty."""
    if isinstance(teams, list):
        return teams
    if isinstance(teams, tuple):
        return list(teams)
    if isinstance(teams, Mapping):
        return list(teams.values())
    return []


def extract_team_ids(teams: Any) -> List[str]:
    """Team ids in competitor order; entries without an id are dropped."""
    ids = (_first(entry, _ID_PATHS) for entry in extract_team_entries(teams))
    return [team_id for team_id in ids if team_id]


def extract_teams_basic(teams: Any) -> List[TeamIdentity]:
    """One TeamIdentity per entry, positions preserved even when the id is missing."""
    return [
        TeamIdentity(team_id=_first(entry, _ID_PATHS), name=_first(entry, _NAME_PATHS))
        for entry in extract_team_entries(teams)
    ]
