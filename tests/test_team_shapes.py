from domain.entities import TeamIdentity
from domain.team_shapes import extract_team_entries, extract_team_ids, extract_teams_basic

AS_LIST = [
    {"faction_id": "t1", "name": "Alpha"},
    {"faction_id": "t2", "name": "Bravo"},
]
AS_MAPPING = {
    "faction1": {"faction_id": "t1", "name": "Alpha"},
    "faction2": {"faction_id": "t2", "name": "Bravo"},
}


def test_mapping_and_list_shapes_normalize_identically():
    assert extract_team_ids(AS_MAPPING) == extract_team_ids(AS_LIST) == ["t1", "t2"]
    assert extract_teams_basic(AS_MAPPING) == extract_teams_basic(AS_LIST) == [
        TeamIdentity("t1", "Alpha"),
        TeamIdentity("t2", "Bravo"),
    ]


def test_id_field_priority():
    teams = [
        {"team_id": "a", "faction_id": "b", "team": {"team_id": "c"}},
        {"faction_id": "b", "team": {"team_id": "c"}},
        {"team": {"team_id": "c", "name": "Nested"}},
    ]
    assert extract_team_ids(teams) == ["a", "b", "c"]
    assert extract_teams_basic(teams)[2] == TeamIdentity("c", "Nested")


def test_entries_without_id_are_dropped_from_ids_but_keep_position():
    teams = [{"name": "No Id"}, {"team_id": "t2", "name": "Bravo"}]
    assert extract_team_ids(teams) == ["t2"]
    assert extract_teams_basic(teams) == [TeamIdentity(None, "No Id"), TeamIdentity("t2", "Bravo")]


def test_unknown_shapes_are_empty():
    assert extract_team_entries(None) == []
    assert extract_team_entries("faction1") == []
    assert extract_team_ids(42) == []
