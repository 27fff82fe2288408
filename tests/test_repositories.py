import logging

import httpx

from domain.entities import MatchRecord, TeamIdentity
from infrastructure.repositories import MatchRepository, TeamRepository
from helpers import error


def _match(match_id):
    return MatchRecord(match_id=match_id, teams=(TeamIdentity("A", "Alpha"), TeamIdentity("B", "Bravo")))


def _skip_records(caplog):
    return [r for r in caplog.records if getattr(r, "category", None) == "PartialDataWarning"]


def test_attach_stats_skips_failed_and_undecodable_fetches(fake_api, with_client, caplog):
    caplog.set_level(logging.WARNING, logger="infrastructure.repositories.match_repository")
    fake_api.add("/matches/m1/stats", lambda request: httpx.Response(200, text="<html>oops</html>"))
    fake_api.add("/matches/m2/stats", {"rounds": []})
    fake_api.add("/matches/m3/stats", error(404))
    repo = None

    async def _attach(api):
        nonlocal repo
        repo = MatchRepository(api, delay_s=0)
        return await repo.attach_stats([_match("m1"), _match("m2"), _match("m3")])

    matches = with_client(_attach)

    assert [m.stats for m in matches] == [None, {"rounds": []}, None]
    assert repo.skipped == 2
    assert [r.getMessage().split(" skipped")[0] for r in _skip_records(caplog)] == [
        "stats for match m1", "stats for match m3",
    ]


def test_team_details_skip_undecodable_team(fake_api, with_client, caplog):
    caplog.set_level(logging.WARNING, logger="infrastructure.repositories.team_repository")
    fake_api.add("/teams/A", lambda request: httpx.Response(200, text="gateway error"))
    fake_api.add("/teams/B", {"team_id": "B", "name": "Bravo", "members": []})
    repo = None

    async def _details(api):
        nonlocal repo
        repo = TeamRepository(api, delay_s=0)
        return await repo.get_team_details(["A", "B"])

    teams = with_client(_details)

    assert [t.team_id for t in teams] == ["B"]
    assert repo.skipped == 1
    assert len(_skip_records(caplog)) == 1


def test_list_matches_tolerates_malformed_results_and_voting(fake_api, with_client):
    fake_api.add("/championships/c1/matches", {"items": [
        {"match_id": "m1", "results": ["faction1"], "voting": {"map": ["de_nuke"]}},
        {"match_id": "m2", "results": {"winner": "faction2", "score": "2:0"}, "voting": "none"},
    ]})

    matches = with_client(lambda api: MatchRepository(api, delay_s=0).list_matches("c1"))

    assert [(m.match_id, m.winner, m.scores, m.map_voting) for m in matches] == [
        ("m1", None, {}, {}),
        ("m2", "faction2", {}, {}),
    ]
