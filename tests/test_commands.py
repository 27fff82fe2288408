import asyncio
import json

import pytest

import main
from config import ENV_KEYS, Settings
from presentation.cli import DiagnoseCommand, ExportCommand, InitCommand
from presentation.cli import diagnose_command, export_command, init_command
from presentation.cli.init_command import choose_leaderboard
from presentation.cli.options import cli_values
from domain.entities import LeaderboardDescriptor
from helpers import paged


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for name in ENV_KEYS.values():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(Settings, "FACEIT_API_KEY", "test-key-0123456789")


@pytest.fixture
def fake_client(monkeypatch, make_client):
    for module in (export_command, init_command, diagnose_command):
        monkeypatch.setattr(module, "FaceitAPIClient", make_client)


def _run(argv):
    args = main.build_parser().parse_args(argv)
    return asyncio.run(args.command_cls(args).run())


def test_parser_wires_commands():
    args = main.build_parser().parse_args(["export", "--skip-standings", "--lb-group", "2"])

    assert args.command_cls is ExportCommand
    assert cli_values(args) == {"lb-group": "2", "skip-standings": True}
    assert main.build_parser().parse_args(["init"]).command_cls is InitCommand
    assert main.build_parser().parse_args(["diagnose"]).command_cls is DiagnoseCommand


def test_export_requires_api_key(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(Settings, "FACEIT_API_KEY", "")

    code = _run(["export", "--org-id", "o1", "--champ-id", "c1", "--config", str(tmp_path / "none.json")])

    assert code == 1
    assert "FACEIT_API_KEY" in capsys.readouterr().err


def test_export_requires_championship(tmp_path, capsys):
    code = _run(["export", "--org-id", "o1", "--config", str(tmp_path / "none.json")])

    assert code == 1
    assert "--champ-id" in capsys.readouterr().err


def test_export_unresolved_organizer_exits_with_message(fake_api, fake_client, tmp_path, capsys):
    fake_api.add("/organizers", {"items": []})

    code = _run([
        "export", "--org-name", "Ghost League", "--champ-name", "S1",
        "--out-dir", str(tmp_path / "out"), "--config", str(tmp_path / "none.json"),
    ])

    assert code == 1
    assert "Organizer not found by name: Ghost League" in capsys.readouterr().err


def test_export_success_writes_csvs(fake_api, fake_client, tmp_path, capsys):
    fake_api.add("/championships/c1", {"championship_id": "c1", "name": "Season 1"})
    fake_api.add("/leaderboards/championships/c1", paged([]))
    fake_api.add("/leaderboards/lb1", paged([]))
    fake_api.add("/championships/c1/matches", paged([]))
    config = tmp_path / "faceit.config.json"
    config.write_text(json.dumps({"org-id": "o1", "champ-id": "c1", "lb-id": "lb1"}), encoding="utf-8")
    out = tmp_path / "out"

    code = _run(["export", "--config", str(config), "--out-dir", str(out)])

    assert code == 0
    stdout = capsys.readouterr().out
    assert stdout.startswith("Done.")
    assert "Championship: Season 1 (c1)" in stdout
    assert (out / "standings.csv").exists()
    assert not (out / "my_team_players.csv").exists()


def test_init_fills_ids_and_saves(fake_api, fake_client, tmp_path, capsys):
    fake_api.add("/organizers", {"items": [{"organizer_id": "org1", "name": "League"}]})
    fake_api.add("/organizers/org1/championships", paged([
        {"championship_id": "c1", "name": "Season 1", "game_id": "cs2"},
    ]))
    fake_api.add("/leaderboards/championships/c1", paged([
        {"leaderboard_id": "lb1", "leaderboard_name": "Main", "group": 1},
        {"leaderboard_id": "lb2", "leaderboard_name": "Open", "group": 2},
    ]))
    config = tmp_path / "faceit.config.json"
    config.write_text(json.dumps({"org-name": "League", "champ-name": "Season 1", "lb-name": "Open"}), encoding="utf-8")

    assert _run(["init", "--config", str(config)]) == 0

    saved = json.loads(config.read_text(encoding="utf-8"))
    assert (saved["org-id"], saved["champ-id"], saved["lb-id"], saved["lb-group"]) == ("org1", "c1", "lb2", 2)
    assert "Saved updates" in capsys.readouterr().out

    assert _run(["init", "--config", str(config)]) == 0
    assert "No changes needed" in capsys.readouterr().out


def test_init_lists_leaderboards_when_ambiguous(fake_api, fake_client, tmp_path, capsys):
    fake_api.add("/leaderboards/championships/c1", paged([
        {"leaderboard_id": "lb1", "leaderboard_name": "Main", "group": 1},
        {"leaderboard_id": "lb2", "leaderboard_name": "Open", "group": 2},
    ]))
    config = tmp_path / "faceit.config.json"
    config.write_text(json.dumps({"org-id": "org1", "champ-id": "c1"}), encoding="utf-8")

    assert _run(["init", "--config", str(config)]) == 0

    captured = capsys.readouterr()
    assert "id=lb2 group=2 name=Open" in captured.out
    assert "Could not determine lb-id" in captured.err
    assert "lb-id" not in json.loads(config.read_text(encoding="utf-8"))


def test_choose_leaderboard_order():
    boards = [
        LeaderboardDescriptor(name="Main", group_index=1, leaderboard_id="lb1"),
        LeaderboardDescriptor(name="Main Playoffs", group_index=2, leaderboard_id="lb2"),
    ]

    assert choose_leaderboard({"lb-name": "Main"}, boards) is boards[0]
    assert choose_leaderboard({"lb-name": "Playoffs"}, boards) is boards[1]
    assert choose_leaderboard({"lb-group": "2"}, boards) is boards[1]
    assert choose_leaderboard({"lb-pattern": "PLAY"}, boards) is boards[1]
    assert choose_leaderboard({"lb-pattern": "("}, boards) is None
    assert choose_leaderboard({}, boards[:1]) is boards[0]


def test_diagnose_probes_standings_routes(fake_api, fake_client, tmp_path, capsys):
    fake_api.add("/leaderboards/championships/c1", {"items": [{"leaderboard_id": "lb1", "group": 1}]})
    fake_api.add("/leaderboards/lb1", {"items": []})

    code = _run(["diagnose", "--champ-id", "c1", "--config", str(tmp_path / "none.json")])

    assert code == 0
    assert fake_api.paths() == [
        "/leaderboards/championships/c1",
        "/leaderboards/championships/c1/groups/1",
        "/leaderboards/championships/c1/groups/1",
        "/leaderboards/championships/c1/groups/0",
        "/leaderboards/championships/c1/groups/0",
        "/leaderboards/lb1/standings",
        "/leaderboards/lb1/standings",
        "/leaderboards/lb1",
        "/leaderboards/lb1",
    ]
    out = capsys.readouterr().out
    assert '"status": 404' in out
    assert "Diagnosis complete" in out
