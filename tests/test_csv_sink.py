import csv

from infrastructure.sinks.csv_sink import CsvRecordSink


def _read(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


def test_header_from_first_record_and_none_as_blank(tmp_path):
    sink = CsvRecordSink(tmp_path / "out")

    sink.write("teams", [
        {"team_id": "A", "team_name": "Alpha", "created_at": None},
        {"team_id": "B", "team_name": "Bravo, Inc", "created_at": 1700000000},
    ])

    assert _read(tmp_path / "out" / "teams.csv") == [
        ["team_id", "team_name", "created_at"],
        ["A", "Alpha", ""],
        ["B", "Bravo, Inc", "1700000000"],
    ]
    assert sink.paths["teams"] == tmp_path / "out" / "teams.csv"


def test_empty_table_is_an_empty_file(tmp_path):
    sink = CsvRecordSink(tmp_path)

    sink.write("standings", [])

    assert (tmp_path / "standings.csv").read_text(encoding="utf-8") == ""


def test_rewrite_replaces_previous_content(tmp_path):
    sink = CsvRecordSink(tmp_path)
    sink.write("players", [{"nickname": "ace"}, {"nickname": "bee"}])
    sink.write("players", [{"nickname": "cat"}])

    assert _read(tmp_path / "players.csv") == [["nickname"], ["cat"]]


def test_clean_removes_existing_output(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    (out / "stale.csv").write_text("old", encoding="utf-8")

    CsvRecordSink(out, clean=True).write("teams", [{"team_id": "A"}])

    assert sorted(p.name for p in out.iterdir()) == ["teams.csv"]


def test_without_clean_existing_files_stay(tmp_path):
    (tmp_path / "stale.csv").write_text("old", encoding="utf-8")

    CsvRecordSink(tmp_path).write("teams", [{"team_id": "A"}])

    assert (tmp_path / "stale.csv").exists()
