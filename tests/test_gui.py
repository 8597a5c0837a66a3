import sqlite3

import pytest

from sportstracker.gui import main

ALL_TABLES = (
    "sports",
    "tournaments",
    "teams",
    "matches",
    "standings",
    "players",
    "match_lineups",
    "match_events",
    "match_stats",
)


def _make_db(path, tables):
    conn = sqlite3.connect(path)
    for table in tables:
        conn.execute(f"CREATE TABLE {table} (id INTEGER PRIMARY KEY)")
    conn.commit()
    conn.close()


def test_empty_database_reports_missing_table(tmp_path, capsys):
    path = tmp_path / "sports.db"
    assert main(["--database", str(path)]) == 1
    assert "sports" in capsys.readouterr().err


def test_missing_single_table_is_named(tmp_path, capsys):
    path = tmp_path / "sports.db"
    _make_db(path, [t for t in ALL_TABLES if t != "match_stats"])
    assert main(["--database", str(path)]) == 1
    err = capsys.readouterr().err
    assert "match_stats" in err
    assert err.startswith("Не удалось подключиться к базе данных")


def test_unusable_directory_fails(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    assert main(["--database", str(blocker / "sports.db")]) == 1
    assert capsys.readouterr().err.startswith("Не удалось подключиться к базе данных")


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--database" in capsys.readouterr().out


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2