import sqlite3

import pytest

from sportstracker.controller import MatchDetails, TrackerSession
from sportstracker.database import SportsDatabase
from sportstracker.presentation import Zone

SCHEMA = """
CREATE TABLE sports (id INTEGER PRIMARY KEY, name TEXT);
CREATE TABLE tournaments (id INTEGER PRIMARY KEY, sport_id INTEGER, name TEXT);
CREATE TABLE teams (id INTEGER PRIMARY KEY, name TEXT);
CREATE TABLE matches (id INTEGER PRIMARY KEY, tournament_id INTEGER, round INTEGER,
    date TEXT, team1_id INTEGER, team2_id INTEGER, score TEXT);
CREATE TABLE standings (tournament_id INTEGER, team_id INTEGER, position INTEGER,
    points INTEGER, games_played INTEGER, wins INTEGER, draws INTEGER, losses INTEGER,
    goals_for INTEGER, goals_against INTEGER);
CREATE TABLE players (id INTEGER PRIMARY KEY, name TEXT, team_id INTEGER);
CREATE TABLE match_lineups (match_id INTEGER, player_id INTEGER, team_id INTEGER,
    position TEXT, is_starting INTEGER, jersey_number INTEGER);
CREATE TABLE match_events (match_id INTEGER, event_type TEXT, minute INTEGER,
    player_id INTEGER, description TEXT, team_id INTEGER);
CREATE TABLE match_stats (match_id INTEGER, team_id INTEGER, stat_name TEXT,
    stat_value TEXT);

INSERT INTO sports VALUES (1, 'Football');
INSERT INTO tournaments VALUES (1, 1, 'League'), (2, 1, 'Cup');
INSERT INTO teams VALUES (1, 'Alpha'), (2, 'Beta'), (3, 'Gamma');
INSERT INTO matches VALUES
    (1, 1, 1, '2024-03-01', 1, 2, '1 - 0'),
    (2, 1, 1, '2024-03-02', 3, 1, '0 - 0'),
    (3, 1, 2, '2024-03-15', 1, 2, '2 - 1'),
    (4, 1, 2, '2024-03-16', 2, 3, NULL);
INSERT INTO standings VALUES
    (1, 1, 1, 7, 3, 2, 1, 0, 3, 1),
    (1, 2, 5, 3, 3, 1, 0, 2, 2, 3),
    (1, 3, 18, 1, 2, 0, 1, 1, 0, 0);
INSERT INTO players VALUES (1, 'Ann', 1), (2, 'Bob', 1), (3, 'Cid', 2);
INSERT INTO match_lineups VALUES
    (3, 1, 1, 'GK', 1, 1),
    (3, 2, 1, 'FW', 0, 9),
    (3, 3, 2, 'DF', 1, 4);
INSERT INTO match_events VALUES
    (3, 'goal', 10, 1, 'header', 1),
    (3, 'yellow_card', 30, NULL, 'foul', 2);
INSERT INTO match_stats VALUES
    (3, 1, 'possession', '55'),
    (3, 2, 'possession', '45'),
    (3, 1, 'shots', '7'),
    (3, 2, 'shots', '3');
"""


@pytest.fixture
def database(tmp_path):
    path = tmp_path / "sports.db"
    conn = sqlite3.connect(path)
    conn.executescript(SCHEMA)
    conn.commit()
    conn.close()
    with SportsDatabase(path) as db:
        yield db


@pytest.fixture
def session(database):
    return TrackerSession(database)


def test_initial_state_has_no_tournament(session):
    assert session.round_label() == "Выбрать тур"
    assert session.match_lines() == []
    assert session.standings() == []


def test_select_tournament_picks_latest_round(session):
    session.select_tournament(1, "League")
    assert session.rounds == [1, 2]
    assert session.current_round == 2
    assert session.round_label() == "Тур 2"
    assert session.tournament_name == "League"


def test_select_tournament_resets_pager(session):
    session.select_tournament(1, "League")
    assert session.pager.index == 0
    assert session.pager.page() == session.rounds


def test_tournament_without_matches_shows_all_rounds(session):
    session.select_tournament(2, "Cup")
    assert session.current_round is None
    assert session.round_label() == "Все туры"
    assert session.match_lines() == []


def test_match_lines_for_current_round_newest_first(session):
    session.select_tournament(1, "League")
    lines = session.match_lines()
    assert [match_id for match_id, _ in lines] == [4, 3]
    assert lines[0][1] == "16.03.2024: Beta ? - ? Gamma"
    assert lines[1][1] == "15.03.2024: Alpha 2 - 1 Beta"


def test_select_round_changes_matches(session):
    session.select_tournament(1, "League")
    session.select_round(1)
    assert session.round_label() == "Тур 1"
    assert [match_id for match_id, _ in session.match_lines()] == [2, 1]


def test_select_unknown_round_raises(session):
    session.select_tournament(1, "League")
    with pytest.raises(ValueError):
        session.select_round(7)
    assert session.current_round == 2


def test_standings_carry_zones(session):
    session.select_tournament(1, "League")
    table = session.standings()
    assert [row.team for row, _ in table] == ["Alpha", "Beta", "Gamma"]
    assert [zone for _, zone in table] == [Zone.CHAMPIONS, Zone.QUALIFICATION, Zone.RELEGATION]


def test_match_details_unknown_match(session):
    assert session.match_details(99) is None


def test_match_details_overview(session):
    details = session.match_details(3)
    assert isinstance(details, MatchDetails)
    assert (details.info.team1, details.info.team2) == ("Alpha", "Beta")
    assert details.team1_id == 1
    stats = {line.name: (line.team1_value, line.team2_value) for line in details.stats}
    assert stats == {"possession": ("55", "45"), "shots": ("7", "3")}
    assert [entry.name for entry in details.lineups.team1_starters] == ["Ann"]
    assert [entry.name for entry in details.lineups.team1_substitutes] == ["Bob"]
    assert [entry.name for entry in details.lineups.team2_starters] == ["Cid"]
    assert [event.event_type for event in details.events] == ["goal", "yellow_card"]


def test_match_details_history_is_before_match(session):
    details = session.match_details(3)
    assert [m.date for m in details.team1_recent] == ["2024-03-02", "2024-03-01"]
    assert [m.date for m in details.team2_recent] == ["2024-03-01"]
    assert [(m.team1, m.team2, m.score) for m in details.head_to_head] == [
        ("Alpha", "Beta", "1 - 0")
    ]
    assert all(m.date < "2024-03-15" for m in details.team1_recent)