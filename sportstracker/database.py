"""Read-only access to the sports results database."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Sequence

REQUIRED_TABLES = (
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


class DatabaseError(Exception):
    """Raised when the database cannot be opened or queried."""


class MissingTableError(DatabaseError):
    """Raised when a required table is absent from the database."""

    def __init__(self, table: str) -> None:
        super().__init__(f"table {table!r} not found in the database")
        self.table = table


@dataclass(frozen=True)
class Sport:
    id: int
    name: str


@dataclass(frozen=True)
class Tournament:
    id: int
    name: str


@dataclass(frozen=True)
class MatchSummary:
    """One match of a tournament; ``score`` is None when not yet played."""

    id: int
    date: date | None
    team1: str
    team2: str
    score: str | None


@dataclass(frozen=True)
class StandingRow:
    position: int
    team: str
    points: int
    games_played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    goal_difference: int


@dataclass(frozen=True)
class MatchInfo:
    team1: str
    team2: str
    date: date | None


@dataclass(frozen=True)
class StatLine:
    name: str
    team1_value: str
    team2_value: str


@dataclass(frozen=True)
class LineupEntry:
    number: str
    name: str
    position: str


@dataclass
class Lineups:
    team1_starters: list[LineupEntry] = field(default_factory=list)
    team1_substitutes: list[LineupEntry] = field(default_factory=list)
    team2_starters: list[LineupEntry] = field(default_factory=list)
    team2_substitutes: list[LineupEntry] = field(default_factory=list)


@dataclass(frozen=True)
class MatchEvent:
    event_type: str
    minute: str
    player: str | None
    description: str
    team_id: int | None


@dataclass(frozen=True)
class HistoryMatch:
    date: str
    team1: str
    team2: str
    score: str


def default_database_path() -> Path:
    """Location of the database in the user's home directory."""
    return Path.home() / "database" / "sports.db"


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _int(value: Any) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _parse_date(value: Any) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(_text(value)[:10])
    except ValueError:
        return None


class SportsDatabase:
    """Queries over a sports results database stored in SQLite."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_database_path()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DatabaseError(
                f"cannot create database directory {self.path.parent}: {exc}"
            ) from exc
        try:
            self._conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {self.path}: {exc}") from exc
        try:
            self._check_tables()
        except Exception:
            self._conn.close()
            raise

    def _check_tables(self) -> None:
        present = {
            row[0]
            for row in self._rows("SELECT name FROM sqlite_master WHERE type = 'table'")
        }
        for table in REQUIRED_TABLES:
            if table not in present:
                raise MissingTableError(table)

    def _rows(self, sql: str, params: Sequence[Any] = ()) -> list[tuple]:
        try:
            return self._conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> SportsDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def sports(self) -> list[Sport]:
        rows = self._rows("SELECT id, name FROM sports ORDER BY name")
        return [Sport(_int(i), _text(name)) for i, name in rows]

    def tournaments(self, sport_id: int) -> list[Tournament]:
        rows = self._rows(
            "SELECT id, name FROM tournaments WHERE sport_id = ? ORDER BY name",
            (sport_id,),
        )
        return [Tournament(_int(i), _text(name)) for i, name in rows]

    def rounds(self, tournament_id: int) -> list[int]:
        rows = self._rows(
            "SELECT DISTINCT round FROM matches WHERE tournament_id = ? ORDER BY round",
            (tournament_id,),
        )
        return [_int(r) for (r,) in rows]

    def matches(self, tournament_id: int, round_number: int | None = None) -> list[MatchSummary]:
        """Matches of a tournament, newest first; a positive round narrows the list."""
        sql = (
            "SELECT m.id, m.date, t1.name, t2.name, m.score "
            "FROM matches m "
            "JOIN teams t1 ON m.team1_id = t1.id "
            "JOIN teams t2 ON m.team2_id = t2.id "
            "WHERE m.tournament_id = ? "
        )
        params: list[Any] = [tournament_id]
        if round_number is not None and round_number > 0:
            sql += "AND m.round = ? "
            params.append(round_number)
        sql += "ORDER BY m.date DESC"
        return [
            MatchSummary(
                id=_int(mid),
                date=_parse_date(mdate),
                team1=_text(t1),
                team2=_text(t2),
                score=None if score is None else _text(score),
            )
            for mid, mdate, t1, t2, score in self._rows(sql, params)
        ]

    def standings(self, tournament_id: int) -> list[StandingRow]:
        rows = self._rows(
            "SELECT s.position, t.name, s.points, s.games_played, s.wins, s.draws, "
            "s.losses, s.goals_for, s.goals_against, "
            "(s.goals_for - s.goals_against) AS goal_difference "
            "FROM standings s JOIN teams t ON s.team_id = t.id "
            "WHERE s.tournament_id = ? ORDER BY s.position",
            (tournament_id,),
        )
        return [
            StandingRow(
                position=_int(row[0]),
                team=_text(row[1]),
                points=_int(row[2]),
                games_played=_int(row[3]),
                wins=_int(row[4]),
                draws=_int(row[5]),
                losses=_int(row[6]),
                goals_for=_int(row[7]),
                goals_against=_int(row[8]),
                goal_difference=_int(row[9]),
            )
            for row in rows
        ]

    def match_info(self, match_id: int) -> MatchInfo | None:
        rows = self._rows(
            "SELECT t1.name, t2.name, m.date FROM matches m "
            "JOIN teams t1 ON m.team1_id = t1.id "
            "JOIN teams t2 ON m.team2_id = t2.id "
            "WHERE m.id = ?",
            (match_id,),
        )
        if not rows:
            return None
        team1, team2, mdate = rows[0]
        return MatchInfo(_text(team1), _text(team2), _parse_date(mdate))

    def team_id(self, name: str) -> int | None:
        rows = self._rows("SELECT id FROM teams WHERE name = ?", (name,))
        return _int(rows[0][0]) if rows else None

    def match_stats(self, match_id: int, team1: str, team2: str) -> list[StatLine]:
        rows = self._rows(
            "SELECT stat_name, "
            "(SELECT stat_value FROM match_stats WHERE match_id = ? AND team_id = "
            "(SELECT id FROM teams WHERE name = ?) AND stat_name = ms.stat_name) AS team1_value, "
            "(SELECT stat_value FROM match_stats WHERE match_id = ? AND team_id = "
            "(SELECT id FROM teams WHERE name = ?) AND stat_name = ms.stat_name) AS team2_value "
            "FROM match_stats ms WHERE match_id = ? GROUP BY stat_name",
            (match_id, team1, match_id, team2, match_id),
        )
        return [StatLine(_text(n), _text(v1), _text(v2)) for n, v1, v2 in rows]

    def lineups(self, match_id: int, team1: str, team2: str) -> Lineups:
        """Lineups of both teams split into starters and substitutes."""
        team1_id = self.team_id(team1)
        team2_id = self.team_id(team2)
        rows = self._rows(
            "SELECT p.name, ml.team_id, ml.position, ml.is_starting, ml.jersey_number "
            "FROM match_lineups ml JOIN players p ON ml.player_id = p.id "
            "WHERE ml.match_id = ? "
            "ORDER BY ml.team_id, ml.is_starting DESC, ml.position",
            (match_id,),
        )
        result = Lineups()
        for name, team_id, position, is_starting, number in rows:
            entry = LineupEntry(_text(number), _text(name), _text(position))
            starting = bool(_int(is_starting))
            if team_id is not None and team_id == team1_id:
                target = result.team1_starters if starting else result.team1_substitutes
            elif team_id is not None and team_id == team2_id:
                target = result.team2_starters if starting else result.team2_substitutes
            else:
                continue
            target.append(entry)
        return result

    def events(self, match_id: int) -> list[MatchEvent]:
        rows = self._rows(
            "SELECT me.event_type, me.minute, p.name, me.description, me.team_id "
            "FROM match_events me LEFT JOIN players p ON me.player_id = p.id "
            "WHERE me.match_id = ? ORDER BY me.minute",
            (match_id,),
        )
        return [
            MatchEvent(
                event_type=_text(etype),
                minute=_text(minute),
                player=None if player is None else _text(player),
                description=_text(description),
                team_id=None if team_id is None else _int(team_id),
            )
            for etype, minute, player, description, team_id in rows
        ]

    def _history(self, condition: str, params: Sequence[Any], limit: int) -> list[HistoryMatch]:
        rows = self._rows(
            "SELECT m.date, t1.name, t2.name, m.score FROM matches m "
            "JOIN teams t1 ON m.team1_id = t1.id "
            "JOIN teams t2 ON m.team2_id = t2.id "
            f"WHERE {condition} AND m.date < ? "
            f"ORDER BY m.date DESC LIMIT {int(limit)}",
            params,
        )
        return [HistoryMatch(*(_text(v) for v in row)) for row in rows]

    def recent_matches(self, team: str, before: date | None) -> list[HistoryMatch]:
        """The last five matches of a team played before a date."""
        cutoff = before.isoformat() if before else ""
        return self._history("(t1.name = ? OR t2.name = ?)", (team, team, cutoff), 5)

    def head_to_head(self, team1: str, team2: str, before: date | None) -> list[HistoryMatch]:
        """The last ten meetings of two teams played before a date."""
        cutoff = before.isoformat() if before else ""
        return self._history(
            "((t1.name = ? AND t2.name = ?) OR (t1.name = ? AND t2.name = ?))",
            (team1, team2, team2, team1, cutoff),
            10,
        )