"""Navigation state of the tracker: selected tournament, round and match."""

from __future__ import annotations

from dataclasses import dataclass, field

from sportstracker.database import (
    HistoryMatch,
    Lineups,
    MatchEvent,
    MatchInfo,
    SportsDatabase,
    StandingRow,
    StatLine,
)
from sportstracker.presentation import RoundPager, Zone, format_match_line, standing_zone

ROUNDS_PER_PAGE = 5
NO_TOURNAMENT_LABEL = "Выбрать тур"
ALL_ROUNDS_LABEL = "Все туры"


@dataclass
class MatchDetails:
    """Everything shown about a single match."""

    match_id: int
    info: MatchInfo
    team1_id: int | None
    stats: list[StatLine] = field(default_factory=list)
    lineups: Lineups = field(default_factory=Lineups)
    events: list[MatchEvent] = field(default_factory=list)
    team1_recent: list[HistoryMatch] = field(default_factory=list)
    team2_recent: list[HistoryMatch] = field(default_factory=list)
    head_to_head: list[HistoryMatch] = field(default_factory=list)


class TrackerSession:
    """Keeps track of what the user has selected and fetches the matching data."""

    def __init__(self, database: SportsDatabase) -> None:
        self.database = database
        self.tournament_id: int | None = None
        self.tournament_name = ""
        self.rounds: list[int] = []
        self.current_round: int | None = None
        self.pager = RoundPager([], ROUNDS_PER_PAGE)

    def select_tournament(self, tournament_id: int, name: str) -> None:
        """Open a tournament; the latest round becomes the current one."""
        self.tournament_id = tournament_id
        self.tournament_name = name
        self.rounds = self.database.rounds(tournament_id)
        self.current_round = self.rounds[-1] if self.rounds else None
        self.pager = RoundPager(self.rounds, ROUNDS_PER_PAGE)

    def select_round(self, round_number: int) -> None:
        if round_number not in self.rounds:
            raise ValueError(f"round {round_number} is not part of the tournament")
        self.current_round = round_number

    def round_label(self) -> str:
        if self.tournament_id is None:
            return NO_TOURNAMENT_LABEL
        if self.current_round is None:
            return ALL_ROUNDS_LABEL
        return f"Тур {self.current_round}"

    def match_lines(self) -> list[tuple[int, str]]:
        """Match ids with their display lines for the current round."""
        if self.tournament_id is None:
            return []
        matches = self.database.matches(self.tournament_id, self.current_round)
        return [(match.id, format_match_line(match)) for match in matches]

    def standings(self) -> list[tuple[StandingRow, Zone]]:
        if self.tournament_id is None:
            return []
        return [
            (row, standing_zone(row.position))
            for row in self.database.standings(self.tournament_id)
        ]

    def match_details(self, match_id: int) -> MatchDetails | None:
        """Statistics, lineups, events and history of a match, or None if it is unknown."""
        info = self.database.match_info(match_id)
        if info is None:
            return None
        db = self.database
        return MatchDetails(
            match_id=match_id,
            info=info,
            team1_id=db.team_id(info.team1),
            stats=db.match_stats(match_id, info.team1, info.team2),
            lineups=db.lineups(match_id, info.team1, info.team2),
            events=db.events(match_id),
            team1_recent=db.recent_matches(info.team1, info.date),
            team2_recent=db.recent_matches(info.team2, info.date),
            head_to_head=db.head_to_head(info.team1, info.team2, info.date),
        )