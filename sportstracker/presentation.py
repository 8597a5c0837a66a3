"""Formatting and paging helpers for displaying tracker data."""

from __future__ import annotations

from enum import Enum
from itertools import zip_longest
from typing import Iterable

from sportstracker.database import LineupEntry, MatchEvent, MatchSummary

UNPLAYED_SCORE = "? - ?"

EVENT_LABELS = {
    "goal": "Гол",
    "yellow_card": "ЖК",
    "red_card": "КК",
    "substitution": "Замена",
}


class Zone(Enum):
    """Colour zone of a place in the standings."""

    CHAMPIONS = "champions"
    QUALIFICATION = "qualification"
    RELEGATION = "relegation"
    NEUTRAL = "neutral"


_ZONE_COLORS = {
    Zone.CHAMPIONS: (220, 255, 220),
    Zone.QUALIFICATION: (220, 220, 255),
    Zone.RELEGATION: (255, 220, 220),
    Zone.NEUTRAL: (255, 255, 255),
}


def format_match_line(match: MatchSummary) -> str:
    """One line of the match list: date, home team, score, away team."""
    day = match.date.strftime("%d.%m.%Y") if match.date else ""
    score = UNPLAYED_SCORE if match.score in (None, "-") else match.score
    return f"{day}: {match.team1} {score} {match.team2}"


def standing_zone(position: int) -> Zone:
    if position <= 4:
        return Zone.CHAMPIONS
    if position <= 6:
        return Zone.QUALIFICATION
    if position >= 18:
        return Zone.RELEGATION
    return Zone.NEUTRAL


def zone_color(zone: Zone) -> tuple[int, int, int]:
    """Background colour of a zone as an RGB triple."""
    return _ZONE_COLORS[zone]


def event_label(event_type: str) -> str:
    return EVENT_LABELS.get(event_type, event_type)


def format_player(entry: LineupEntry) -> str:
    return f"{entry.number} {entry.name} ({entry.position})"


def lineup_rows(
    starters1: Iterable[LineupEntry], starters2: Iterable[LineupEntry]
) -> list[tuple[str | None, str | None]]:
    """Pair the players of two teams side by side, padding the shorter list with None."""
    return list(zip_longest(map(format_player, starters1), map(format_player, starters2)))


def event_team_name(event: MatchEvent, team1_id: int | None, team1: str, team2: str) -> str:
    """Name of the team an event belongs to; anything not the first team is the second."""
    if team1_id is not None and event.team_id == team1_id:
        return team1
    return team2


class RoundPager:
    """Splits a list of rounds into pages for selection."""

    def __init__(self, rounds: Iterable[int], per_page: int = 5) -> None:
        if per_page < 1:
            raise ValueError("per_page must be at least 1")
        self.rounds = list(rounds)
        self.per_page = per_page
        self.index = 0

    @property
    def needs_navigation(self) -> bool:
        return len(self.rounds) > self.per_page

    def page(self) -> list[int]:
        start = self.index * self.per_page
        return self.rounds[start : start + self.per_page]

    def has_previous(self) -> bool:
        return self.index > 0

    def has_next(self) -> bool:
        return (self.index + 1) * self.per_page < len(self.rounds)

    def previous_page(self) -> bool:
        """Step back one page; returns whether the page changed."""
        if not self.has_previous():
            return False
        self.index -= 1
        return True

    def next_page(self) -> bool:
        """Step forward one page; returns whether the page changed."""
        if not self.has_next():
            return False
        self.index += 1
        return True

    def reset(self) -> None:
        self.index = 0