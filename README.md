# sportstracker

A small desktop application for browsing sports results stored in a SQLite
database. Pick a sport and a tournament, step through its rounds, read the
league table, and open any match to see its statistics, lineups, timeline of
events, each team's recent form and the head-to-head history.

The interface labels are in Russian.

## Installation

```
pip install .
```

The window is built with Tkinter, which ships with most Python installations
(3.10 or later is required). No other libraries are needed.

## Running

```
sportstracker
```

By default the application opens the database at the path returned by
`sportstracker.database.default_database_path()`, that is `database/sports.db`
inside your home directory. Another file can be given with `--database`:

```
sportstracker --database path/to/sports.db
```

The directory holding the database file is created if it does not exist. If
the database cannot be opened, a required table is missing, or no window can
be opened, a message is printed to standard error and the command exits with
status 1.

## The database

The database must already contain these tables; if any is missing, opening it
raises `MissingTableError` (a subclass of `DatabaseError`), whose message names
the table:

| Table           | Columns read                                                                 |
|-----------------|------------------------------------------------------------------------------|
| `sports`        | `id`, `name`                                                                 |
| `tournaments`   | `id`, `name`, `sport_id`                                                     |
| `teams`         | `id`, `name`                                                                 |
| `matches`       | `id`, `tournament_id`, `round`, `date` (ISO `YYYY-MM-DD`), `team1_id`, `team2_id`, `score` |
| `standings`     | `tournament_id`, `team_id`, `position`, `points`, `games_played`, `wins`, `draws`, `losses`, `goals_for`, `goals_against` |
| `players`       | `id`, `name`                                                                 |
| `match_lineups` | `match_id`, `player_id`, `team_id`, `position`, `is_starting`, `jersey_number` |
| `match_events`  | `match_id`, `player_id`, `team_id`, `event_type`, `minute`, `description`    |
| `match_stats`   | `match_id`, `team_id`, `stat_name`, `stat_value`                             |

Event types `goal`, `yellow_card`, `red_card` and `substitution` are shown with
short labels; any other type is shown as stored. A match without a score (or
with the score `-`) is listed as `? - ?`.

## What you see

- **Tournament list** — sports sorted by name, each expanding into its
  tournaments.
- **Matches** — newest first; the latest round is selected by default. The
  round picker shows five rounds per page, with previous/next buttons when
  there are more.
- **Standings** — positions 1–4, 5–6 and 18 onwards are highlighted as
  separate zones.
- **Match overview** — side-by-side statistics, starting and substitute
  lineups, and the events ordered by minute.
- **History** — the last five matches of each team before the match date, and
  up to ten earlier meetings between the two teams.

## Using it from Python

The data layer and the session logic can be used without the window:

```python
from sportstracker.database import SportsDatabase, default_database_path
from sportstracker.controller import TrackerSession

with SportsDatabase(default_database_path()) as database:
    for sport in database.sports():
        print(sport)

    session = TrackerSession(database)
    session.select_tournament(1, "Premier League")
    print(session.round_label())
    for match_id, line in session.match_lines():
        print(match_id, line)
```

- `sportstracker.database` — `SportsDatabase` with queries such as `sports()`,
  `tournaments()`, `rounds()`, `matches()`, `standings()`, `match_info()`,
  `match_stats()`, `lineups()`, `events()`, `recent_matches()` and
  `head_to_head()`, returning small dataclasses.
- `sportstracker.controller` — `TrackerSession`, which remembers the selected
  tournament and round, and `match_details()`, which gathers everything shown
  about one match into a `MatchDetails`.
- `sportstracker.presentation` — formatting helpers such as
  `format_match_line`, `standing_zone`, `zone_color`, `event_label`,
  `lineup_rows` and the `RoundPager`.
- `sportstracker.gui` — the `SportsTrackerApp` window and the `main` entry
  point.

## What it does not do

The package only reads the database. It does not create the tables, and it
offers no way to enter or edit sports, teams, matches, results or standings;
the data has to be put into the database by other means.

## Tests

```
pip install ".[test]"
pytest
```