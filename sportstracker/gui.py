"""Desktop window for browsing tournaments, matches and standings."""

from __future__ import annotations

import argparse
import sys
import tkinter as tk
from pathlib import Path
from tkinter import ttk
from typing import Iterable, Sequence

from sportstracker.controller import TrackerSession
from sportstracker.database import DatabaseError, HistoryMatch, SportsDatabase
from sportstracker.presentation import (
    Zone,
    event_label,
    event_team_name,
    lineup_rows,
    zone_color,
)

WINDOW_TITLE = "SportsTracker - Анализ спортивных результатов"
HISTORY_HEADINGS = ("Дата", "Команда 1", "Команда 2", "Счет")
STANDINGS_HEADINGS = ("Поз", "Команда", "О", "И", "В", "Н", "П", "ЗГ", "ПГ", "РГ")
STANDINGS_WIDTHS = (40, 300, 30, 30, 30, 30, 30, 30, 30, 30)
EVENT_HEADINGS = ("Тип", "Минута", "Игрок", "Описание", "Команда")


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _make_table(
    parent: tk.Misc,
    headings: Sequence[str],
    widths: Sequence[int] | None = None,
    show_headings: bool = True,
    height: int = 8,
) -> ttk.Treeview:
    columns = [f"c{i}" for i in range(len(headings))]
    tree = ttk.Treeview(
        parent,
        columns=columns,
        show="headings" if show_headings else "",
        height=height,
        selectmode="browse",
    )
    for i, (column, heading) in enumerate(zip(columns, headings)):
        tree.heading(column, text=heading)
        width = widths[i] if widths else 120
        anchor = "w" if i == 1 and len(headings) == len(STANDINGS_HEADINGS) else "center"
        tree.column(column, width=width, anchor=anchor, stretch=True)
    return tree


def _fill(tree: ttk.Treeview, rows: Iterable[Sequence[object]], tags: Sequence[str] = ()) -> None:
    tree.delete(*tree.get_children())
    for row in rows:
        tree.insert("", "end", values=["" if v is None else v for v in row], tags=tuple(tags))


def _history_rows(matches: Iterable[HistoryMatch]) -> list[tuple[str, str, str, str]]:
    return [(m.date, m.team1, m.team2, m.score) for m in matches]


class SportsTrackerApp:
    """Main window: sport and tournament tree, match list, statistics and standings."""

    def __init__(self, root: tk.Tk, database: SportsDatabase) -> None:
        self.root = root
        self.session = TrackerSession(database)
        self._nodes: dict[str, tuple[str, int]] = {}
        self._match_ids: list[int] = []
        self._popup: tk.Toplevel | None = None
        root.title(WINDOW_TITLE)
        root.geometry("1400x800")
        self._build()
        self._load_sports()

    # --- layout -----------------------------------------------------------

    def _build(self) -> None:
        container = ttk.Frame(self.root, padding=10)
        container.pack(fill="both", expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        self._selection_page = ttk.Frame(container, padding=15)
        self._selection_page.grid(row=0, column=0, sticky="nsew")
        self.sports_tree = ttk.Treeview(self._selection_page, show="tree", selectmode="browse")
        self.sports_tree.pack(fill="both", expand=True)
        self.sports_tree.bind("<<TreeviewOpen>>", self._on_expand)
        self.sports_tree.bind("<<TreeviewSelect>>", self._on_tree_select)

        self._tournament_page = ttk.Frame(container, padding=15)
        self._tournament_page.grid(row=0, column=0, sticky="nsew")
        self._tournament_page.rowconfigure(0, weight=1)
        self._tournament_page.columnconfigure(0, weight=1)
        self._tournament_page.columnconfigure(1, weight=1)

        left = ttk.Frame(self._tournament_page)
        left.grid(row=0, column=0, sticky="nsew", padx=(0, 20))
        left.rowconfigure(0, weight=1)
        left.columnconfigure(0, weight=1)
        self._build_matches_panel(left)
        self._build_stats_panel(left)
        self._build_standings_panel(self._tournament_page)

        self._selection_page.tkraise()

    def _build_matches_panel(self, parent: ttk.Frame) -> None:
        self._matches_panel = ttk.Frame(parent)
        self._matches_panel.grid(row=0, column=0, sticky="nsew")

        selector = ttk.Frame(self._matches_panel)
        selector.pack(fill="x", pady=(0, 10))
        ttk.Label(selector, text="Тур:").pack(side="left")
        self.round_button = ttk.Button(
            selector, text=self.session.round_label(), command=self._show_round_popup
        )
        self.round_button.pack(side="left", padx=5)

        self.matches_list = tk.Listbox(self._matches_panel, font=("TkDefaultFont", 12))
        self.matches_list.pack(fill="both", expand=True)
        self.matches_list.bind("<<ListboxSelect>>", self._on_match_selected)

        ttk.Button(
            self._matches_panel,
            text="Назад к турнирам",
            command=self._selection_page.tkraise,
        ).pack(anchor="e", pady=(10, 0))

    def _build_stats_panel(self, parent: ttk.Frame) -> None:
        self._stats_panel = ttk.Frame(parent)
        self._stats_panel.grid(row=0, column=0, sticky="nsew")

        self.match_title = ttk.Label(
            self._stats_panel, font=("TkDefaultFont", 16, "bold"), anchor="center"
        )
        self.match_title.pack(fill="x", pady=10)

        tabs = ttk.Notebook(self._stats_panel)
        tabs.pack(fill="both", expand=True)

        overview = ttk.Frame(tabs, padding=10)
        ttk.Label(overview, text="Основная статистика матча", font=("TkDefaultFont", 12, "bold")).pack(anchor="w")
        self.stats_table = _make_table(overview, ("", "", ""), (175, 250, 150), show_headings=False, height=6)
        self.stats_table.pack(fill="x")
        ttk.Label(overview, text="Составы команд", font=("TkDefaultFont", 12, "bold")).pack(anchor="w")
        self.lineups_table = _make_table(overview, ("", ""), (250, 250), show_headings=False)
        self.lineups_table.pack(fill="x")
        ttk.Label(overview, text="Ход матча", font=("TkDefaultFont", 12, "bold")).pack(anchor="w")
        self.events_table = _make_table(overview, EVENT_HEADINGS, height=6)
        self.events_table.pack(fill="both", expand=True)
        for table in (self.stats_table, self.lineups_table):
            table.tag_configure("header", font=("TkDefaultFont", 12, "bold"))
        tabs.add(overview, text="Обзор матча")

        history = ttk.Frame(tabs, padding=10)
        ttk.Label(history, text="Последние матчи команд", font=("TkDefaultFont", 12, "bold")).pack(anchor="w")
        recent = ttk.Frame(history)
        recent.pack(fill="both", expand=True)
        self.team1_recent = _make_table(recent, HISTORY_HEADINGS, height=5)
        self.team1_recent.pack(side="left", fill="both", expand=True, padx=(0, 15))
        self.team2_recent = _make_table(recent, HISTORY_HEADINGS, height=5)
        self.team2_recent.pack(side="left", fill="both", expand=True)
        ttk.Label(history, text="История очных встреч", font=("TkDefaultFont", 12, "bold")).pack(anchor="w")
        self.head_to_head = _make_table(history, HISTORY_HEADINGS, height=10)
        self.head_to_head.pack(fill="both", expand=True)
        tabs.add(history, text="История")

        ttk.Button(
            self._stats_panel,
            text="Назад к матчам",
            command=self._matches_panel.tkraise,
        ).pack(anchor="e", pady=(10, 0))

        self._matches_panel.tkraise()

    def _build_standings_panel(self, parent: ttk.Frame) -> None:
        panel = ttk.Frame(parent)
        panel.grid(row=0, column=1, sticky="nsew")
        ttk.Label(panel, text="Турнирная таблица", font=("TkDefaultFont", 14, "bold"), anchor="center").pack(fill="x", pady=(0, 10))
        self.standings_table = _make_table(panel, STANDINGS_HEADINGS, STANDINGS_WIDTHS, height=20)
        self.standings_table.pack(fill="both", expand=True)
        for zone in Zone:
            self.standings_table.tag_configure(zone.value, background=_hex(zone_color(zone)))

    # --- sports and tournaments ------------------------------------------

    def _load_sports(self) -> None:
        tree = self.sports_tree
        tree.delete(*tree.get_children())
        self._nodes.clear()
        for sport in self.session.database.sports():
            node = tree.insert("", "end", text=sport.name)
            self._nodes[node] = ("sport", sport.id)
            tree.insert(node, "end", text="")

    def _on_expand(self, _event: object = None) -> None:
        node = self.sports_tree.focus()
        kind = self._nodes.get(node)
        if kind is None or kind[0] != "sport":
            return
        children = self.sports_tree.get_children(node)
        if len(children) != 1 or self.sports_tree.item(children[0], "text"):
            return
        self.sports_tree.delete(children[0])
        try:
            tournaments = self.session.database.tournaments(kind[1])
        except DatabaseError as exc:
            print(f"Ошибка загрузки турниров: {exc}", file=sys.stderr)
            return
        for tournament in tournaments:
            child = self.sports_tree.insert(node, "end", text=tournament.name)
            self._nodes[child] = ("tournament", tournament.id)

    def _on_tree_select(self, _event: object = None) -> None:
        selection = self.sports_tree.selection()
        if not selection:
            return
        node = selection[0]
        kind = self._nodes.get(node)
        if kind is None or kind[0] != "tournament":
            return
        self._show_tournament(kind[1], self.sports_tree.item(node, "text"))

    def _show_tournament(self, tournament_id: int, name: str) -> None:
        self.session.select_tournament(tournament_id, name)
        self.round_button.configure(text=self.session.round_label())
        self._reload_matches()
        self._reload_standings()
        self._tournament_page.tkraise()
        self._matches_panel.tkraise()
        self.root.title(name)

    # --- matches and rounds ----------------------------------------------

    def _reload_matches(self) -> None:
        self.matches_list.delete(0, "end")
        lines = self.session.match_lines()
        self._match_ids = [match_id for match_id, _ in lines]
        for _, text in lines:
            self.matches_list.insert("end", text)

    def _reload_standings(self) -> None:
        self.standings_table.delete(*self.standings_table.get_children())
        for row, zone in self.session.standings():
            self.standings_table.insert(
                "",
                "end",
                values=(
                    row.position, row.team, row.points, row.games_played, row.wins,
                    row.draws, row.losses, row.goals_for, row.goals_against,
                    row.goal_difference,
                ),
                tags=(zone.value,),
            )

    def _show_round_popup(self) -> None:
        pager = self.session.pager
        if not pager.rounds:
            return
        if self._popup is None or not self._popup.winfo_exists():
            self._popup = tk.Toplevel(self.root)
            self._popup.transient(self.root)
            self._popup.resizable(False, False)
        popup = self._popup
        for child in popup.winfo_children():
            child.destroy()

        for round_number in pager.page():
            ttk.Button(
                popup,
                text=str(round_number),
                command=lambda n=round_number: self._select_round(n),
            ).pack(fill="x", padx=5, pady=2)

        if pager.needs_navigation:
            nav = ttk.Frame(popup)
            nav.pack(fill="x", padx=5, pady=5)
            prev_btn = ttk.Button(nav, text="<", width=3, command=self._previous_rounds)
            next_btn = ttk.Button(nav, text=">", width=3, command=self._next_rounds)
            prev_btn.pack(side="left")
            next_btn.pack(side="right")
            if not pager.has_previous():
                prev_btn.state(["disabled"])
            if not pager.has_next():
                next_btn.state(["disabled"])

        x = self.round_button.winfo_rootx()
        y = self.round_button.winfo_rooty() + self.round_button.winfo_height()
        popup.geometry(f"+{x}+{y}")
        popup.deiconify()
        popup.lift()

    def _previous_rounds(self) -> None:
        if self.session.pager.previous_page():
            self._show_round_popup()

    def _next_rounds(self) -> None:
        if self.session.pager.next_page():
            self._show_round_popup()

    def _select_round(self, round_number: int) -> None:
        if self._popup is not None:
            self._popup.withdraw()
        self.session.select_round(round_number)
        self.round_button.configure(text=self.session.round_label())
        self._reload_matches()

    # --- match details ---------------------------------------------------

    def _on_match_selected(self, _event: object = None) -> None:
        selection = self.matches_list.curselection()
        if not selection:
            return
        index = selection[0]
        self.match_title.configure(text=self.matches_list.get(index))
        tables = (
            self.stats_table, self.lineups_table, self.events_table,
            self.team1_recent, self.team2_recent, self.head_to_head,
        )
        for table in tables:
            table.delete(*table.get_children())
        try:
            details = self.session.match_details(self._match_ids[index])
        except DatabaseError as exc:
            print(f"Ошибка загрузки данных матча: {exc}", file=sys.stderr)
            details = None
        if details is not None:
            info = details.info
            self.stats_table.insert("", "end", values=(info.team1, "", info.team2), tags=("header",))
            for line in details.stats:
                self.stats_table.insert("", "end", values=(line.team1_value, line.name, line.team2_value))

            lineups = details.lineups
            self.lineups_table.insert("", "end", values=("Основной состав", ""), tags=("header",))
            for left, right in lineup_rows(lineups.team1_starters, lineups.team2_starters):
                self.lineups_table.insert("", "end", values=(left or "", right or ""))
            self.lineups_table.insert("", "end", values=("Запасной состав", ""), tags=("header",))
            for left, right in lineup_rows(lineups.team1_substitutes, lineups.team2_substitutes):
                self.lineups_table.insert("", "end", values=(left or "", right or ""))

            _fill(
                self.events_table,
                (
                    (
                        event_label(event.event_type),
                        event.minute,
                        "-" if event.player is None else event.player,
                        event.description,
                        event_team_name(event, details.team1_id, info.team1, info.team2),
                    )
                    for event in details.events
                ),
            )
            _fill(self.team1_recent, _history_rows(details.team1_recent))
            _fill(self.team2_recent, _history_rows(details.team2_recent))
            _fill(self.head_to_head, _history_rows(details.head_to_head))
        self._stats_panel.tkraise()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the database and run the tracker window."""
    parser = argparse.ArgumentParser(
        prog="sportstracker", description="Browse sports results stored in SQLite."
    )
    parser.add_argument(
        "--database",
        type=Path,
        default=None,
        help="path of the database (default: ~/database/sports.db)",
    )
    args = parser.parse_args(argv)

    try:
        database = SportsDatabase(args.database)
    except DatabaseError as exc:
        print(f"Не удалось подключиться к базе данных: {exc}", file=sys.stderr)
        return 1

    with database:
        try:
            root = tk.Tk()
        except tk.TclError as exc:
            print(f"Не удалось открыть окно: {exc}", file=sys.stderr)
            return 1
        SportsTrackerApp(root, database)
        root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())