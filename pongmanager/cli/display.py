"""
Rich-based CLI output for a championship: groups, fixtures and standings.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pongmanager.championship import Championship, participant_names
from pongmanager.tournaments import Fixture, GroupStandings

console = Console(legacy_windows=False)


# --------------------------------------------------------------------------- #
# Display functions                                                            #
# --------------------------------------------------------------------------- #

def display_championship_start(championship: Championship) -> None:
    names = "  •  ".join(p.name for p in championship.participants)
    kind = "players" if championship.participant_type == "player" else "teams"
    year = f" {championship.year}" if championship.year else ""
    cfg = championship.config
    console.print()
    console.print(
        Panel(
            f"[bold]{championship.name}{year}[/]\n\n"
            f"[dim]{len(championship.participants)} {kind}:[/]\n{names}\n\n"
            f"[dim]Groups: {cfg.num_groups}  •  Advancing: {cfg.num_advancing}  •  "
            f"{cfg.match_format.replace('_', ' ')}  •  best of {cfg.sets_per_match}[/]",
            title="[bold green] Ping-Pong Manager [/]",
            border_style="green",
            expand=False,
        )
    )


def display_groups(championship: Championship) -> None:
    for group in championship.groups:
        table = Table(title=group.name, show_header=False, border_style="dim")
        table.add_column("#", style="dim", width=3, justify="right")
        table.add_column("Name", min_width=20)
        for i, pid in enumerate(group.participant_ids, 1):
            table.add_row(str(i), championship.participant_name(pid))
        console.print()
        console.print(table)


def display_fixtures(championship: Championship, fixtures: list[Fixture] | None = None) -> None:
    fixtures = championship.fixtures if fixtures is None else fixtures
    if not fixtures:
        console.print("[dim]No fixtures scheduled.[/]")
        return

    table = Table(show_header=True, header_style="bold", border_style="dim", show_lines=False)
    table.add_column("Fixture", style="dim", min_width=10)
    table.add_column("Home", min_width=20)
    table.add_column("", width=7, justify="center")
    table.add_column("Away", min_width=20)

    for fixture in sorted(fixtures, key=lambda f: f.group_name):
        home = championship.participant_name(fixture.home_id)
        away = championship.participant_name(fixture.away_id)
        if fixture.is_completed:
            score = f"{fixture.home_sets} - {fixture.away_sets}"
            if fixture.winner_id == fixture.home_id:
                home = f"[bold green]{home}[/]"
            elif fixture.winner_id == fixture.away_id:
                away = f"[bold green]{away}[/]"
        else:
            score = "[dim]vs[/]"
        table.add_row(fixture.fixture_id, home, score, away)

    console.print()
    console.print(table)


def display_standings(championship: Championship, standings: GroupStandings) -> None:
    table = Table(
        title=standings.group_name,
        show_header=True,
        header_style="bold",
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Name", min_width=20)
    table.add_column("P", justify="center", width=4)
    table.add_column("W", justify="center", width=4)
    table.add_column("L", justify="center", width=4)
    table.add_column("SF", justify="center", width=4)
    table.add_column("SA", justify="center", width=4)
    table.add_column("SD", justify="right", width=4)
    table.add_column("Pts", justify="right", width=5)

    advancing = championship.config.num_advancing
    for i, row in enumerate(standings.table, 1):
        table.add_row(
            str(i),
            championship.participant_name(row.participant_id),
            str(row.played),
            str(row.wins),
            str(row.losses),
            str(row.sets_for),
            str(row.sets_against),
            f"{row.set_difference:+d}",
            str(row.points),
            style="bold" if i <= advancing else "",
        )

    console.print()
    console.print(table)


def display_all_standings(championship: Championship) -> None:
    for standings in championship.standings:
        display_standings(championship, standings)


def display_qualifiers(championship: Championship) -> None:
    lines = [
        f"[bold]{group_name}[/]: {', '.join(participant_names(championship, ids)) or '—'}"
        for group_name, ids in championship.qualifiers().items()
    ]
    console.print()
    console.print(
        Panel(
            "\n".join(lines) or "[dim]No groups drawn.[/]",
            title="[bold green] Advancing [/]",
            border_style="yellow",
            expand=False,
        )
    )
    console.print()
