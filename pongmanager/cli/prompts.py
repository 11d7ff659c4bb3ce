"""
Interactive score entry.

The user picks a pending fixture by number and types the score as "3-1".
Pressing Enter with no input ends the session.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from pongmanager.championship import Championship
from pongmanager.errors import InvalidResult
from pongmanager.tournaments import Fixture

console = Console(legacy_windows=False)

_SCORE_RE = re.compile(r"^\s*(\d+)\s*[-:x]\s*(\d+)\s*$")


def parse_score(raw: str) -> tuple[int, int]:
    """Parse "3-1", "3:1" or "3 x 1" into (home_sets, away_sets)."""
    match = _SCORE_RE.match(raw)
    if not match:
        raise InvalidResult(f"Could not read a score from {raw!r}; use the form 3-1")
    return int(match.group(1)), int(match.group(2))


def select_pending_fixture(championship: Championship) -> Fixture | None:
    """
    List pending fixtures and let the user pick one.
    Returns None when the user is done or nothing is left to play.
    """
    pending = championship.pending_fixtures()
    if not pending:
        return None

    table = Table(show_header=True, header_style="bold", border_style="dim")
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Fixture", style="dim")
    table.add_column("Home", min_width=20)
    table.add_column("Away", min_width=20)
    for i, fixture in enumerate(pending, 1):
        table.add_row(
            str(i),
            fixture.fixture_id,
            championship.participant_name(fixture.home_id),
            championship.participant_name(fixture.away_id),
        )
    console.print()
    console.print(table)

    choices = [str(i) for i in range(1, len(pending) + 1)]
    while True:
        raw = Prompt.ask("  Record result for fixture # (or Enter to finish)", default="", show_default=False)
        if raw.strip() == "":
            return None
        if raw.strip() not in choices:
            console.print(f"  [red]Invalid choice. Enter a number between 1 and {len(pending)}.[/]")
            continue
        return pending[int(raw) - 1]


def prompt_score(championship: Championship, fixture: Fixture) -> tuple[int, int]:
    home = championship.participant_name(fixture.home_id)
    away = championship.participant_name(fixture.away_id)
    while True:
        raw = Prompt.ask(f"  Sets [bold]{home}[/] - [bold]{away}[/]")
        try:
            return parse_score(raw)
        except InvalidResult as exc:
            console.print(f"  [red]{exc}[/]")
