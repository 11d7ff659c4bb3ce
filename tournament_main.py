"""
Ping-Pong Manager — championship entry point.

Usage:
    uv run python tournament_main.py

Wires together:
    config → participant registry → championship →
    group draw → round-robin schedule → score entry loop → standings display
"""

from __future__ import annotations

import logging
import logging.handlers
import random
import sys
from pathlib import Path

from pongmanager.championship import Championship
from pongmanager.cli.display import (
    console,
    display_all_standings,
    display_championship_start,
    display_fixtures,
    display_groups,
    display_qualifiers,
)
from pongmanager.cli.prompts import prompt_score, select_pending_fixture
from pongmanager.config import Config, load_config
from pongmanager.errors import InvalidParticipants, InvalidResult
from pongmanager.registry import ParticipantRegistry
from pongmanager.serialization import save_snapshot

logger = logging.getLogger("pongmanager")


def _configure_logging(config: Config) -> None:
    log_file = config.log_file_path
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, config.logging.level, logging.INFO),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        handlers=[
            logging.StreamHandler(),                                   # console
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=2 * 1024 * 1024, backupCount=3,   # 2 MB × 3 files
                encoding="utf-8",
            ),
        ],
    )


def main() -> None:
    config_path = Path("config.yaml")
    try:
        config = load_config(config_path)
    except FileNotFoundError as exc:
        console.print(f"[red]Error:[/] {exc}")
        sys.exit(1)
    except ValueError as exc:
        console.print(f"[red]Config error:[/] {exc}")
        sys.exit(1)

    _configure_logging(config)

    # ── Build the championship ───────────────────────────────────────── #
    try:
        registry = ParticipantRegistry.from_config(config)
        championship = Championship.from_config(config, registry)
    except (ValueError, InvalidParticipants) as exc:
        console.print(f"[red]Config error:[/] {exc}")
        sys.exit(1)

    display_championship_start(championship)

    # ── Draw groups and schedule fixtures ────────────────────────────── #
    rng = random.Random(config.championship.seed)
    championship.generate_groups(rng=rng)
    display_groups(championship)

    championship.generate_fixtures()
    display_fixtures(championship)

    # ── Score entry loop ─────────────────────────────────────────────── #
    try:
        while (fixture := select_pending_fixture(championship)) is not None:
            home_sets, away_sets = prompt_score(championship, fixture)
            try:
                championship.record_result(fixture.fixture_id, home_sets, away_sets)
            except InvalidResult as exc:
                console.print(f"  [red]{exc}[/]")
                continue
            display_all_standings(championship)
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopping score entry…[/]")

    # ── Final tables ─────────────────────────────────────────────────── #
    display_fixtures(championship)
    display_all_standings(championship)
    display_qualifiers(championship)

    if config.championship.save_snapshot:
        path = save_snapshot(championship, config.snapshot_dir_path)
        logger.info("Snapshot written to %s", path)
        console.print(f"[dim]Snapshot: {path}[/]")


if __name__ == "__main__":
    main()
