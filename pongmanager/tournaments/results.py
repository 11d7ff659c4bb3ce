"""
Recording and correcting fixture results.

A fixture goes pending → completed exactly once per completion event.
Correcting a score means reopening it (completed → pending) and recording
again; the caller then re-runs the standings recomputation for that group.

Level set scores are rejected here, so every completed fixture recorded
through this module has a winner.
"""

from __future__ import annotations

from dataclasses import replace

from pongmanager.errors import InvalidResult
from pongmanager.tournaments.base import Fixture


def record_result(fixture: Fixture, home_sets: int, away_sets: int) -> Fixture:
    """
    Return a completed copy of fixture with both scores set.

    Raises:
        InvalidResult: fixture is already completed, a score is negative,
            or both sides won the same number of sets.
    """
    if fixture.is_completed:
        raise InvalidResult(
            f"Fixture {fixture.fixture_id!r} is already completed; reopen it to correct the score"
        )
    if home_sets < 0 or away_sets < 0:
        raise InvalidResult(f"Set counts cannot be negative: {home_sets}-{away_sets}")
    if home_sets == away_sets:
        raise InvalidResult(
            f"Fixture {fixture.fixture_id!r} needs a winner; got a level score {home_sets}-{away_sets}"
        )
    return replace(fixture, home_sets=home_sets, away_sets=away_sets, status="completed")


def reopen_fixture(fixture: Fixture) -> Fixture:
    """Return a pending copy of a completed fixture with its scores cleared."""
    if not fixture.is_completed:
        raise InvalidResult(f"Fixture {fixture.fixture_id!r} has no result to reopen")
    return replace(fixture, home_sets=None, away_sets=None, status="pending")


def validate_score(home_sets: int, away_sets: int, sets_per_match: int) -> None:
    """
    Check a score against a best-of-N match.

    The winner must have taken exactly N // 2 + 1 sets and the loser fewer.
    """
    needed = sets_per_match // 2 + 1
    winner, loser = max(home_sets, away_sets), min(home_sets, away_sets)
    if winner != needed or loser >= needed or loser < 0:
        raise InvalidResult(
            f"{home_sets}-{away_sets} is not a valid best-of-{sets_per_match} score "
            f"(the winner takes exactly {needed} sets)"
        )
