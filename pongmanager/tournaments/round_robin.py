"""
Round-robin schedule generator.

For a group in membership order p1..pn, every pair (pi, pj) with i < j is
emitted once with pi at home.  Under "home_and_away" the return fixture
(pj at home) follows immediately after.

Generation is not idempotent: calling it twice for the same group yields a
duplicate schedule.  Callers consult fixtures_exist() first.
"""

from __future__ import annotations

import uuid
from itertools import combinations
from typing import Collection, Iterable

from pongmanager.config import MatchFormat
from pongmanager.errors import InvalidConfiguration, InvalidParticipants
from pongmanager.tournaments.base import AD_HOC_GROUP, Fixture, Group


def generate_fixtures(group: Group, match_format: MatchFormat = "single") -> list[Fixture]:
    """Return the pending fixtures for one group, C(n,2) or 2·C(n,2) of them."""
    if match_format not in ("single", "home_and_away"):
        raise InvalidConfiguration(f"Unknown match format: {match_format!r}")

    pairings: list[tuple[str, str]] = []
    for home_id, away_id in combinations(group.participant_ids, 2):
        pairings.append((home_id, away_id))
        if match_format == "home_and_away":
            pairings.append((away_id, home_id))

    return [
        Fixture(
            fixture_id=f"{group.name}-M{n}",
            group_name=group.name,
            home_id=home_id,
            away_id=away_id,
        )
        for n, (home_id, away_id) in enumerate(pairings, 1)
    ]


def generate_all_fixtures(
    groups: Iterable[Group], match_format: MatchFormat = "single"
) -> list[Fixture]:
    """Schedules for every group, concatenated in group order."""
    fixtures: list[Fixture] = []
    for group in groups:
        fixtures.extend(generate_fixtures(group, match_format))
    return fixtures


def create_ad_hoc_fixture(
    home_id: str,
    away_id: str,
    known_ids: Collection[str] | None = None,
    group_name: str = AD_HOC_GROUP,
    fixture_id: str | None = None,
) -> Fixture:
    """
    Create a single pending fixture outside any generated schedule.

    Raises:
        InvalidParticipants: both sides are the same participant, or
            known_ids is given and either side is not in it.
    """
    if home_id == away_id:
        raise InvalidParticipants("Select two different participants")
    if known_ids is not None:
        unknown = [pid for pid in (home_id, away_id) if pid not in known_ids]
        if unknown:
            raise InvalidParticipants(f"Unknown participant id(s): {', '.join(unknown)}")

    return Fixture(
        fixture_id=fixture_id or f"{AD_HOC_GROUP}-{uuid.uuid4().hex[:8]}",
        group_name=group_name,
        home_id=home_id,
        away_id=away_id,
    )


def fixtures_exist(group_name: str, fixtures: Iterable[Fixture]) -> bool:
    """True if any fixture already belongs to group_name."""
    return any(f.group_name == group_name for f in fixtures)
