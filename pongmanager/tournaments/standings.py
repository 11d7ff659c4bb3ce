"""
Standings calculator.

recompute() is a pure fold over a group's completed fixtures:

- win  → 2 points, loss → 1 point (there is no draw)
- ranking: points, then set difference, then sets won, all descending
- remaining ties keep group-membership order (the sort is stable)

It is safe to re-run over the full fixture list after every single result;
pending fixtures and fixtures of other groups are ignored.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pongmanager.errors import NotFound
from pongmanager.tournaments.base import Fixture, Group, GroupStandings, StandingsRow

WIN_POINTS = 2
LOSS_POINTS = 1


def recompute(group: Group, fixtures: Iterable[Fixture]) -> GroupStandings:
    """Build the ranked table for group from scratch."""
    rows = {pid: StandingsRow(participant_id=pid) for pid in group.participant_ids}

    for fixture in fixtures:
        if fixture.group_name != group.name or not fixture.is_completed:
            continue
        home_sets = fixture.home_sets or 0
        away_sets = fixture.away_sets or 0
        # A side outside the group (hand-made fixture) is skipped, not an error.
        if fixture.home_id in rows:
            _credit(rows[fixture.home_id], home_sets, away_sets)
        if fixture.away_id in rows:
            _credit(rows[fixture.away_id], away_sets, home_sets)

    for row in rows.values():
        row.set_difference = row.sets_for - row.sets_against

    # dicts keep insertion order, so sorted() sees membership order
    table = sorted(rows.values(), key=_rank_key)
    return GroupStandings(group_name=group.name, table=tuple(table))


def recompute_group(
    groups: Iterable[Group], group_name: str, fixtures: Iterable[Fixture]
) -> GroupStandings:
    """Look a group up by name and recompute it; NotFound if absent."""
    for group in groups:
        if group.name == group_name:
            return recompute(group, fixtures)
    raise NotFound("group", group_name)


def initial_standings(groups: Iterable[Group]) -> list[GroupStandings]:
    """Zeroed tables in membership order, one per group."""
    return [recompute(group, ()) for group in groups]


def upsert_standings(
    all_standings: Sequence[GroupStandings], new: GroupStandings
) -> list[GroupStandings]:
    """Return all_standings with the entry for new.group_name replaced (or appended)."""
    result: list[GroupStandings] = []
    replaced = False
    for standings in all_standings:
        if standings.group_name == new.group_name:
            if not replaced:
                result.append(new)
                replaced = True
            continue
        result.append(standings)
    if not replaced:
        result.append(new)
    return result


def qualifiers(standings: GroupStandings, num_advancing: int) -> list[str]:
    """Participant ids of the top num_advancing rows."""
    if num_advancing < 1:
        return []
    return [row.participant_id for row in standings.table[:num_advancing]]


# ------------------------------------------------------------------ #
# Internal helpers                                                     #
# ------------------------------------------------------------------ #

def _credit(row: StandingsRow, won: int, conceded: int) -> None:
    row.played += 1
    row.sets_for += won
    row.sets_against += conceded
    if won > conceded:
        row.wins += 1
        row.points += WIN_POINTS
    else:
        row.losses += 1
        row.points += LOSS_POINTS


def _rank_key(row: StandingsRow) -> tuple[int, int, int]:
    return (-row.points, -row.set_difference, -row.sets_for)
