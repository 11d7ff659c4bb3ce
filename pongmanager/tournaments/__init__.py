"""
Tournament scheduling & standings engine.

Pure functions over the value types in tournaments/base.py:

    partition()          participants → groups
    generate_fixtures()  group → round-robin schedule
    record_result()      pending fixture → completed fixture
    recompute()          group + fixtures → ranked table

Nothing in this package performs I/O, logs, or holds state between calls;
the championship layer (pongmanager/championship.py) owns the mutable store.
"""

from __future__ import annotations

from pongmanager.tournaments.base import (
    AD_HOC_GROUP,
    Fixture,
    FixtureStatus,
    Group,
    GroupStandings,
    MatchFormat,
    Participant,
    StandingsRow,
)
from pongmanager.tournaments.groups import group_label, partition
from pongmanager.tournaments.results import record_result, reopen_fixture, validate_score
from pongmanager.tournaments.round_robin import (
    create_ad_hoc_fixture,
    fixtures_exist,
    generate_all_fixtures,
    generate_fixtures,
)
from pongmanager.tournaments.standings import (
    initial_standings,
    qualifiers,
    recompute,
    recompute_group,
    upsert_standings,
)

__all__ = [
    # Base types
    "AD_HOC_GROUP",
    "Fixture",
    "FixtureStatus",
    "Group",
    "GroupStandings",
    "MatchFormat",
    "Participant",
    "StandingsRow",
    # Group partitioner
    "group_label",
    "partition",
    # Schedule generator
    "create_ad_hoc_fixture",
    "fixtures_exist",
    "generate_all_fixtures",
    "generate_fixtures",
    # Results
    "record_result",
    "reopen_fixture",
    "validate_score",
    # Standings
    "initial_standings",
    "qualifiers",
    "recompute",
    "recompute_group",
    "upsert_standings",
]
