"""
Tournament value types shared by the partitioner, schedule generator and
standings calculator.

Everything here is plain data passed by value.  Groups and fixtures are
frozen; a fixture changes state only by producing a replacement
(see tournaments/results.py).  Standings tables are rebuilt from scratch on
every recomputation, never patched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pongmanager.config import MatchFormat, ParticipantType
from pongmanager.errors import InvalidParticipants

FixtureStatus = Literal["pending", "completed"]

# Group name carried by fixtures created outside any generated schedule.
AD_HOC_GROUP = "ad-hoc"

__all__ = [
    "AD_HOC_GROUP",
    "Fixture",
    "FixtureStatus",
    "Group",
    "GroupStandings",
    "MatchFormat",
    "Participant",
    "ParticipantType",
    "StandingsRow",
]


@dataclass(frozen=True)
class Participant:
    """A single entrant: an individual player or a two-person team."""

    id: str
    name: str


@dataclass(frozen=True)
class Group:
    """A fixed subset of participants playing a round-robin mini-league."""

    name: str                          # e.g. "Group A"
    participant_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(set(self.participant_ids)) != len(self.participant_ids):
            raise InvalidParticipants(f"Group {self.name!r} lists a participant more than once")

    @property
    def size(self) -> int:
        return len(self.participant_ids)

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self.participant_ids


@dataclass(frozen=True)
class Fixture:
    """A single scheduled contest between two participants."""

    fixture_id: str                    # e.g. "Group A-M3", "ad-hoc-1f2e3d4c"
    group_name: str                    # a Group.name or AD_HOC_GROUP
    home_id: str
    away_id: str
    home_sets: int | None = None       # None until completed
    away_sets: int | None = None
    status: FixtureStatus = "pending"

    def __post_init__(self) -> None:
        if self.home_id == self.away_id:
            raise InvalidParticipants(
                f"Fixture {self.fixture_id!r} pairs {self.home_id!r} with itself"
            )

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    @property
    def is_ad_hoc(self) -> bool:
        return self.group_name == AD_HOC_GROUP

    @property
    def winner_id(self) -> str | None:
        """Id of the side that won more sets; None if pending or level. A missing score counts as 0."""
        if not self.is_completed:
            return None
        home, away = self.home_sets or 0, self.away_sets or 0
        if home == away:
            return None
        return self.home_id if home > away else self.away_id

    def involves(self, participant_id: str) -> bool:
        return participant_id in (self.home_id, self.away_id)


@dataclass
class StandingsRow:
    """One participant's line in a group table, derived from completed fixtures."""

    participant_id: str
    played: int = 0
    wins: int = 0
    losses: int = 0
    sets_for: int = 0
    sets_against: int = 0
    set_difference: int = 0
    points: int = 0


@dataclass(frozen=True)
class GroupStandings:
    """The ranked table for one group.  Replaced wholesale on recomputation."""

    group_name: str
    table: tuple[StandingsRow, ...] = field(default_factory=tuple)

    def position_of(self, participant_id: str) -> int | None:
        """1-based table position, or None if the participant is not listed."""
        for pos, row in enumerate(self.table, 1):
            if row.participant_id == participant_id:
                return pos
        return None
