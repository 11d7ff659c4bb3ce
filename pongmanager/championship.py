"""
Championship — the mutable store around the pure engine.

Holds one championship's participants, config, groups, fixtures and
standings, and calls the engine on each state transition:

    generate_groups()   → partition() + zeroed tables
    generate_fixtures() → generate_fixtures() per group
    record_result()     → record_result() + recompute() for that group only

Writes for a single championship must be serialised by the caller; this
class does no locking.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

from pongmanager.config import Config, ParticipantType, TournamentConfig
from pongmanager.errors import ChampionshipStateError, InvalidConfiguration, InvalidParticipants, NotFound
from pongmanager.registry import ParticipantRegistry
from pongmanager.tournaments import (
    Fixture,
    Group,
    GroupStandings,
    Participant,
    create_ad_hoc_fixture,
    fixtures_exist,
    generate_fixtures,
    initial_standings,
    partition,
    qualifiers,
    recompute_group,
    record_result,
    reopen_fixture,
    upsert_standings,
    validate_score,
)

logger = logging.getLogger(__name__)


@dataclass
class Championship:
    """One championship and everything generated for it so far."""

    name: str
    participants: list[Participant]
    config: TournamentConfig = field(default_factory=TournamentConfig)
    participant_type: ParticipantType = "player"
    year: int | None = None
    strict_scores: bool = False
    groups: list[Group] = field(default_factory=list)
    fixtures: list[Fixture] = field(default_factory=list)
    standings: list[GroupStandings] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvalidConfiguration("Championship name must not be blank")
        if len(self.participants) < 2:
            raise InvalidConfiguration(
                f"Championship {self.name!r} needs at least 2 participants"
            )
        self.config.validate()
        self._by_id = {p.id: p for p in self.participants}

    @classmethod
    def from_config(cls, config: Config, registry: ParticipantRegistry | None = None) -> Championship:
        registry = registry or ParticipantRegistry.from_config(config)
        champ = config.championship
        participants = registry.participants(champ.participant_type)
        if champ.participant_ids is not None:
            by_id = {p.id: p for p in participants}
            unknown = [pid for pid in champ.participant_ids if pid not in by_id]
            if unknown:
                raise InvalidParticipants(
                    f"Unknown {champ.participant_type} id(s) in championship.participant_ids: {unknown}"
                )
            participants = [by_id[pid] for pid in champ.participant_ids]
        return cls(
            name=champ.name,
            participants=participants,
            config=config.tournament,
            participant_type=champ.participant_type,
            year=champ.year,
            strict_scores=champ.strict_scores,
        )

    # ------------------------------------------------------------------ #
    # Queries                                                              #
    # ------------------------------------------------------------------ #

    @property
    def groups_generated(self) -> bool:
        return bool(self.groups)

    @property
    def fixtures_generated(self) -> bool:
        return any(fixtures_exist(g.name, self.fixtures) for g in self.groups)

    def participant_name(self, participant_id: str) -> str:
        participant = self._by_id.get(participant_id)
        return participant.name if participant else "?"

    def fixture(self, fixture_id: str) -> Fixture:
        for fixture in self.fixtures:
            if fixture.fixture_id == fixture_id:
                return fixture
        raise NotFound("fixture", fixture_id)

    def standings_for(self, group_name: str) -> GroupStandings:
        for standings in self.standings:
            if standings.group_name == group_name:
                return standings
        raise NotFound("standings", group_name)

    def pending_fixtures(self) -> list[Fixture]:
        return [f for f in self.fixtures if not f.is_completed]

    def qualifiers(self) -> dict[str, list[str]]:
        """Top config.num_advancing participant ids per group."""
        return {
            s.group_name: qualifiers(s, self.config.num_advancing)
            for s in self.standings
        }

    # ------------------------------------------------------------------ #
    # Transitions                                                          #
    # ------------------------------------------------------------------ #

    def update_config(self, config: TournamentConfig) -> None:
        config.validate()
        if self.groups_generated:
            logger.warning(
                "Config for %r changed after groups were drawn; existing groups and "
                "fixtures are kept as they are",
                self.name,
            )
        self.config = config

    def generate_groups(self, rng: random.Random | None = None) -> list[Group]:
        if self.groups_generated:
            raise ChampionshipStateError(f"Groups for {self.name!r} have already been drawn")

        self.groups = partition(self.participants, self.config.num_groups, rng=rng)
        self.standings = initial_standings(self.groups)
        logger.info(
            "Drew %d group(s) for %r: %s",
            len(self.groups),
            self.name,
            ", ".join(f"{g.name} ({g.size})" for g in self.groups),
        )
        return self.groups

    def generate_fixtures(self) -> list[Fixture]:
        if not self.groups_generated:
            raise ChampionshipStateError(f"Draw the groups for {self.name!r} before scheduling")
        already = [g.name for g in self.groups if fixtures_exist(g.name, self.fixtures)]
        if already:
            raise ChampionshipStateError(
                f"Fixtures already exist for {', '.join(already)}; clear them before regenerating"
            )

        created: list[Fixture] = []
        for group in self.groups:
            created.extend(generate_fixtures(group, self.config.match_format))
        self.fixtures.extend(created)
        logger.info(
            "Scheduled %d %s fixture(s) for %r",
            len(created),
            self.config.match_format,
            self.name,
        )
        return created

    def add_ad_hoc_fixture(self, home_id: str, away_id: str) -> Fixture:
        taken = {f.fixture_id for f in self.fixtures}
        n = sum(1 for f in self.fixtures if f.is_ad_hoc) + 1
        while f"ad-hoc-{n}" in taken:
            n += 1
        fixture = create_ad_hoc_fixture(
            home_id, away_id, known_ids=self._by_id, fixture_id=f"ad-hoc-{n}"
        )
        self.fixtures.append(fixture)
        logger.info(
            "Added ad-hoc fixture %s: %s vs %s",
            fixture.fixture_id,
            self.participant_name(home_id),
            self.participant_name(away_id),
        )
        return fixture

    def record_result(self, fixture_id: str, home_sets: int, away_sets: int) -> Fixture:
        fixture = self.fixture(fixture_id)
        if self.strict_scores:
            validate_score(home_sets, away_sets, self.config.sets_per_match)
        completed = record_result(fixture, home_sets, away_sets)
        self._replace_fixture(completed)
        logger.info(
            "Result %s: %s %d-%d %s",
            fixture_id,
            self.participant_name(completed.home_id),
            home_sets,
            away_sets,
            self.participant_name(completed.away_id),
        )
        self._refresh_standings(completed)
        return completed

    def reopen_fixture(self, fixture_id: str) -> Fixture:
        reopened = reopen_fixture(self.fixture(fixture_id))
        self._replace_fixture(reopened)
        logger.info("Reopened fixture %s", fixture_id)
        self._refresh_standings(reopened)
        return reopened

    # ------------------------------------------------------------------ #
    # Internal helpers                                                     #
    # ------------------------------------------------------------------ #

    def _replace_fixture(self, updated: Fixture) -> None:
        self.fixtures = [
            updated if f.fixture_id == updated.fixture_id else f for f in self.fixtures
        ]

    def _refresh_standings(self, fixture: Fixture) -> None:
        if fixture.is_ad_hoc:
            logger.debug("Fixture %s is ad-hoc; no table to update", fixture.fixture_id)
            return
        table = recompute_group(self.groups, fixture.group_name, self.fixtures)
        self.standings = upsert_standings(self.standings, table)
        logger.debug("Recomputed standings for %s", fixture.group_name)


def participant_names(championship: Championship, ids: Sequence[str]) -> list[str]:
    return [championship.participant_name(pid) for pid in ids]
