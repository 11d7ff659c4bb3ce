"""
Tests for Championship — the mutable store that drives the engine through a
full group stage: draw, schedule, results, corrections and ad-hoc fixtures.
"""

from __future__ import annotations

import random
import unittest

from pongmanager.championship import Championship
from pongmanager.config import ChampionshipConfig, Config, ParticipantEntry, TeamEntry, TournamentConfig
from pongmanager.errors import (
    ChampionshipStateError,
    InvalidConfiguration,
    InvalidParticipants,
    InvalidResult,
    NotFound,
)
from pongmanager.tournaments import Participant

NAMES = ["Ana", "Bruno", "Carla", "Diego", "Elisa", "Fabio", "Gil"]


def make_championship(n: int = 6, **config_kwargs) -> Championship:
    participants = [Participant(id=f"p{i}", name=NAMES[i - 1]) for i in range(1, n + 1)]
    return Championship(
        name="Club Cup",
        participants=participants,
        config=TournamentConfig(**config_kwargs),
    )


class CreationTests(unittest.TestCase):
    def test_needs_two_participants(self) -> None:
        with self.assertRaises(InvalidConfiguration):
            Championship(name="Solo", participants=[Participant("p1", "Ana")])

    def test_invalid_config_rejected(self) -> None:
        with self.assertRaises(InvalidConfiguration):
            make_championship(sets_per_match=2)

    def test_from_config_for_teams(self) -> None:
        config = Config(
            championship=ChampionshipConfig(name="Doubles", year=2026, participant_type="team"),
            tournament=TournamentConfig(num_groups=1),
            players=[ParticipantEntry(f"p{i}", NAMES[i - 1]) for i in range(1, 5)],
            teams=[TeamEntry("t1", "Top Spin", ["p1", "p2"]), TeamEntry("t2", "Net Cord", ["p3", "p4"])],
        )
        champ = Championship.from_config(config)
        self.assertEqual(champ.participant_type, "team")
        self.assertEqual(champ.year, 2026)
        self.assertEqual([p.name for p in champ.participants], ["Top Spin", "Net Cord"])

    def test_blank_name_rejected(self) -> None:
        participants = [Participant("p1", "Ana"), Participant("p2", "Bruno")]
        with self.assertRaises(InvalidConfiguration):
            Championship(name="   ", participants=participants)

    def test_from_config_enrols_listed_subset_in_order(self) -> None:
        config = Config(
            championship=ChampionshipConfig(name="Club Cup", participant_ids=["p4", "p1", "p3"]),
            tournament=TournamentConfig(),
            players=[ParticipantEntry(f"p{i}", NAMES[i - 1]) for i in range(1, 6)],
        )
        champ = Championship.from_config(config)
        self.assertEqual([p.id for p in champ.participants], ["p4", "p1", "p3"])
        self.assertEqual(champ.participant_name("p2"), "?")

    def test_from_config_rejects_unknown_listed_id(self) -> None:
        config = Config(
            championship=ChampionshipConfig(name="Club Cup", participant_ids=["p1", "p9"]),
            tournament=TournamentConfig(),
            players=[ParticipantEntry(f"p{i}", NAMES[i - 1]) for i in range(1, 4)],
        )
        with self.assertRaises(InvalidParticipants):
            Championship.from_config(config)


class GenerationTests(unittest.TestCase):
    def test_generate_groups_seeds_empty_tables(self) -> None:
        champ = make_championship(6, num_groups=2)
        groups = champ.generate_groups(rng=random.Random(1))
        self.assertEqual([g.size for g in groups], [3, 3])
        self.assertEqual([s.group_name for s in champ.standings], ["Group A", "Group B"])
        self.assertTrue(all(r.played == 0 for s in champ.standings for r in s.table))

    def test_groups_drawn_only_once(self) -> None:
        champ = make_championship()
        champ.generate_groups(rng=random.Random(1))
        with self.assertRaises(ChampionshipStateError):
            champ.generate_groups()

    def test_fixtures_need_groups(self) -> None:
        with self.assertRaises(ChampionshipStateError):
            make_championship().generate_fixtures()

    def test_fixtures_generated_once(self) -> None:
        champ = make_championship(6, num_groups=2, match_format="home_and_away")
        champ.generate_groups(rng=random.Random(5))
        created = champ.generate_fixtures()
        self.assertEqual(len(created), 2 * 3 * 2)
        self.assertTrue(champ.fixtures_generated)
        with self.assertRaises(ChampionshipStateError):
            champ.generate_fixtures()
        self.assertEqual(len(champ.fixtures), 12)

    def test_generation_is_logged(self) -> None:
        champ = make_championship(4, num_groups=2)
        with self.assertLogs("pongmanager.championship", level="INFO") as logs:
            champ.generate_groups(rng=random.Random(3))
            champ.generate_fixtures()
        self.assertIn("Drew 2 group(s)", logs.output[0])
        self.assertIn("Scheduled 2 single fixture(s)", logs.output[1])


class ResultTests(unittest.TestCase):
    def setUp(self) -> None:
        self.champ = make_championship(6, num_groups=2)
        self.champ.generate_groups(rng=random.Random(11))
        self.champ.generate_fixtures()
        self.group_a, self.group_b = self.champ.groups

    def _first_fixture(self, group_name: str):
        return next(f for f in self.champ.fixtures if f.group_name == group_name)

    def test_record_updates_only_its_group(self) -> None:
        table_b_before = self.champ.standings_for("Group B")
        fixture = self._first_fixture("Group A")
        self.champ.record_result(fixture.fixture_id, 3, 1)

        table_a = self.champ.standings_for("Group A")
        self.assertEqual(table_a.table[0].participant_id, fixture.home_id)
        self.assertEqual(table_a.table[0].points, 2)
        self.assertIs(self.champ.standings_for("Group B"), table_b_before)
        self.assertEqual(self.champ.fixture(fixture.fixture_id).status, "completed")
        self.assertEqual(len(self.champ.standings), 2)

    def test_unknown_fixture(self) -> None:
        with self.assertRaises(NotFound):
            self.champ.record_result("Group Q-M1", 3, 0)

    def test_level_score_rejected_and_nothing_changes(self) -> None:
        fixture = self._first_fixture("Group A")
        with self.assertRaises(InvalidResult):
            self.champ.record_result(fixture.fixture_id, 1, 1)
        self.assertEqual(self.champ.fixture(fixture.fixture_id).status, "pending")

    def test_strict_scores(self) -> None:
        self.champ.strict_scores = True
        fixture = self._first_fixture("Group A")
        with self.assertRaises(InvalidResult):
            self.champ.record_result(fixture.fixture_id, 3, 1)   # best of 3 → 2 sets wins
        self.champ.record_result(fixture.fixture_id, 2, 1)

    def test_reopen_and_correct(self) -> None:
        fixture = self._first_fixture("Group B")
        self.champ.record_result(fixture.fixture_id, 3, 0)
        self.champ.reopen_fixture(fixture.fixture_id)
        self.assertTrue(all(r.played == 0 for r in self.champ.standings_for("Group B").table))

        self.champ.record_result(fixture.fixture_id, 0, 3)
        leader = self.champ.standings_for("Group B").table[0]
        self.assertEqual(leader.participant_id, fixture.away_id)

    def test_full_group_stage_and_qualifiers(self) -> None:
        for fixture in list(self.champ.fixtures):
            self.champ.record_result(fixture.fixture_id, 3, 0)   # home side always wins
        self.assertEqual(self.champ.pending_fixtures(), [])

        qualifiers = self.champ.qualifiers()
        self.assertEqual(set(qualifiers), {"Group A", "Group B"})
        for group in self.champ.groups:
            # membership order decides home sides, so the first member wins both
            self.assertEqual(qualifiers[group.name], list(group.participant_ids[:2]))
            table = self.champ.standings_for(group.name).table
            self.assertEqual([r.points for r in table], [4, 3, 2])


class AdHocTests(unittest.TestCase):
    def setUp(self) -> None:
        self.champ = make_championship(4, num_groups=1)
        self.champ.generate_groups(rng=random.Random(2))

    def test_add_and_record_ad_hoc(self) -> None:
        fixture = self.champ.add_ad_hoc_fixture("p1", "p2")
        self.assertEqual(fixture.fixture_id, "ad-hoc-1")
        before = self.champ.standings
        self.champ.record_result(fixture.fixture_id, 3, 2)
        self.assertEqual(self.champ.standings, before)

    def test_ad_hoc_ids_increase(self) -> None:
        self.champ.add_ad_hoc_fixture("p1", "p2")
        second = self.champ.add_ad_hoc_fixture("p3", "p4")
        self.assertEqual(second.fixture_id, "ad-hoc-2")

    def test_ad_hoc_does_not_block_schedule(self) -> None:
        self.champ.add_ad_hoc_fixture("p1", "p2")
        self.assertFalse(self.champ.fixtures_generated)
        self.assertEqual(len(self.champ.generate_fixtures()), 6)

    def test_ad_hoc_validation(self) -> None:
        with self.assertRaises(InvalidParticipants):
            self.champ.add_ad_hoc_fixture("p1", "p1")
        with self.assertRaises(InvalidParticipants):
            self.champ.add_ad_hoc_fixture("p1", "stranger")


class ConfigUpdateTests(unittest.TestCase):
    def test_update_before_generation(self) -> None:
        champ = make_championship()
        champ.update_config(TournamentConfig(num_groups=3))
        self.assertEqual(len(champ.generate_groups(rng=random.Random(0))), 3)

    def test_update_after_generation_warns(self) -> None:
        champ = make_championship()
        champ.generate_groups(rng=random.Random(0))
        with self.assertLogs("pongmanager.championship", level="WARNING"):
            champ.update_config(TournamentConfig(match_format="home_and_away"))
        self.assertEqual(champ.config.match_format, "home_and_away")
        self.assertEqual(len(champ.groups), 1)

    def test_update_rejects_invalid(self) -> None:
        with self.assertRaises(InvalidConfiguration):
            make_championship().update_config(TournamentConfig(num_groups=0))

    def test_participant_name_fallback(self) -> None:
        champ = make_championship()
        self.assertEqual(champ.participant_name("p1"), "Ana")
        self.assertEqual(champ.participant_name("ghost"), "?")


if __name__ == "__main__":
    unittest.main()
