"""
Participant registry — players and doubles teams.

A championship is played either by individual players or by teams of exactly
two players.  Either way the engine only sees Participant(id, name); a team
keeps its own identity, separate from the players in it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from pongmanager.config import Config, ParticipantType
from pongmanager.errors import InvalidConfiguration, InvalidParticipants, NotFound
from pongmanager.tournaments.base import Participant


@dataclass(frozen=True)
class Team:
    """A doubles pairing registered under its own id and name."""

    id: str
    name: str
    player_ids: tuple[str, str]

    def as_participant(self) -> Participant:
        return Participant(id=self.id, name=self.name)


def make_team(team_id: str, name: str, players: Sequence[Participant]) -> Team:
    """Build a doubles team; exactly two distinct players are required."""
    if not name.strip():
        raise InvalidParticipants("A team needs a name")
    ids = [p.id for p in players]
    if len(ids) != 2 or ids[0] == ids[1]:
        raise InvalidParticipants(
            f"Team {name!r} needs exactly 2 different players, got {len(set(ids))}"
        )
    return Team(id=team_id, name=name.strip(), player_ids=(ids[0], ids[1]))


class ParticipantRegistry:
    """Ordered lookup of players and teams."""

    def __init__(
        self,
        players: Iterable[Participant] = (),
        teams: Iterable[Team] = (),
    ) -> None:
        self._players: dict[str, Participant] = {p.id: p for p in players}
        self._teams: dict[str, Team] = {}
        for team in teams:
            for pid in team.player_ids:
                if pid not in self._players:
                    raise InvalidParticipants(
                        f"Team {team.name!r} references unknown player {pid!r}"
                    )
            self._teams[team.id] = team

    @property
    def players(self) -> list[Participant]:
        return list(self._players.values())

    @property
    def teams(self) -> list[Team]:
        return list(self._teams.values())

    def participants(self, participant_type: ParticipantType) -> list[Participant]:
        """Entrants for a championship of the given type, in registration order."""
        match participant_type:
            case "player":
                return self.players
            case "team":
                return [t.as_participant() for t in self._teams.values()]
            case _:
                raise InvalidConfiguration(
                    f"Unknown participant type: {participant_type!r}. Valid types: player, team"
                )

    def get(self, participant_id: str) -> Participant:
        if participant_id in self._players:
            return self._players[participant_id]
        if participant_id in self._teams:
            return self._teams[participant_id].as_participant()
        raise NotFound("participant", participant_id)

    def player_names(self, team: Team) -> str:
        """Member names joined as "Ana & Bruno"."""
        return " & ".join(
            self._players[pid].name for pid in team.player_ids if pid in self._players
        )

    @classmethod
    def from_config(cls, config: Config) -> ParticipantRegistry:
        players = [Participant(id=p.id, name=p.name) for p in config.players]
        by_id = {p.id: p for p in players}
        teams = []
        for entry in config.teams:
            missing = [pid for pid in entry.player_ids if pid not in by_id]
            if missing:
                raise InvalidParticipants(
                    f"Team {entry.name!r} references unknown player(s): {', '.join(missing)}"
                )
            teams.append(make_team(entry.id, entry.name, [by_id[pid] for pid in entry.player_ids]))
        return cls(players=players, teams=teams)
