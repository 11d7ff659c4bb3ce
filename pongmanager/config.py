"""
Configuration loading from config.yaml.

Uses typed dataclasses throughout so the rest of the app gets IDE
completion and type-checker support without touching raw dicts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import yaml

from pongmanager.errors import InvalidConfiguration

MatchFormat = Literal["single", "home_and_away"]
ParticipantType = Literal["player", "team"]

MATCH_FORMATS: tuple[str, ...] = ("single", "home_and_away")
PARTICIPANT_TYPES: tuple[str, ...] = ("player", "team")
SETS_PER_MATCH_CHOICES: tuple[int, ...] = (1, 3, 5, 7)


@dataclass(frozen=True)
class TournamentConfig:
    """Parameters consumed by the group partitioner and schedule generator."""

    num_groups: int = 1
    num_advancing: int = 2
    match_format: MatchFormat = "single"
    sets_per_match: int = 3   # best-of-N; informational to the engine

    def validate(self) -> None:
        if self.num_groups < 1:
            raise InvalidConfiguration("tournament.num_groups must be >= 1")
        if self.num_advancing < 1:
            raise InvalidConfiguration("tournament.num_advancing must be >= 1")
        if self.match_format not in MATCH_FORMATS:
            raise InvalidConfiguration(
                f"tournament.match_format must be one of {MATCH_FORMATS}, "
                f"got '{self.match_format}'"
            )
        if self.sets_per_match not in SETS_PER_MATCH_CHOICES:
            raise InvalidConfiguration(
                f"tournament.sets_per_match must be one of {SETS_PER_MATCH_CHOICES}, "
                f"got {self.sets_per_match}"
            )


@dataclass
class ChampionshipConfig:
    name: str = "Championship"
    year: int | None = None
    participant_type: ParticipantType = "player"
    seed: int | None = None          # fixes the group draw; None = random
    strict_scores: bool = False      # enforce best-of-N scores on entry
    save_snapshot: bool = False
    snapshot_dir: str = "./snapshots"
    participant_ids: list[str] | None = None   # enrol only these, in this order; None = everyone


@dataclass
class ParticipantEntry:
    id: str
    name: str


@dataclass
class TeamEntry:
    id: str
    name: str
    player_ids: list[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str = "./logs/pongmanager.log"


@dataclass
class Config:
    championship: ChampionshipConfig
    tournament: TournamentConfig
    players: list[ParticipantEntry] = field(default_factory=list)
    teams: list[TeamEntry] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def snapshot_dir_path(self) -> Path:
        return Path(self.championship.snapshot_dir)

    @property
    def log_file_path(self) -> Path:
        return Path(self.logging.file)


def load_config(path: str | Path = "config.yaml") -> Config:
    """
    Load and validate config.yaml.

    Raises:
        FileNotFoundError: config.yaml is missing.
        InvalidConfiguration: required fields are absent or invalid.
    """
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {cfg_path.resolve()}\n"
            "Copy config.example.yaml to config.yaml and list your players."
        )

    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    try:
        champ_raw = raw.get("championship") or {}
        champ_cfg = ChampionshipConfig(
            name=str(champ_raw.get("name", "Championship")),
            year=_parse_optional_int(champ_raw.get("year")),
            participant_type=champ_raw.get("participant_type", "player"),
            seed=_parse_optional_int(champ_raw.get("seed")),
            strict_scores=bool(champ_raw.get("strict_scores", False)),
            save_snapshot=bool(champ_raw.get("save_snapshot", False)),
            snapshot_dir=champ_raw.get("snapshot_dir", "./snapshots"),
            participant_ids=_parse_id_list(champ_raw.get("participant_ids")),
        )

        tour_raw = raw.get("tournament") or {}
        tour_cfg = TournamentConfig(
            num_groups=int(tour_raw.get("num_groups", 1)),
            num_advancing=int(tour_raw.get("num_advancing", 2)),
            match_format=tour_raw.get("match_format", "single"),
            sets_per_match=int(tour_raw.get("sets_per_match", 3)),
        )

        players = [
            ParticipantEntry(id=str(p["id"]), name=str(p["name"]))
            for p in raw.get("players") or []
        ]
        teams = [
            TeamEntry(
                id=str(t["id"]),
                name=str(t["name"]),
                player_ids=[str(pid) for pid in t.get("player_ids", [])],
            )
            for t in raw.get("teams") or []
        ]

        log_raw = raw.get("logging") or {}
        log_cfg = LoggingConfig(
            level=str(log_raw.get("level", "INFO")).upper(),
            file=log_raw.get("file", "./logs/pongmanager.log"),
        )

        config = Config(
            championship=champ_cfg,
            tournament=tour_cfg,
            players=players,
            teams=teams,
            logging=log_cfg,
        )
        _validate(config)
        return config

    except (KeyError, TypeError, AttributeError) as exc:
        raise InvalidConfiguration(f"Invalid config.yaml structure: {exc}") from exc


def _validate(config: Config) -> None:
    config.tournament.validate()
    if config.championship.participant_type not in PARTICIPANT_TYPES:
        raise InvalidConfiguration(
            f"championship.participant_type must be one of {PARTICIPANT_TYPES}, "
            f"got '{config.championship.participant_type}'"
        )
    player_ids = [p.id for p in config.players]
    if len(set(player_ids)) != len(player_ids):
        raise InvalidConfiguration("players contain duplicate ids")
    team_ids = [t.id for t in config.teams]
    if len(set(team_ids)) != len(team_ids):
        raise InvalidConfiguration("teams contain duplicate ids")
    selected = config.championship.participant_ids
    if selected is not None and len(set(selected)) != len(selected):
        raise InvalidConfiguration("championship.participant_ids contains duplicate ids")


def _parse_id_list(value: object) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise InvalidConfiguration(f"expected a list of ids, got {value!r}")
    return [str(item) for item in value]


def _parse_optional_int(value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidConfiguration(f"expected an integer, got {value!r}")
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidConfiguration(f"expected an integer, got {value!r}") from exc
