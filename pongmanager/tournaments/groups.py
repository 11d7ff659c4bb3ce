"""
Group partitioner.

One uniform shuffle, then striped assignment: permuted index i goes to group
i mod N.  Group sizes therefore differ by at most one, and each group keeps
the shuffled order of its members.

The random source is injectable so a draw can be reproduced from a seed.
"""

from __future__ import annotations

import random
from typing import Sequence

from pongmanager.errors import InvalidConfiguration, InvalidParticipants
from pongmanager.tournaments.base import Group, Participant


def partition(
    participants: Sequence[Participant],
    num_groups: int,
    rng: random.Random | None = None,
) -> list[Group]:
    """
    Distribute participants into num_groups groups named "Group A", "Group B", …

    Raises:
        InvalidConfiguration: num_groups < 1 or fewer than 2 participants.
        InvalidParticipants: the same participant id appears twice.
    """
    if num_groups < 1:
        raise InvalidConfiguration(f"num_groups must be >= 1, got {num_groups}")
    if len(participants) < 2:
        raise InvalidConfiguration(
            f"At least 2 participants are needed to draw groups, got {len(participants)}"
        )

    ids = [p.id for p in participants]
    if len(set(ids)) != len(ids):
        raise InvalidParticipants("Participant ids must be unique within a draw")

    rng = rng if rng is not None else random.Random()
    shuffled = list(ids)
    rng.shuffle(shuffled)

    members: list[list[str]] = [[] for _ in range(num_groups)]
    for index, participant_id in enumerate(shuffled):
        members[index % num_groups].append(participant_id)

    return [
        Group(name=group_label(i), participant_ids=tuple(ids_in_group))
        for i, ids_in_group in enumerate(members)
    ]


def group_label(index: int) -> str:
    """0 → "Group A", 25 → "Group Z", 26 → "Group AA"."""
    if index < 0:
        raise ValueError(f"group index must be >= 0, got {index}")
    letters = ""
    n = index + 1
    while n:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return f"Group {letters}"
