"""Team Assignment: pure selection, splitting, and naming algorithms.

Invariants:
    - select_team_with_min_members never returns a team with member_count >= MAX_TEAM_SIZE
    - Ties on the minimum count are broken uniformly at random via the injected rng
    - split_team_members keeps ceil(n/2) in the original team, moves floor(n/2);
      the union of both halves equals the input, nothing duplicated or lost
    - select_join_target only considers empty teams when no populated team has room
    - generate_next_team_name fills the lowest unused letter a..z

Design Decisions:
    - rng is a parameter (random.Random), never the module-level random state:
      callers seed it in tests and share one instance in production
    - split_team_members does not check the split threshold; SplitTeamUseCase does
"""

import math
import random
import string
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from team_balancer.core.domain_types import MAX_TEAM_SIZE, TeamId, TeamName
from team_balancer.core.errors import TeamNamesExhaustedError
from team_balancer.core.team import team_name


TEAM_NAME_ALPHABET: str = string.ascii_lowercase


@dataclass(frozen=True)
class TeamWithMemberCount:
    team_id: TeamId
    member_count: int


@dataclass(frozen=True)
class TeamMemberInfo:
    participant_id: str
    name: str


@dataclass(frozen=True)
class TeamSplitResult:
    original_team_members: list[TeamMemberInfo]
    new_team_members: list[TeamMemberInfo]


def select_team_with_min_members(
    teams: Sequence[TeamWithMemberCount], rng: random.Random,
) -> TeamWithMemberCount | None:
    """Pick the least populated team that still has room. None if none qualifies."""
    eligible = [t for t in teams if t.member_count < MAX_TEAM_SIZE]
    if not eligible:
        return None

    min_count = min(t.member_count for t in eligible)
    candidates = [t for t in eligible if t.member_count == min_count]
    return rng.choice(candidates)


def select_join_target(
    teams: Sequence[TeamWithMemberCount], rng: random.Random,
) -> TeamWithMemberCount | None:
    """Join placement: populated teams first, empty teams only as a bootstrap fallback.

    An emptied team left behind by a merge must not receive a lone newcomer
    while a populated team still has room.
    """
    populated = select_team_with_min_members(
        [t for t in teams if t.member_count > 0], rng,
    )
    if populated is not None:
        return populated
    return select_team_with_min_members(teams, rng)


def split_team_members(
    members: Sequence[TeamMemberInfo], rng: random.Random,
) -> TeamSplitResult:
    """Shuffle members and cut them in two; the original team keeps the larger half."""
    shuffled = list(members)
    rng.shuffle(shuffled)

    split_index = math.ceil(len(shuffled) / 2)
    return TeamSplitResult(
        original_team_members=shuffled[:split_index],
        new_team_members=shuffled[split_index:],
    )


def generate_next_team_name(used_names: Iterable[str]) -> TeamName:
    """Return the first letter a..z not in used_names."""
    used = set(used_names)
    for letter in TEAM_NAME_ALPHABET:
        if letter not in used:
            return team_name(letter)
    raise TeamNamesExhaustedError()
