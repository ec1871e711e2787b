"""Use cases over the SQL adapters: join, split, and merge against SQLite.

Invariants:
    - Join lands on the least populated team and persists the pointer
    - Split materializes a new team row and moves floor(n/2) members
    - A sole survivor is merged into another team with room
    - The team emptied by a merge does not receive the next join
"""

import random

from team_balancer.core.domain_types import ParticipantStatus
from team_balancer.core.team_consistency import TeamNeedsMerge
from team_balancer.infrastructure.participant_assignment import SqlParticipantAssignment
from team_balancer.infrastructure.team_member_count_query import SqlTeamMemberCountQuery
from team_balancer.infrastructure.team_repository import SqlTeamRepository
from team_balancer.services.handle_member_join import HandleMemberJoinUseCase
from team_balancer.services.handle_member_leave import HandleMemberLeaveUseCase
from team_balancer.services.split_team import SplitTeamUseCase

TEAM_A = "a1b2c3d4-e5f6-4a7b-ac9d-0e1f2a3b4c5d"
TEAM_B = "c3d4e5f6-a7b8-4c9d-ae1f-2a3b4c5d6e7f"
PARTICIPANT = "b2c3d4e5-f6a7-4b8c-ad0e-1f2a3b4c5d6e"


class _SilentNotifier:
    async def notify_team_under_minimum(self, **kwargs):
        raise AssertionError("not expected")

    async def notify_no_merge_target(self, **kwargs):
        raise AssertionError("not expected")


def _wire(db, rng):
    query = SqlTeamMemberCountQuery(db)
    assignment = SqlParticipantAssignment(db)
    split = SplitTeamUseCase(SqlTeamRepository(db), query, assignment, rng)
    return query, assignment, split


async def test_join_persists_assignment(test_db, seed):
    await seed.team(TEAM_A, "a")
    await seed.team(TEAM_B, "b")
    await seed.members(TEAM_A, 3)
    await seed.members(TEAM_B, 2, start=10)
    await seed.participant(PARTICIPANT, "Newcomer", None)
    rng = random.Random(0)
    query, assignment, split = _wire(test_db, rng)

    result = await HandleMemberJoinUseCase(query, assignment, split, rng).execute(PARTICIPANT)

    assert result.assigned_team_id == TEAM_B
    assert result.team_was_split is False
    assert await query.get_team_member_count(TEAM_B) == 3


async def test_split_creates_team_and_moves_half(test_db, seed):
    await seed.team(TEAM_A, "a")
    await seed.members(TEAM_A, 5)
    rng = random.Random(0)
    query, _, split = _wire(test_db, rng)

    outcome = await split.execute(TEAM_A)

    assert outcome.new_team.name == "b"
    assert await SqlTeamRepository(test_db).find_by_name("b") == outcome.new_team
    assert await query.get_team_member_count(TEAM_A) == 3
    assert await query.get_team_member_count(outcome.new_team.id) == 2
    rows = await query.list_teams_with_counts()
    assert [(name, count) for _, name, count in rows] == [("a", 3), ("b", 2)]


async def test_sole_survivor_merged_into_other_team(test_db, seed):
    await seed.team(TEAM_A, "a")
    await seed.team(TEAM_B, "b")
    [sole] = await seed.members(TEAM_A, 1)
    await seed.participant(
        PARTICIPANT, "Leaver", TEAM_A, ParticipantStatus.WITHDRAWN,
    )
    await seed.members(TEAM_B, 3, start=10)
    rng = random.Random(0)
    query, assignment, _ = _wire(test_db, rng)

    use_case = HandleMemberLeaveUseCase(query, _SilentNotifier(), assignment, rng)
    result = await use_case.execute("Leaver", TEAM_A)

    assert isinstance(result, TeamNeedsMerge)
    assert result.sole_participant.id == sole
    assert await query.get_team_member_count(TEAM_A) == 0
    assert await query.get_team_member_count(TEAM_B) == 4


async def test_join_after_merge_does_not_refill_emptied_team(test_db, seed):
    team_m = "d4e5f6a7-b8c9-4d0e-8f1a-3b4c5d6e7f80"
    await seed.team(TEAM_A, "a")
    await seed.team(TEAM_B, "b")
    await seed.team(team_m, "m")
    await seed.members(TEAM_A, 1)
    await seed.members(TEAM_B, 2, start=10)
    await seed.members(team_m, 2, start=20)
    await seed.participant(PARTICIPANT, "Returner", None)
    rng = random.Random(0)
    query, assignment, split = _wire(test_db, rng)

    merged = await HandleMemberLeaveUseCase(
        query, _SilentNotifier(), assignment, rng,
    ).execute("Leaver", TEAM_A)
    assert isinstance(merged, TeamNeedsMerge)

    result = await HandleMemberJoinUseCase(query, assignment, split, rng).execute(PARTICIPANT)

    assert result.assigned_team_id != TEAM_A
    assert await query.get_team_member_count(TEAM_A) == 0
