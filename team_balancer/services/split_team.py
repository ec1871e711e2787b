"""Split Team: materialize a new team and move half of an oversized team into it.

Invariants:
    - Fewer than SPLIT_THRESHOLD active members -> TeamTooSmallToSplitError, no save, no assignment
    - The new team is saved BEFORE any member is reassigned
    - Only new_team_members are reassigned; the rest keep their current team pointer

Design Decisions:
    - No compensation on a mid-loop assign_to_team failure: the error propagates
      and the created team stays. Re-running is not idempotent because the
      shuffle is recomputed (see DESIGN.md)
"""

import logging
import random
from dataclasses import dataclass

from team_balancer.core.domain_types import SPLIT_THRESHOLD, TeamId
from team_balancer.core.errors import ErrorContext, TeamTooSmallToSplitError
from team_balancer.core.repository_protocols import (
    ParticipantAssignment, TeamMemberCountQuery, TeamRepository,
)
from team_balancer.core.team import Team, create_team, team_id as parse_team_id
from team_balancer.core.team_assignment import TeamMemberInfo, split_team_members
from team_balancer.services.team_naming import allocate_team_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamSplitOutcome:
    original_team_id: TeamId
    new_team: Team
    moved_participant_ids: list[str]


class SplitTeamUseCase:
    """Split one team into two of sizes ceil(n/2) and floor(n/2)."""

    def __init__(
        self,
        team_repository: TeamRepository,
        team_member_count_query: TeamMemberCountQuery,
        participant_assignment: ParticipantAssignment,
        rng: random.Random,
    ):
        self.team_repository = team_repository
        self.team_member_count_query = team_member_count_query
        self.participant_assignment = participant_assignment
        self.rng = rng

    async def execute(self, team_id: str) -> TeamSplitOutcome:
        tid = parse_team_id(team_id)

        members = await self.team_member_count_query.get_team_members(tid)
        if len(members) < SPLIT_THRESHOLD:
            raise TeamTooSmallToSplitError(
                len(members), ErrorContext(team_id=tid),
            )

        split = split_team_members(
            [TeamMemberInfo(m.participant_id, m.name) for m in members],
            self.rng,
        )

        name = await allocate_team_name(self.team_repository)
        new_team = create_team(name)
        await self.team_repository.save(new_team)
        logger.info(
            f"Team {new_team.name} created to split {len(members)} members",
            extra={"team_id": tid, "member_count": len(members)},
        )

        moved: list[str] = []
        for member in split.new_team_members:
            await self.participant_assignment.assign_to_team(
                member.participant_id, new_team.id,
            )
            moved.append(member.participant_id)

        return TeamSplitOutcome(
            original_team_id=tid,
            new_team=new_team,
            moved_participant_ids=moved,
        )
