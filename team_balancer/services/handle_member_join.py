"""Handle Member Join: place a newly active participant on the least populated team.

Invariants:
    - Teams at MAX_TEAM_SIZE are never chosen
    - Empty teams are chosen only when no populated team has room (bootstrap)
    - No eligible team -> NoAvailableTeamError before any assignment
    - assign_to_team is called exactly once per join
    - A split runs only when the target's re-read population reached SPLIT_THRESHOLD

Design Decisions:
    - The split decision uses the count observed AFTER the assignment, not
      target.member_count + 1: the projection read in step 1 can be stale when
      another writer touched the same team, and the arithmetic version could
      never reach the threshold (eligibility is < MAX_TEAM_SIZE)
"""

import logging
import random
from dataclasses import dataclass

from team_balancer.core.domain_types import SPLIT_THRESHOLD, TeamId
from team_balancer.core.errors import ErrorContext, NoAvailableTeamError
from team_balancer.core.repository_protocols import (
    ParticipantAssignment, TeamMemberCountQuery,
)
from team_balancer.core.team import participant_id as parse_participant_id
from team_balancer.core.team_assignment import (
    TeamWithMemberCount, select_join_target,
)
from team_balancer.services.split_team import SplitTeamUseCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandleMemberJoinResult:
    assigned_team_id: TeamId
    team_was_split: bool

    def to_dict(self) -> dict:
        return {
            "assigned_team_id": self.assigned_team_id,
            "team_was_split": self.team_was_split,
        }


class HandleMemberJoinUseCase:
    """Assign a participant to a team, splitting it if it overflowed."""

    def __init__(
        self,
        team_member_count_query: TeamMemberCountQuery,
        participant_assignment: ParticipantAssignment,
        split_team: SplitTeamUseCase,
        rng: random.Random,
    ):
        self.team_member_count_query = team_member_count_query
        self.participant_assignment = participant_assignment
        self.split_team = split_team
        self.rng = rng

    async def execute(self, participant_id: str) -> HandleMemberJoinResult:
        pid = parse_participant_id(participant_id)

        counts = await self.team_member_count_query.get_all_team_member_counts()
        target = select_join_target(
            [TeamWithMemberCount(c.team_id, c.count) for c in counts],
            self.rng,
        )
        if target is None:
            raise NoAvailableTeamError(ErrorContext(participant_id=pid))

        await self.participant_assignment.assign_to_team(pid, target.team_id)
        logger.info(
            f"Participant assigned to team with {target.member_count} member(s)",
            extra={"participant_id": pid, "team_id": target.team_id},
        )

        new_member_count = await self.team_member_count_query.get_team_member_count(
            target.team_id,
        )
        if new_member_count >= SPLIT_THRESHOLD:
            logger.warning(
                f"Team reached {new_member_count} members after join, splitting",
                extra={"team_id": target.team_id, "member_count": new_member_count},
            )
            await self.split_team.execute(target.team_id)
            return HandleMemberJoinResult(target.team_id, team_was_split=True)

        return HandleMemberJoinResult(target.team_id, team_was_split=False)
