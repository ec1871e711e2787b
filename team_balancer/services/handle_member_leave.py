"""Handle Member Leave: reconcile a team after one of its members left.

Invariants:
    - The leaving participant is already detached; only the team's remaining
      population is inspected
    - 1 remaining member + a team with room elsewhere -> that member is moved
      (TEAM_NEEDS_MERGE); neither the current team nor an empty team is a
      merge target
    - 1 remaining member + no room anywhere -> admin notified, NO assignment
      (NO_MERGE_TARGET)
    - 2 remaining members -> admin notified (TEAM_UNDER_MINIMUM) only when
      notify_at_minimum is enabled; otherwise OK
    - 0 or >= 3 remaining members -> OK, no side effects

Design Decisions:
    - notify_at_minimum is a constructor flag fed from settings; default False
      keeps a 2-member team (inside the capacity band) silent
    - Empty teams are skipped as merge targets: moving the survivor there
      would leave it alone again
"""

import logging
import random

from team_balancer.core.domain_types import MIN_TEAM_SIZE, TeamId
from team_balancer.core.repository_protocols import (
    AdminNotifier, ParticipantAssignment, TeamMemberCountQuery,
)
from team_balancer.core.team import team_id as parse_team_id
from team_balancer.core.team_assignment import (
    TeamWithMemberCount, select_team_with_min_members,
)
from team_balancer.core.team_consistency import (
    NoMergeTarget,
    ParticipantInfo,
    TeamConsistencyCheckResult,
    TeamConsistencyOK,
    TeamNeedsMerge,
    TeamUnderMinimum,
)

logger = logging.getLogger(__name__)


class HandleMemberLeaveUseCase:
    """Merge a sole survivor into another team, or escalate to an admin."""

    def __init__(
        self,
        team_member_count_query: TeamMemberCountQuery,
        admin_notifier: AdminNotifier,
        participant_assignment: ParticipantAssignment,
        rng: random.Random,
        notify_at_minimum: bool = False,
    ):
        self.team_member_count_query = team_member_count_query
        self.admin_notifier = admin_notifier
        self.participant_assignment = participant_assignment
        self.rng = rng
        self.notify_at_minimum = notify_at_minimum

    async def execute(
        self, leaving_participant_name: str, team_id: str,
    ) -> TeamConsistencyCheckResult:
        tid = parse_team_id(team_id)

        member_count = await self.team_member_count_query.get_team_member_count(tid)

        if member_count > MIN_TEAM_SIZE:
            return TeamConsistencyOK()

        if member_count == MIN_TEAM_SIZE:
            if not self.notify_at_minimum:
                return TeamConsistencyOK()
            return await self._escalate_at_minimum(
                leaving_participant_name, tid, member_count,
            )

        if member_count == 1:
            return await self._merge_sole_survivor(leaving_participant_name, tid)

        # Team emptied; teams are never deleted.
        return TeamConsistencyOK()

    async def _escalate_at_minimum(
        self, leaving_participant_name: str, tid: TeamId, member_count: int,
    ) -> TeamUnderMinimum:
        remaining = await self.team_member_count_query.get_team_members(tid)
        await self.admin_notifier.notify_team_under_minimum(
            leaving_participant_name=leaving_participant_name,
            team_id=tid,
            current_member_count=member_count,
            remaining_participant_names=[m.name for m in remaining],
        )
        logger.warning(
            f"Team down to {member_count} members, admin notified",
            extra={"team_id": tid, "member_count": member_count},
        )
        return TeamUnderMinimum(
            team_id=tid,
            member_count=member_count,
            remaining_members=tuple(
                ParticipantInfo(m.participant_id, m.name) for m in remaining
            ),
        )

    async def _merge_sole_survivor(
        self, leaving_participant_name: str, tid: TeamId,
    ) -> TeamConsistencyCheckResult:
        remaining = await self.team_member_count_query.get_team_members(tid)
        if not remaining:
            return TeamConsistencyOK()
        sole = remaining[0]
        sole_info = ParticipantInfo(sole.participant_id, sole.name)

        counts = await self.team_member_count_query.get_all_team_member_counts()
        target = select_team_with_min_members(
            [
                TeamWithMemberCount(c.team_id, c.count)
                for c in counts if c.team_id != tid and c.count > 0
            ],
            self.rng,
        )

        if target is None:
            await self.admin_notifier.notify_no_merge_target(
                leaving_participant_name=leaving_participant_name,
                sole_participant_name=sole.name,
            )
            logger.warning(
                "Sole remaining member has no merge target, admin notified",
                extra={"team_id": tid, "participant_id": sole.participant_id},
            )
            return NoMergeTarget(sole_participant=sole_info)

        await self.participant_assignment.assign_to_team(
            sole.participant_id, target.team_id,
        )
        logger.info(
            "Sole remaining member merged into another team",
            extra={"team_id": target.team_id, "participant_id": sole.participant_id},
        )
        return TeamNeedsMerge(team_id=tid, sole_participant=sole_info)
