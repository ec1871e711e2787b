"""Team Routes: list teams with populations, create the next team, manual split.

Invariants:
    - Team ids in the path are validated by the core (INVALID_TEAM_ID_FORMAT -> 400)
    - Manual split runs under the same BalancingLock as event-driven balancing
    - Domain errors propagate to the global TeamBalancerError handler

Design Decisions:
    - Thin routes: naming, uniqueness, and split rules live in the use cases
"""

import logging

from fastapi import APIRouter, Depends, status

from team_balancer.api.dependencies import (
    get_balancing_lock,
    get_create_team,
    get_split_team,
    get_team_member_count_query,
)
from team_balancer.infrastructure.team_member_count_query import SqlTeamMemberCountQuery
from team_balancer.schemas.team import (
    TeamResponse, TeamSplitResponse, TeamWithCountResponse,
)
from team_balancer.services.balancing_lock import BalancingLock
from team_balancer.services.create_team import CreateTeamUseCase
from team_balancer.services.split_team import SplitTeamUseCase

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/teams", tags=["teams"])


@router.get("", response_model=list[TeamWithCountResponse])
async def list_teams(
    query: SqlTeamMemberCountQuery = Depends(get_team_member_count_query),
):
    """All teams ordered by name, with their active member counts."""
    rows = await query.list_teams_with_counts()
    return [
        TeamWithCountResponse(id=tid, name=name, active_member_count=count)
        for tid, name, count in rows
    ]


@router.post(
    "", response_model=TeamResponse, status_code=status.HTTP_201_CREATED,
)
async def create_team(
    use_case: CreateTeamUseCase = Depends(get_create_team),
    lock: BalancingLock = Depends(get_balancing_lock),
):
    async with lock.hold():
        team = await use_case.execute()
    return TeamResponse(id=team.id, name=team.name)


@router.post("/{team_id}/split", response_model=TeamSplitResponse)
async def split_team(
    team_id: str,
    use_case: SplitTeamUseCase = Depends(get_split_team),
    lock: BalancingLock = Depends(get_balancing_lock),
):
    async with lock.hold():
        outcome = await use_case.execute(team_id)
    return TeamSplitResponse(
        original_team_id=outcome.original_team_id,
        new_team=TeamResponse(id=outcome.new_team.id, name=outcome.new_team.name),
        moved_participant_ids=outcome.moved_participant_ids,
    )
