"""Composition Root: wires SQL adapters and use cases per request.

Invariants:
    - One AsyncSession per request, shared by every adapter of that request
    - One random.Random and one BalancingLock per process, shared by all requests

Design Decisions:
    - _rng and _balancing_lock as module-level singletons: deliberate exception to
      the no-global-state rule (ADR: single-process uvicorn; the lock is
      meaningless if recreated per request)
    - Plain FastAPI Depends providers: tests override get_db, nothing else
"""

import random

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from team_balancer.config import get_settings
from team_balancer.infrastructure.admin_notifier import LoggingAdminNotifier
from team_balancer.infrastructure.database import get_db
from team_balancer.infrastructure.participant_assignment import SqlParticipantAssignment
from team_balancer.infrastructure.team_member_count_query import SqlTeamMemberCountQuery
from team_balancer.infrastructure.team_repository import SqlTeamRepository
from team_balancer.services.balancing_lock import BalancingLock
from team_balancer.services.create_team import CreateTeamUseCase
from team_balancer.services.handle_member_join import HandleMemberJoinUseCase
from team_balancer.services.handle_member_leave import HandleMemberLeaveUseCase
from team_balancer.services.split_team import SplitTeamUseCase
from team_balancer.services.team_membership_handlers import TeamMembershipHandlers

_rng = random.Random(get_settings().balancer_random_seed)
_balancing_lock = BalancingLock()


def get_balancing_lock() -> BalancingLock:
    return _balancing_lock


def get_split_team(db: AsyncSession = Depends(get_db)) -> SplitTeamUseCase:
    return SplitTeamUseCase(
        team_repository=SqlTeamRepository(db),
        team_member_count_query=SqlTeamMemberCountQuery(db),
        participant_assignment=SqlParticipantAssignment(db),
        rng=_rng,
    )


def get_create_team(db: AsyncSession = Depends(get_db)) -> CreateTeamUseCase:
    return CreateTeamUseCase(SqlTeamRepository(db))


def get_team_member_count_query(
    db: AsyncSession = Depends(get_db),
) -> SqlTeamMemberCountQuery:
    return SqlTeamMemberCountQuery(db)


def get_team_membership_handlers(
    db: AsyncSession = Depends(get_db),
) -> TeamMembershipHandlers:
    settings = get_settings()
    query = SqlTeamMemberCountQuery(db)
    assignment = SqlParticipantAssignment(db)
    split_team = SplitTeamUseCase(SqlTeamRepository(db), query, assignment, _rng)
    return TeamMembershipHandlers(
        handle_member_join=HandleMemberJoinUseCase(query, assignment, split_team, _rng),
        handle_member_leave=HandleMemberLeaveUseCase(
            query,
            LoggingAdminNotifier(settings.admin_notification_recipient),
            assignment,
            _rng,
            notify_at_minimum=settings.notify_team_at_minimum,
        ),
        balancing_lock=_balancing_lock,
    )
