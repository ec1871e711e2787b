"""Team Membership Handlers: explicit routing from participant lifecycle events to use cases.

Invariants:
    - PARTICIPANT_SUSPENDED / PARTICIPANT_WITHDRAWN -> HandleMemberLeaveUseCase
      on payload.previous_team_id
    - PARTICIPANT_REACTIVATED -> HandleMemberJoinUseCase
    - Every use case call runs inside the cohort's BalancingLock
    - Errors propagate unchanged; the delivering transport owns retries
    - Leave outcomes log at INFO when consistent, WARNING when the team needed
      a merge or an admin

Design Decisions:
    - Explicit dict over getattr: every event->handler mapping visible in one place
    - Returns the use case result as a plain dict so the HTTP route can echo it
"""

import logging
from collections.abc import Awaitable, Callable

from team_balancer.core.domain_types import IntegrationEventType
from team_balancer.core.errors import TeamBalancerError
from team_balancer.core.team_consistency import is_team_consistency_ok
from team_balancer.schemas.integration_events import (
    ParticipantIntegrationEvent,
    ParticipantReactivatedEvent,
    ParticipantSuspendedEvent,
    ParticipantWithdrawnEvent,
)
from team_balancer.services.balancing_lock import BalancingLock, DEFAULT_COHORT_KEY
from team_balancer.services.handle_member_join import HandleMemberJoinUseCase
from team_balancer.services.handle_member_leave import HandleMemberLeaveUseCase

logger = logging.getLogger(__name__)


class TeamMembershipHandlers:
    """Routes integration events to balancing use cases under one lock."""

    def __init__(
        self,
        handle_member_join: HandleMemberJoinUseCase,
        handle_member_leave: HandleMemberLeaveUseCase,
        balancing_lock: BalancingLock,
        cohort_key: str = DEFAULT_COHORT_KEY,
    ):
        self.handle_member_join = handle_member_join
        self.handle_member_leave = handle_member_leave
        self.balancing_lock = balancing_lock
        self.cohort_key = cohort_key

        self._handlers: dict[
            IntegrationEventType,
            Callable[[ParticipantIntegrationEvent], Awaitable[dict]],
        ] = {
            IntegrationEventType.PARTICIPANT_SUSPENDED: self.on_suspended,
            IntegrationEventType.PARTICIPANT_WITHDRAWN: self.on_withdrawn,
            IntegrationEventType.PARTICIPANT_REACTIVATED: self.on_reactivated,
        }

    async def dispatch(self, event: ParticipantIntegrationEvent) -> dict:
        event_type = IntegrationEventType(event.type)
        handler = self._handlers[event_type]
        try:
            async with self.balancing_lock.hold(self.cohort_key):
                return await handler(event)
        except TeamBalancerError as e:
            e.context.event_type = event_type.value
            logger.error(
                f"Handling {event_type.value} failed: {e.message}",
                extra={"event_type": event_type.value, "error_code": e.code},
            )
            raise

    async def on_suspended(self, event: ParticipantSuspendedEvent) -> dict:
        return await self._reconcile_after_leave(event)

    async def on_withdrawn(self, event: ParticipantWithdrawnEvent) -> dict:
        return await self._reconcile_after_leave(event)

    async def _reconcile_after_leave(
        self, event: ParticipantSuspendedEvent | ParticipantWithdrawnEvent,
    ) -> dict:
        result = await self.handle_member_leave.execute(
            leaving_participant_name=event.payload.name,
            team_id=event.payload.previous_team_id,
        )
        level = logging.INFO if is_team_consistency_ok(result) else logging.WARNING
        logger.log(
            level,
            f"{event.type} reconciled: {result.type.value}",
            extra={
                "event_type": event.type,
                "team_id": event.payload.previous_team_id,
                "participant_id": event.payload.participant_id,
            },
        )
        return result.to_dict()

    async def on_reactivated(self, event: ParticipantReactivatedEvent) -> dict:
        result = await self.handle_member_join.execute(
            participant_id=event.payload.participant_id,
        )
        return result.to_dict()
