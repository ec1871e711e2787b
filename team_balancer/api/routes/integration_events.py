"""Integration Event Route: HTTP delivery endpoint for participant lifecycle events.

Invariants:
    - Envelope validated by the discriminated union before any use case runs
    - Unknown `type` or malformed payload -> 400 via RequestValidationError handler
    - Use case errors propagate; a non-2xx response tells the delivering queue to retry

Design Decisions:
    - One event per request: the queue owns batching and redelivery
"""

import logging

from fastapi import APIRouter, Depends

from team_balancer.api.dependencies import get_team_membership_handlers
from team_balancer.schemas.integration_events import IntegrationEventEnvelope
from team_balancer.services.team_membership_handlers import TeamMembershipHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/events", tags=["events"])


@router.post("")
async def receive_event(
    envelope: IntegrationEventEnvelope,
    handlers: TeamMembershipHandlers = Depends(get_team_membership_handlers),
):
    """Dispatch one participant lifecycle event to the balancer."""
    event = envelope.root
    logger.info(
        f"Received {event.type}",
        extra={"event_type": event.type, "participant_id": event.payload.participant_id},
    )
    result = await handlers.dispatch(event)
    return {"event_type": event.type, "result": result}
