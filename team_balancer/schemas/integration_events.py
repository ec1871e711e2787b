"""Integration Event Schemas: participant lifecycle events consumed by the balancer.

Invariants:
    - Every event has a `type` literal and a typed payload
    - participant_id / previous_team_id are UUID strings, name is non-empty
    - Timestamps are coerced to timezone-aware datetimes by Pydantic

Design Decisions:
    - Discriminated union on `type`: one TypeAdapter validates any envelope and
      yields the concrete model, so dispatch is a dict lookup on `type`
    - Ids kept as str (not UUID): the core validates format and stores text
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, RootModel, TypeAdapter

UUID_STR = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"


class ParticipantSuspendedPayload(BaseModel):
    participant_id: str = Field(pattern=UUID_STR)
    name: str = Field(min_length=1)
    previous_team_id: str = Field(pattern=UUID_STR)
    suspended_at: datetime


class ParticipantWithdrawnPayload(BaseModel):
    participant_id: str = Field(pattern=UUID_STR)
    name: str = Field(min_length=1)
    previous_team_id: str = Field(pattern=UUID_STR)
    withdrawn_at: datetime


class ParticipantReactivatedPayload(BaseModel):
    participant_id: str = Field(pattern=UUID_STR)
    name: str = Field(min_length=1)
    reactivated_at: datetime


class ParticipantSuspendedEvent(BaseModel):
    type: Literal["PARTICIPANT_SUSPENDED"]
    payload: ParticipantSuspendedPayload


class ParticipantWithdrawnEvent(BaseModel):
    type: Literal["PARTICIPANT_WITHDRAWN"]
    payload: ParticipantWithdrawnPayload


class ParticipantReactivatedEvent(BaseModel):
    type: Literal["PARTICIPANT_REACTIVATED"]
    payload: ParticipantReactivatedPayload


ParticipantIntegrationEvent = Annotated[
    Union[
        ParticipantSuspendedEvent,
        ParticipantWithdrawnEvent,
        ParticipantReactivatedEvent,
    ],
    Field(discriminator="type"),
]

integration_event_adapter: TypeAdapter[ParticipantIntegrationEvent] = TypeAdapter(
    ParticipantIntegrationEvent,
)


def parse_integration_event(data: dict) -> ParticipantIntegrationEvent:
    """Validate a raw envelope into its concrete event model."""
    return integration_event_adapter.validate_python(data)


class IntegrationEventEnvelope(RootModel[ParticipantIntegrationEvent]):
    """Request body wrapper so FastAPI validates the discriminated union as a body."""
