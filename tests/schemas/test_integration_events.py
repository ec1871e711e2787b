"""Integration Event Schemas: discriminated parsing of lifecycle events.

Tests:
    - Each `type` yields its concrete event model
    - Unknown type, missing fields, malformed UUIDs, empty names are rejected
    - Timestamps parsed into timezone-aware datetimes
"""

import pytest
from pydantic import ValidationError

from team_balancer.schemas.integration_events import (
    IntegrationEventEnvelope,
    ParticipantReactivatedEvent,
    ParticipantSuspendedEvent,
    ParticipantWithdrawnEvent,
    parse_integration_event,
)

PARTICIPANT = "b2c3d4e5-f6a7-4b8c-ad0e-1f2a3b4c5d6e"
TEAM = "a1b2c3d4-e5f6-4a7b-ac9d-0e1f2a3b4c5d"


def test_suspended_event_parses():
    event = parse_integration_event({
        "type": "PARTICIPANT_SUSPENDED",
        "payload": {
            "participant_id": PARTICIPANT,
            "name": "Ana",
            "previous_team_id": TEAM,
            "suspended_at": "2026-03-01T12:00:00Z",
        },
    })
    assert isinstance(event, ParticipantSuspendedEvent)
    assert event.payload.previous_team_id == TEAM
    assert event.payload.suspended_at.tzinfo is not None


def test_withdrawn_event_parses():
    event = parse_integration_event({
        "type": "PARTICIPANT_WITHDRAWN",
        "payload": {
            "participant_id": PARTICIPANT,
            "name": "Ana",
            "previous_team_id": TEAM,
            "withdrawn_at": "2026-03-01T12:00:00+02:00",
        },
    })
    assert isinstance(event, ParticipantWithdrawnEvent)


def test_reactivated_event_parses_without_team():
    event = parse_integration_event({
        "type": "PARTICIPANT_REACTIVATED",
        "payload": {
            "participant_id": PARTICIPANT,
            "name": "Ana",
            "reactivated_at": "2026-03-01T12:00:00Z",
        },
    })
    assert isinstance(event, ParticipantReactivatedEvent)
    assert event.payload.participant_id == PARTICIPANT


def test_unknown_event_type_rejected():
    with pytest.raises(ValidationError):
        parse_integration_event({"type": "PARTICIPANT_PROMOTED", "payload": {}})


def test_suspended_requires_previous_team_id():
    with pytest.raises(ValidationError):
        parse_integration_event({
            "type": "PARTICIPANT_SUSPENDED",
            "payload": {
                "participant_id": PARTICIPANT,
                "name": "Ana",
                "suspended_at": "2026-03-01T12:00:00Z",
            },
        })


def test_malformed_participant_id_rejected():
    with pytest.raises(ValidationError):
        parse_integration_event({
            "type": "PARTICIPANT_REACTIVATED",
            "payload": {
                "participant_id": "123",
                "name": "Ana",
                "reactivated_at": "2026-03-01T12:00:00Z",
            },
        })


def test_empty_name_rejected():
    with pytest.raises(ValidationError):
        parse_integration_event({
            "type": "PARTICIPANT_REACTIVATED",
            "payload": {
                "participant_id": PARTICIPANT,
                "name": "",
                "reactivated_at": "2026-03-01T12:00:00Z",
            },
        })


def test_envelope_exposes_concrete_event():
    envelope = IntegrationEventEnvelope.model_validate({
        "type": "PARTICIPANT_REACTIVATED",
        "payload": {
            "participant_id": PARTICIPANT,
            "name": "Ana",
            "reactivated_at": "2026-03-01T12:00:00Z",
        },
    })
    assert isinstance(envelope.root, ParticipantReactivatedEvent)
