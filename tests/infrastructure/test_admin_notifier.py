"""Logging Admin Notifier: escalation records and delivery failures."""

import logging
from unittest.mock import MagicMock

import pytest

from team_balancer.core.errors import NotificationError
from team_balancer.infrastructure.admin_notifier import (
    NOTIFICATION_LOGGER, LoggingAdminNotifier,
)

TEAM_A = "a1b2c3d4-e5f6-4a7b-ac9d-0e1f2a3b4c5d"


async def test_under_minimum_logs_warning(caplog):
    notifier = LoggingAdminNotifier("ops@example.com")

    with caplog.at_level(logging.WARNING, logger=NOTIFICATION_LOGGER):
        await notifier.notify_team_under_minimum(
            leaving_participant_name="Ana",
            team_id=TEAM_A,
            current_member_count=2,
            remaining_participant_names=["Bo", "Cy"],
        )

    [record] = caplog.records
    assert record.name == NOTIFICATION_LOGGER
    assert record.recipient == "ops@example.com"
    assert record.team_id == TEAM_A
    assert "Ana left team" in record.getMessage()
    assert "Bo, Cy" in record.getMessage()


async def test_no_merge_target_logs_both_names(caplog):
    notifier = LoggingAdminNotifier("ops@example.com")

    with caplog.at_level(logging.WARNING, logger=NOTIFICATION_LOGGER):
        await notifier.notify_no_merge_target(
            leaving_participant_name="Ana", sole_participant_name="Bo",
        )

    message = caplog.records[0].getMessage()
    assert "Ana" in message
    assert "Bo is now alone" in message


async def test_channel_failure_raises_notification_error():
    channel = MagicMock()
    cause = OSError("broken pipe")
    channel.warning.side_effect = cause

    with pytest.raises(NotificationError) as exc:
        await LoggingAdminNotifier("ops@example.com", channel).notify_no_merge_target(
            leaving_participant_name="Ana", sole_participant_name="Bo",
        )

    assert exc.value.__cause__ is cause
    assert exc.value.code == "NOTIFICATION_ERROR"
