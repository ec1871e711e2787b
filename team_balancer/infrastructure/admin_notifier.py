"""Logging Admin Notifier: delivers escalation messages through a dedicated logger.

Invariants:
    - Each notification is one WARNING record on the `team_balancer.notifications`
      logger, carrying recipient, subject, and body
    - Delivery failures surface as NotificationError with the cause attached

Design Decisions:
    - Logger as the delivery channel: stands in for the email service the
      participant platform owns; swapping in SMTP means implementing
      AdminNotifier, not touching use cases
"""

import logging

from team_balancer.core.domain_types import TeamId
from team_balancer.core.errors import ErrorContext, NotificationError

NOTIFICATION_LOGGER = "team_balancer.notifications"


class LoggingAdminNotifier:

    def __init__(self, recipient: str, channel: logging.Logger | None = None):
        self.recipient = recipient
        self.channel = channel or logging.getLogger(NOTIFICATION_LOGGER)

    async def notify_team_under_minimum(
        self,
        leaving_participant_name: str,
        team_id: TeamId,
        current_member_count: int,
        remaining_participant_names: list[str],
    ) -> None:
        subject = "Team below minimum size"
        body = (
            f"{leaving_participant_name} left team {team_id}. "
            f"{current_member_count} member(s) remain: "
            f"{', '.join(remaining_participant_names) or '(none)'}."
        )
        self._deliver(subject, body, ErrorContext(team_id=team_id))

    async def notify_no_merge_target(
        self, leaving_participant_name: str, sole_participant_name: str,
    ) -> None:
        subject = "No merge target for sole team member"
        body = (
            f"{leaving_participant_name} left; {sole_participant_name} is now alone "
            f"and every other team is full. Manual reassignment required."
        )
        self._deliver(subject, body, ErrorContext())

    def _deliver(self, subject: str, body: str, ctx: ErrorContext) -> None:
        try:
            self.channel.warning(
                f"[admin] {subject}: {body}",
                extra={"recipient": self.recipient, "team_id": ctx.team_id},
            )
        except Exception as e:
            raise NotificationError(str(e), "deliver", e, ctx) from e
