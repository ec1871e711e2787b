"""Participant ORM: projection of the participant store read and written by the balancer.

Invariants:
    - team_id is the sole source of truth for team membership
    - Only status == ACTIVE participants count towards a team's population
    - The balancer writes team_id only; status transitions belong to the participant domain

Design Decisions:
    - No ForeignKey from team_id to teams.id: the participant store is a separate
      aggregate and may reference a team before the balancer has seen it
    - Index on (team_id, status): every balancing query filters on both
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from team_balancer.core.domain_types import ParticipantStatus
from team_balancer.db.base import Base


class ParticipantRow(Base):
    """Participant as seen by the balancer."""
    __tablename__ = "participants"
    __table_args__ = (
        Index("ix_participants_team_id_status", "team_id", "status"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ParticipantStatus.PENDING.value,
    )
    team_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
