"""Team ORM: persists the Team aggregate (id + name only).

Invariants:
    - id is a 36-char UUID string primary key
    - name is a single lowercase letter, UNIQUE across all rows
    - No membership columns: rosters live in participants.team_id

Design Decisions:
    - String ids over native UUID: same representation on PostgreSQL and SQLite
    - Unique constraint backs the in-app uniqueness check against races
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from team_balancer.db.base import Base


class TeamRow(Base):
    """Persisted team."""
    __tablename__ = "teams"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(1), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
