"""ORM Models: SQLAlchemy declarative models for persisted state.

Invariants:
    - All models inherit from Base (db/base.py)
    - teams holds the Team aggregate; participants holds membership pointers

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from team_balancer.models.team import TeamRow  # noqa: F401
from team_balancer.models.participant import ParticipantRow  # noqa: F401
