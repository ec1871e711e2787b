"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - TeamId and ParticipantId are UUID-formatted strings (validated in core/team.py)
    - TeamName is exactly one lowercase ASCII letter
    - Capacity band: MIN_TEAM_SIZE <= active members <= MAX_TEAM_SIZE
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Ids stay strings (not uuid.UUID): the participant store owns the format
      and hands them to us as text
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TeamId = NewType("TeamId", str)
ParticipantId = NewType("ParticipantId", str)


# ─── Value Types ─────────────────────────────────────────────────

TeamName = NewType("TeamName", str)     # a-z, single letter


# ─── Capacity ────────────────────────────────────────────────────

MIN_TEAM_SIZE: int = 2
MAX_TEAM_SIZE: int = 4
SPLIT_THRESHOLD: int = 5


# ─── Enums ───────────────────────────────────────────────────────

class ParticipantStatus(str, Enum):
    """Participant lifecycle states as stored by the participant domain."""
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    WITHDRAWN = "WITHDRAWN"


class ConsistencyResultType(str, Enum):
    """Outcome tags for a team consistency check after a departure."""
    OK = "OK"
    TEAM_UNDER_MINIMUM = "TEAM_UNDER_MINIMUM"
    TEAM_NEEDS_MERGE = "TEAM_NEEDS_MERGE"
    NO_MERGE_TARGET = "NO_MERGE_TARGET"
    TEAM_OVER_MAXIMUM = "TEAM_OVER_MAXIMUM"


class IntegrationEventType(str, Enum):
    """Participant lifecycle events the balancer reacts to."""
    PARTICIPANT_SUSPENDED = "PARTICIPANT_SUSPENDED"
    PARTICIPANT_WITHDRAWN = "PARTICIPANT_WITHDRAWN"
    PARTICIPANT_REACTIVATED = "PARTICIPANT_REACTIVATED"
