"""Team Aggregate: identity, naming rules, and the frozen Team entity.

Invariants:
    - TeamId / ParticipantId match the RFC 4122 textual UUID form (versions 1-5)
    - TeamName is exactly one character in a-z
    - Team is immutable after creation; membership is NOT stored here
      (the participant store's team pointer is the single source of truth)

Design Decisions:
    - Factory functions raise ValidationError instead of returning error dicts:
      identifiers are checked at the edge, before any use case step runs
    - reconstruct_team re-validates persisted rows so a corrupt row fails loudly
"""

import re
import uuid
from dataclasses import dataclass

from team_balancer.core.domain_types import ParticipantId, TeamId, TeamName
from team_balancer.core.errors import ValidationError


UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-5][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$",
)
LOWERCASE_ALPHABETIC_PATTERN = re.compile(r"^[a-z]+$")
TEAM_NAME_LENGTH: int = 1


def team_id(value: str) -> TeamId:
    """Validate a team identifier."""
    if not isinstance(value, str) or not UUID_PATTERN.match(value):
        raise ValidationError("INVALID_TEAM_ID_FORMAT", "TeamId", value)
    return TeamId(value)


def participant_id(value: str) -> ParticipantId:
    """Validate a participant identifier."""
    if not isinstance(value, str) or not UUID_PATTERN.match(value):
        raise ValidationError("INVALID_PARTICIPANT_ID_FORMAT", "ParticipantId", value)
    return ParticipantId(value)


def team_name(value: str) -> TeamName:
    """Validate a team name: non-empty, one character, lowercase a-z."""
    if not isinstance(value, str) or not value:
        raise ValidationError("TEAM_NAME_EMPTY", "TeamName", value)
    if len(value) > TEAM_NAME_LENGTH:
        raise ValidationError("TEAM_NAME_TOO_LONG", "TeamName", value)
    if not LOWERCASE_ALPHABETIC_PATTERN.match(value):
        raise ValidationError("TEAM_NAME_NOT_LOWERCASE_ALPHABETIC", "TeamName", value)
    return TeamName(value)


def generate_team_id() -> TeamId:
    return TeamId(str(uuid.uuid4()))


@dataclass(frozen=True)
class Team:
    """A team: id and name only. Created once, never mutated."""
    id: TeamId
    name: TeamName


def create_team(name: TeamName) -> Team:
    """Create a brand-new team with a freshly generated id."""
    return Team(id=generate_team_id(), name=team_name(name))


def reconstruct_team(id: str, name: str) -> Team:
    """Rebuild a Team from persisted values, re-validating both fields."""
    return Team(id=team_id(id), name=team_name(name))
