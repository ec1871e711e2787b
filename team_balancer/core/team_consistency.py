"""Team Consistency Results: tagged outcomes of reconciling a team after a departure.

Invariants:
    - Every result carries a ConsistencyResultType tag in `type`
    - Results are frozen; use cases build them, callers only read them
    - TeamOverMaximum is declared for completeness; the leave flow never returns it

Design Decisions:
    - One frozen dataclass per variant + a Union alias, instead of a dict with
      optional keys: the type checker knows which fields exist per tag
    - to_dict() keeps the wire shape used by the event route stable
"""

from dataclasses import dataclass, field
from typing import Union

from team_balancer.core.domain_types import ConsistencyResultType, TeamId


@dataclass(frozen=True)
class ParticipantInfo:
    id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class TeamConsistencyOK:
    type: ConsistencyResultType = field(default=ConsistencyResultType.OK, init=False)

    def to_dict(self) -> dict:
        return {"type": self.type.value}


@dataclass(frozen=True)
class TeamUnderMinimum:
    team_id: TeamId
    member_count: int
    remaining_members: tuple[ParticipantInfo, ...]
    type: ConsistencyResultType = field(
        default=ConsistencyResultType.TEAM_UNDER_MINIMUM, init=False,
    )

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "team_id": self.team_id,
            "member_count": self.member_count,
            "remaining_members": [m.to_dict() for m in self.remaining_members],
        }


@dataclass(frozen=True)
class TeamNeedsMerge:
    team_id: TeamId
    sole_participant: ParticipantInfo
    type: ConsistencyResultType = field(
        default=ConsistencyResultType.TEAM_NEEDS_MERGE, init=False,
    )

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "team_id": self.team_id,
            "sole_participant": self.sole_participant.to_dict(),
        }


@dataclass(frozen=True)
class NoMergeTarget:
    sole_participant: ParticipantInfo
    type: ConsistencyResultType = field(
        default=ConsistencyResultType.NO_MERGE_TARGET, init=False,
    )

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "sole_participant": self.sole_participant.to_dict(),
        }


@dataclass(frozen=True)
class TeamOverMaximum:
    team_id: TeamId
    member_count: int
    type: ConsistencyResultType = field(
        default=ConsistencyResultType.TEAM_OVER_MAXIMUM, init=False,
    )

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "team_id": self.team_id,
            "member_count": self.member_count,
        }


TeamConsistencyCheckResult = Union[
    TeamConsistencyOK,
    TeamUnderMinimum,
    TeamNeedsMerge,
    NoMergeTarget,
    TeamOverMaximum,
]


def is_team_consistency_ok(result: TeamConsistencyCheckResult) -> bool:
    return result.type is ConsistencyResultType.OK
