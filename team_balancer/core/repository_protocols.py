"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Implementations raise InfrastructureError (with cause) on storage or
      delivery failure, never a raw driver exception

Design Decisions:
    - Protocol over ABC: structural subtyping, AsyncMock fakes satisfy them in tests
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the pure functions in core/team_assignment.py are never async; the
      use cases orchestrate the awaits around them
"""

from dataclasses import dataclass
from typing import Protocol

from team_balancer.core.domain_types import TeamId, TeamName
from team_balancer.core.team import Team


@dataclass(frozen=True)
class TeamMemberCount:
    """Active-member count of one team, as seen by the participant store."""
    team_id: TeamId
    count: int


@dataclass(frozen=True)
class TeamMember:
    """Active member of a team (read model over the participant store)."""
    participant_id: str
    name: str


class TeamMemberCountQuery(Protocol):
    """Read model over participant storage: active members grouped by team."""
    async def get_all_team_member_counts(self) -> list[TeamMemberCount]: ...
    async def get_team_member_count(self, team_id: TeamId) -> int: ...
    async def get_team_members(self, team_id: TeamId) -> list[TeamMember]: ...


class ParticipantAssignment(Protocol):
    """Mutates a participant's team pointer in the participant domain."""
    async def assign_to_team(self, participant_id: str, team_id: TeamId) -> None: ...


class AdminNotifier(Protocol):
    """Escalation channel towards cohort administrators."""
    async def notify_team_under_minimum(
        self,
        leaving_participant_name: str,
        team_id: TeamId,
        current_member_count: int,
        remaining_participant_names: list[str],
    ) -> None: ...
    async def notify_no_merge_target(
        self, leaving_participant_name: str, sole_participant_name: str,
    ) -> None: ...


class TeamRepository(Protocol):
    """Contract for team persistence. Stores id and name only."""
    async def save(self, team: Team) -> None: ...
    async def find_by_id(self, id: TeamId) -> Team | None: ...
    async def find_by_name(self, name: TeamName) -> Team | None: ...
    async def find_all(self) -> list[Team]: ...
