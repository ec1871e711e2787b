"""SQL Team Member Count Query: active-member read model over `participants`.

Invariants:
    - Only participants with status ACTIVE and a non-null team_id are counted
    - get_all_team_member_counts lists every persisted team (0 when empty) plus
      any team id referenced by an active participant
    - list_teams_with_counts (admin listing) includes empty teams with count 0
    - SQLAlchemyError -> DatabaseError with the cause attached
"""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from team_balancer.core.domain_types import ParticipantStatus, TeamId
from team_balancer.core.errors import DatabaseError
from team_balancer.core.repository_protocols import TeamMember, TeamMemberCount
from team_balancer.models.participant import ParticipantRow
from team_balancer.models.team import TeamRow

_ACTIVE = ParticipantStatus.ACTIVE.value


class SqlTeamMemberCountQuery:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_team_member_counts(self) -> list[TeamMemberCount]:
        query = (
            select(ParticipantRow.team_id, func.count(ParticipantRow.id))
            .where(ParticipantRow.team_id.isnot(None))
            .where(ParticipantRow.status == _ACTIVE)
            .group_by(ParticipantRow.team_id)
        )
        try:
            grouped = (await self.db.execute(query)).all()
            team_ids = (await self.db.execute(select(TeamRow.id))).scalars().all()
        except SQLAlchemyError as e:
            raise DatabaseError(
                "Failed to count team members", "team_member_counts", e,
            ) from e
        counts = {team_id: int(count) for team_id, count in grouped}
        for team_id in team_ids:
            counts.setdefault(team_id, 0)
        return [
            TeamMemberCount(team_id=TeamId(team_id), count=count)
            for team_id, count in counts.items()
        ]

    async def get_team_member_count(self, team_id: TeamId) -> int:
        query = (
            select(func.count(ParticipantRow.id))
            .where(ParticipantRow.team_id == team_id)
            .where(ParticipantRow.status == _ACTIVE)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise DatabaseError(
                "Failed to count team members", "team_member_count", e,
            ) from e
        return int(result.scalar_one() or 0)

    async def get_team_members(self, team_id: TeamId) -> list[TeamMember]:
        query = (
            select(ParticipantRow.id, ParticipantRow.name)
            .where(ParticipantRow.team_id == team_id)
            .where(ParticipantRow.status == _ACTIVE)
            .order_by(ParticipantRow.name)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise DatabaseError(
                "Failed to load team members", "team_members", e,
            ) from e
        return [
            TeamMember(participant_id=pid, name=name)
            for pid, name in result.all()
        ]

    async def list_teams_with_counts(self) -> list[tuple[str, str, int]]:
        """(team_id, name, active_count) for every persisted team, by name."""
        active_count = func.count(ParticipantRow.id)
        query = (
            select(TeamRow.id, TeamRow.name, active_count)
            .outerjoin(
                ParticipantRow,
                (ParticipantRow.team_id == TeamRow.id)
                & (ParticipantRow.status == _ACTIVE),
            )
            .group_by(TeamRow.id, TeamRow.name)
            .order_by(TeamRow.name)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to list teams", "list_teams", e) from e
        return [(tid, name, int(count)) for tid, name, count in result.all()]
