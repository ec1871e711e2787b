"""SQL Team Repository: TeamRepository over the `teams` table.

Invariants:
    - save() is an upsert keyed on id and commits
    - Rows are re-validated through reconstruct_team on the way out
    - Duplicate names surface as TeamNameAlreadyExistsError (unique constraint)
    - Any other SQLAlchemyError becomes DatabaseError with the cause attached
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from team_balancer.core.domain_types import TeamId, TeamName
from team_balancer.core.errors import DatabaseError, TeamNameAlreadyExistsError
from team_balancer.core.team import Team, reconstruct_team
from team_balancer.models.team import TeamRow

logger = logging.getLogger(__name__)


class SqlTeamRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, team: Team) -> None:
        try:
            await self.db.merge(TeamRow(id=team.id, name=team.name))
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise TeamNameAlreadyExistsError(team.name) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError("Failed to save team", "save_team", e) from e

    async def find_by_id(self, id: TeamId) -> Team | None:
        try:
            row = await self.db.get(TeamRow, id)
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to load team", "find_team_by_id", e) from e
        return reconstruct_team(row.id, row.name) if row else None

    async def find_by_name(self, name: TeamName) -> Team | None:
        try:
            result = await self.db.execute(
                select(TeamRow).where(TeamRow.name == name),
            )
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to load team", "find_team_by_name", e) from e
        return reconstruct_team(row.id, row.name) if row else None

    async def find_all(self) -> list[Team]:
        try:
            result = await self.db.execute(select(TeamRow).order_by(TeamRow.name))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to list teams", "find_all_teams", e) from e
        return [reconstruct_team(r.id, r.name) for r in rows]
