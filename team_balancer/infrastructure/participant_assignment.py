"""SQL Participant Assignment: writes a participant's team pointer.

Invariants:
    - Unknown participant -> ResourceNotFoundError, nothing written
    - Participant not ACTIVE -> ParticipantNotAssignableError, nothing written
    - Successful assignment commits immediately (one unit of work per command)
    - SQLAlchemyError -> DatabaseError with the cause attached
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from team_balancer.core.domain_types import ParticipantStatus, TeamId
from team_balancer.core.errors import (
    DatabaseError, ErrorContext, ParticipantNotAssignableError, ResourceNotFoundError,
)
from team_balancer.models.participant import ParticipantRow

logger = logging.getLogger(__name__)


class SqlParticipantAssignment:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def assign_to_team(self, participant_id: str, team_id: TeamId) -> None:
        try:
            participant = await self.db.get(ParticipantRow, participant_id)
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to load participant", "find_participant", e) from e

        ctx = ErrorContext(participant_id=participant_id, team_id=team_id)
        if participant is None:
            raise ResourceNotFoundError("Participant", participant_id, ctx)
        if participant.status != ParticipantStatus.ACTIVE.value:
            raise ParticipantNotAssignableError(participant_id, participant.status, ctx)

        try:
            participant.team_id = team_id
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError("Failed to assign participant", "assign_to_team", e) from e

        logger.debug(
            "Participant team pointer updated",
            extra={"participant_id": participant_id, "team_id": team_id},
        )
