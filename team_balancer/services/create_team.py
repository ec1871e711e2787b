"""Create Team: seed a cohort with the next single-letter team."""

import logging

from team_balancer.core.repository_protocols import TeamRepository
from team_balancer.core.team import Team, create_team
from team_balancer.services.team_naming import allocate_team_name

logger = logging.getLogger(__name__)


class CreateTeamUseCase:

    def __init__(self, team_repository: TeamRepository):
        self.team_repository = team_repository

    async def execute(self) -> Team:
        name = await allocate_team_name(self.team_repository)
        team = create_team(name)
        await self.team_repository.save(team)
        logger.info(f"Team {team.name} created", extra={"team_id": team.id})
        return team
