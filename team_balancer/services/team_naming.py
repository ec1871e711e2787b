"""Team Naming: allocate the next free single-letter name and guard uniqueness.

Invariants:
    - Names come from generate_next_team_name over ALL persisted teams
    - A name taken by a concurrent creator between find_all() and save() is
      rejected with TEAM_NAME_ALREADY_EXISTS

Design Decisions:
    - Shared by SplitTeamUseCase and CreateTeamUseCase so both naming paths
      run the same uniqueness check
"""

from team_balancer.core.domain_types import TeamName
from team_balancer.core.errors import TeamNameAlreadyExistsError
from team_balancer.core.repository_protocols import TeamRepository
from team_balancer.core.team_assignment import generate_next_team_name


async def ensure_team_name_not_duplicated(
    team_repository: TeamRepository, name: TeamName,
) -> None:
    """Re-check a freshly allocated name right before it is saved.

    The name was derived from find_all(), so a hit here means a concurrent
    creator (another process, or a writer outside the balancing lock) took it
    in between. The unique constraint behind TeamRepository.save still catches
    the narrower window after this check.
    """
    existing = await team_repository.find_by_name(name)
    if existing is not None:
        raise TeamNameAlreadyExistsError(name)


async def allocate_team_name(team_repository: TeamRepository) -> TeamName:
    """Lowest unused letter among the persisted teams, checked for uniqueness."""
    teams = await team_repository.find_all()
    name = generate_next_team_name(t.name for t in teams)
    await ensure_team_name_not_duplicated(team_repository, name)
    return name
