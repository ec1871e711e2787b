"""Health & Readiness Probes: liveness plus balancer capacity for orchestration.

Invariants:
    - GET /health/ returns 200 while the process is up
    - GET /health/ready returns 503 when the database is unreachable
    - Readiness reports team count, single-letter names still free for splits,
      and whether the default cohort's balancing lock is currently held

Design Decisions:
    - Names remaining surfaced here: at 0 every further split fails with
      TEAM_NAMES_EXHAUSTED, and operators need to see that before it happens
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

import team_balancer.infrastructure.database as db_module
from team_balancer.api.dependencies import get_balancing_lock
from team_balancer.core.team_assignment import TEAM_NAME_ALPHABET
from team_balancer.infrastructure.team_repository import SqlTeamRepository
from team_balancer.services.balancing_lock import BalancingLock

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": "team-balancer"}


@router.get("/ready")
async def readiness_check(lock: BalancingLock = Depends(get_balancing_lock)):
    manager = db_module.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )

    async with manager.session() as db:
        teams = await SqlTeamRepository(db).find_all()
    names_remaining = len(TEAM_NAME_ALPHABET) - len(teams)
    if names_remaining == 0:
        logger.warning("All team names in use; further splits will fail")

    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "teams": len(teams),
        "team_names_remaining": names_remaining,
        "balancing_lock": "held" if lock.is_locked() else "free",
    }
