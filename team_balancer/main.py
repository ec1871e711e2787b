"""Team Balancer API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TeamBalancerError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import team_balancer.infrastructure.database as db_module
from team_balancer.api.error_handlers import register_error_handlers
from team_balancer.api.routes import health, integration_events, teams
from team_balancer.config import get_settings
from team_balancer.infrastructure.database import init_db
from team_balancer.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Team balancer API started")
    yield
    if db_module.db_manager:
        await db_module.db_manager.dispose()
    logger.info("Team balancer API shutting down")


app = FastAPI(
    title="Team Balancer API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(integration_events.router)
app.include_router(teams.router)

register_error_handlers(app)
