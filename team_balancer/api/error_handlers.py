"""Error Handlers: map balancer failures to responses the event queue can act on.

Invariants:
    - Every error body carries `retryable`: True only for InfrastructureError
      (503 + Retry-After); domain (409) and validation (400) failures are final
    - Domain/validation failures log at WARNING, infrastructure at ERROR, each
      with error_code / event_type / team_id / participant_id extras
    - Catch-all -> 500, never leaks internal details

Design Decisions:
    - Retry hint lives here, not in core/errors.py: it is a delivery concern of
      the HTTP surface, the use cases only raise
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from team_balancer.core.errors import (
    ErrorSeverity, InfrastructureError, TeamBalancerError,
)

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = 5


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_balancer_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_balancer_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TeamBalancerError)
    async def balancer_error_handler(request: Request, exc: TeamBalancerError):
        retryable = isinstance(exc, InfrastructureError)
        level = logging.ERROR if retryable else logging.WARNING
        logger.log(
            level,
            f"{exc.code} on {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.code,
                "event_type": exc.context.event_type,
                "team_id": exc.context.team_id,
                "participant_id": exc.context.participant_id,
                "path": request.url.path,
            },
        )
        body = exc.to_response()
        body["error"]["retryable"] = retryable
        headers = {"Retry-After": str(RETRY_AFTER_SECONDS)} if retryable else None
        return JSONResponse(
            status_code=exc.http_status, content=body, headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed event envelope or body: redelivery cannot fix it."""
        logger.warning(
            f"Rejected payload on {request.url.path}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                    "retryable": False,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "retryable": False,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
