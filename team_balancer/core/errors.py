"""Error Hierarchy: typed, categorized exceptions for every balancer failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and domain errors are raised before any mutation is attempted
    - Infrastructure errors always carry the original cause
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with TeamBalancerError base: FastAPI global handler and the
      event dispatcher catch one type (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    NOTIFICATION = "notification"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    team_id: str | None = None
    participant_id: str | None = None
    event_type: str | None = None
    debug_info: dict[str, Any] | None = None


class TeamBalancerError(Exception):
    """Base exception for all team balancer errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "team_id": self.context.team_id,
                    "participant_id": self.context.participant_id,
                    "event_type": self.context.event_type,
                },
            }
        }


# ─── Validation Errors (400) ────────────────────────────────────

class ValidationError(TeamBalancerError):
    """A value failed its format rule (ids, team names)."""
    def __init__(
        self, code: str, field: str, value: object,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{code}: validation failed for {field}",
            code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field
        self.value = value


# ─── Domain Errors (409) ────────────────────────────────────────

class DomainError(TeamBalancerError):
    """Business rule violated; the use case aborted before mutating anything."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )


class NoAvailableTeamError(DomainError):
    """Every team is at maximum capacity (or no team exists)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No team is available for assignment.",
            "NO_AVAILABLE_TEAM", context,
        )


class TeamTooSmallToSplitError(DomainError):
    """Split requested for a team below the split threshold."""
    def __init__(self, member_count: int, context: ErrorContext | None = None):
        super().__init__(
            f"Team has {member_count} member(s); at least 5 are required to split.",
            "TEAM_MEMBER_COUNT_TOO_LOW_TO_SPLIT", context,
        )
        self.member_count = member_count


class TeamNamesExhaustedError(DomainError):
    """All 26 single-letter team names are in use."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No team names left (a-z are all in use).",
            "TEAM_NAMES_EXHAUSTED", context,
        )


class TeamNameAlreadyExistsError(DomainError):
    """Another team already holds the requested name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Team name '{name}' is already registered.",
            "TEAM_NAME_ALREADY_EXISTS", context,
        )
        self.name = name


class ParticipantNotAssignableError(DomainError):
    """Participant exists but its lifecycle state forbids a team assignment."""
    def __init__(
        self, participant_id: str, status: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Participant '{participant_id}' cannot be assigned while {status}.",
            "PARTICIPANT_NOT_ASSIGNABLE", context,
        )
        self.status = status


class ResourceNotFoundError(TeamBalancerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (503) ────────────────────────────────

class InfrastructureError(TeamBalancerError):
    """A port implementation failed; wraps the original cause."""
    def __init__(
        self,
        message: str,
        code: str,
        operation: str,
        cause: BaseException | None = None,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, category,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class DatabaseError(InfrastructureError):
    """Database operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", operation, cause,
            ErrorCategory.DATABASE, context,
        )


class NotificationError(InfrastructureError):
    """Admin notification could not be delivered."""
    def __init__(
        self,
        message: str,
        operation: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Admin notification {operation} failed: {message}",
            "NOTIFICATION_ERROR", operation, cause,
            ErrorCategory.NOTIFICATION, context,
        )
