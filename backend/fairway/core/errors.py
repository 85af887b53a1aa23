"""Error Hierarchy: typed, categorized exceptions for all league failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable by a further user action
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FairwayError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tournament_id: str | None = None
    tour_card_id: str | None = None
    team_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class FairwayError(Exception):
    """Base exception for all league errors."""

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

    @property
    def recoverable(self) -> bool:
        return self.http_status < 500

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "tournament_id": self.context.tournament_id,
                    "tour_card_id": self.context.tour_card_id,
                    "team_id": self.context.team_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class PickValidationError(FairwayError):
    """Submitted golfer list breaks the 10-golfer / 2-per-group rules."""
    def __init__(self, message: str, field: str = "golfer_ids", context: ErrorContext | None = None):
        super().__init__(
            message, "PICK_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class EmptyPickPoolError(FairwayError):
    """Tournament has no golfers to pick from yet."""
    def __init__(self, tournament_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(tournament_id=tournament_id)
        super().__init__(
            "No golfers available for this tournament yet.",
            "EMPTY_PICK_POOL", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.INFO, ctx, 400,
        )


class InvalidPickerTransitionError(FairwayError):
    """Picker state machine asked to move along an edge it does not have."""
    def __init__(self, phase: str, action: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cannot {action} while picker is {phase}",
            "INVALID_PICKER_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.phase = phase
        self.action = action


class ResourceNotFoundError(FairwayError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class TeamLockedError(FairwayError):
    """Team edits attempted after the tournament started."""
    def __init__(self, tournament_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(tournament_id=tournament_id)
        super().__init__(
            "Picks are locked: the tournament has already started.",
            "TEAM_LOCKED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(FairwayError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
