"""Error Hierarchy — typed, categorized exceptions for all DDate failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - A raised domain error means the store was not mutated
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with DDateError base: FastAPI global handler catches all (ADR: uniform error shape)
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
    EXTERNAL = "external"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    target_id: str | None = None
    debug_info: dict[str, Any] | None = None


class DDateError(Exception):
    """Base exception for all DDate errors."""

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
                    "user_id": self.context.user_id,
                    "target_id": self.context.target_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ProfileValidationError(DDateError):
    """Profile input or pagination parameters failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field"] = self.field
        return response


class ProfileNotFoundError(DDateError):
    """No profile is stored under the requested id."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            f"Profile '{user_id}' not found",
            "PROFILE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.user_id = user_id


class ProfileAlreadyExistsError(DDateError):
    """The id is already reserved, by an active or an inactive profile."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            f"Profile with id '{user_id}' already exists",
            "PROFILE_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.user_id = user_id


class ProfileInactiveError(DDateError):
    """Profile exists but was deactivated."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            f"Profile '{user_id}' is inactive",
            "PROFILE_INACTIVE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.user_id = user_id


class PageOutOfRangeError(DDateError):
    """Requested page starts past the last available item."""
    def __init__(self, page: int, total: int, context: ErrorContext | None = None):
        super().__init__(
            f"Page {page} is out of range ({total} item(s) available)",
            "PAGE_OUT_OF_RANGE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.page = page
        self.total = total


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DDateError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class IdentifierGenerationError(DDateError):
    """A fresh profile id could not be obtained."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Failed to generate profile id: {message}",
            "ID_GENERATION_FAILED", ErrorCategory.EXTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
