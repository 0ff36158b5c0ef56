"""Error Hierarchy — typed, categorized exceptions for every directory failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are raised before any upstream call
    - Upstream errors (500-level) carry the observed upstream status when one exists
    - to_response() produces the REST envelope used by the global handler

Design Decisions:
    - Single hierarchy with DirectoryError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - MissingArgumentError separate from InvalidInputError: "not supplied" and
      "supplied but invalid" are different caller mistakes
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    employee_id: str | None = None
    upstream_status: int | None = None


class DirectoryError(Exception):
    """Base exception for all directory facade errors."""

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
                    "operation": self.context.operation,
                    "employee_id": self.context.employee_id,
                    "upstream_status": self.context.upstream_status,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidInputError(DirectoryError):
    """Caller-supplied data failed a documented constraint."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class MissingArgumentError(DirectoryError):
    """A required argument was not supplied at all."""
    def __init__(self, argument: str, context: ErrorContext | None = None):
        super().__init__(
            f"Required argument '{argument}' was not supplied",
            "MISSING_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


class ResourceNotFoundError(DirectoryError):
    """Requested resource does not exist upstream."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found with ID: {resource_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_id = resource_id


# ─── Upstream Errors (500-level) ────────────────────────────────

class UpstreamFailureError(DirectoryError):
    """Upstream call failed or returned data that breaks the success contract."""
    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_status = upstream_status
        super().__init__(
            message, "UPSTREAM_FAILURE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.upstream_status = upstream_status
