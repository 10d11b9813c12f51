"""Error Hierarchy — typed, categorized exceptions for every availability failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors are 400-level; store and conversion errors are 500-level
    - to_response() produces the REST error envelope
    - No driver details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with AvailabilityError base: one global handler catches all
    - ErrorContext as dataclass: request data for logs without coupling to logging
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
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    instance_id: str | None = None
    username: str | None = None
    debug_info: dict[str, Any] | None = None


class AvailabilityError(Exception):
    """Base exception for all availability service errors."""

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
                    "instance_id": self.context.instance_id,
                    "username": self.context.username,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class MissingFieldsError(AvailabilityError):
    """username or binaryWeeks absent/empty."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing required fields: {', '.join(fields)}",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.fields = fields


class InvalidWeekFormatError(AvailabilityError):
    """A week is not exactly 7 characters of '0'/'1'."""
    def __init__(
        self, week: object, index: int | None = None,
        context: ErrorContext | None = None,
    ):
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"Invalid binary week{where}: {week!r} (expected 7 characters of 0/1)",
            "INVALID_FORMAT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.week = week
        self.index = index


class DuplicateUsernameError(AvailabilityError):
    """(instanceId, username) pair already stored."""
    def __init__(
        self, instance_id: str, username: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.instance_id = instance_id
        ctx.username = username
        super().__init__(
            "Username already exists for this instance",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 400,
        )


class ResourceNotFoundError(AvailabilityError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class CorruptWeekValueError(AvailabilityError):
    """Stored decimal week is not a digit token in 0..127."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Stored week value {value!r} is outside the 7-bit range",
            "CORRUPT_RECORD", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.value = value


class WeekConversionError(AvailabilityError):
    """Encoding a validated week failed."""
    def __init__(self, week: object, context: ErrorContext | None = None):
        super().__init__(
            "There was an issue during the conversion process",
            "CONVERSION_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.week = week


class DatabaseError(AvailabilityError):
    """Store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class StoreTimeoutError(DatabaseError):
    """Store operation exceeded its deadline and was abandoned."""
    def __init__(
        self, operation: str, timeout_seconds: float,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"no answer within {timeout_seconds:g}s", operation, context,
        )
        self.code = "STORE_TIMEOUT"
        self.category = ErrorCategory.TIMEOUT
        self.timeout_seconds = timeout_seconds
