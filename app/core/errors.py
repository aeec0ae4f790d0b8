"""Error Hierarchy: typed, categorized exceptions for all Publish failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; StorageFault (500-level) is critical
    - Validation and permission errors are raised before any storage mutation
    - to_response() produces the {"ok": false, "msg": ...} REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PublishError base: FastAPI global handler catches all
    - PermissionDeniedError instead of shadowing the builtin PermissionError
    - StorageFault carries the failed operation name for logs only; its public
      message stays generic
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


INTERNAL_ERROR_MESSAGE = "Internal Error. Please try again later."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PERMISSION = "permission"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None


class PublishError(Exception):
    """Base exception for all Publish errors."""

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
    def public_message(self) -> str:
        """Message safe to show to the author."""
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "ok": False,
            "msg": self.public_message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "field": self.context.field_name,
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class FieldValidationError(PublishError):
    """A submitted page field failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field


class PageNotFoundError(PublishError):
    """No page matches the given name or id."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


class PermissionDeniedError(PublishError):
    """Supplied id does not match the stored id for the page name."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Permission denied.", "PERMISSION_DENIED", ErrorCategory.PERMISSION,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageFault(PublishError):
    """Commit, read, or (de)serialization failure in the page store."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_FAULT", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation

    @property
    def public_message(self) -> str:
        return INTERNAL_ERROR_MESSAGE
