"""Error Hierarchy - typed, categorized exceptions for all marketplace failure modes.

Invariants:
    - Every domain error has a kind (MessageKind), code, category and severity
    - kind is one of the five closed variants; infrastructure errors carry kind=None
    - to_variant() produces the tagged {kind: message} form
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DatamartError base: the FastAPI global handler catches all
    - PaymentFailedError / PaymentCompletedError are declared for the payment
      integration but raised by no current operation
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from datamart.core.domain_types import MessageKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PAYMENT = "payment"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: str | None = None
    caller: str | None = None


class DatamartError(Exception):
    """Base exception for all Datamart errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        kind: MessageKind | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.kind = kind

    def to_variant(self) -> dict[str, str]:
        """Tagged form: {"InvalidPayload": "..."}."""
        key = self.kind.value if self.kind else self.code
        return {key: self.message}

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "kind": self.kind.value if self.kind else None,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "variant": self.to_variant(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundError(DatamartError):
    """Record absent, or the payload precondition (non-empty object) failed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404, MessageKind.NOT_FOUND,
        )


class InvalidPayloadError(DatamartError):
    """Field validation failed or an identifier is malformed."""
    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, MessageKind.INVALID_PAYLOAD,
        )
        self.errors = errors or []

    @classmethod
    def from_errors(
        cls, errors: list[str], context: ErrorContext | None = None,
    ) -> "InvalidPayloadError":
        """Aggregate every validation failure into one error."""
        return cls(
            f"Invalid payload. Errors=[{', '.join(errors)}]", errors, context,
        )


class AuthenticationFailedError(DatamartError):
    """Caller is not the owner/seller of the record."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403, MessageKind.AUTHENTICATION_FAILED,
        )


class PaymentFailedError(DatamartError):
    """Reserved for the ledger integration."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PAYMENT_FAILED", ErrorCategory.PAYMENT,
            ErrorSeverity.ERROR, context, 402, MessageKind.PAYMENT_FAILED,
        )


class PaymentCompletedError(DatamartError):
    """Reserved for the ledger integration."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PAYMENT_COMPLETED", ErrorCategory.PAYMENT,
            ErrorSeverity.INFO, context, 409, MessageKind.PAYMENT_COMPLETED,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DatamartError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
