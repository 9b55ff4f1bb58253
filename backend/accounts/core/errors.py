"""Error Hierarchy — typed, categorized exceptions for request-scoped failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the Error wire shape: {"code": <int>, "message": <str>}
    - A failure fails one request; nothing here terminates the process

Design Decisions:
    - Single hierarchy with ServiceError base: the global handler catches all of it
    - Numeric wire code mirrors the HTTP status so clients can branch on either
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class ServiceError(Exception):
    """Base exception for all accounts service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the Error JSON body."""
        return {"code": self.http_status, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestDecodeError(ServiceError):
    """Request body or path parameter could not be decoded."""
    def __init__(self, message: str = "Unable to decode the request body."):
        super().__init__(
            message, "DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class InvalidCredentialsError(ServiceError):
    """No user matches the supplied login/password."""
    def __init__(self):
        super().__init__(
            "Invalid login or password.", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, 401,
        )


class ResourceNotFoundError(ServiceError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ServiceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
