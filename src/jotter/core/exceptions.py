"""
Application exception hierarchy.

Services and repositories raise these; the handlers registered in
``jotter.main`` turn them into JSON error responses.

    JotterError (base)
    ├── UnauthenticatedError   → 401
    ├── ConflictError          → 409
    ├── ValidationFailedError  → 422
    ├── NotFoundError          → 404
    └── UnexpectedError        → 500
"""

from typing import Any, Dict, Optional


class JotterError(Exception):
    """
    Base exception for all Jotter application errors.

    Attributes:
        message: User-facing error description
        context: Extra debug info, logged but only returned for client errors
    """

    status_code: int = 500
    error_code: str = "unexpected_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthenticatedError(JotterError):
    """Caller identity is missing, malformed, expired or does not verify."""

    status_code = 401
    error_code = "unauthenticated"

    def __init__(
        self,
        message: str = "Authentication required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConflictError(JotterError):
    """A unique value (username, email) is already in use."""

    status_code = 409
    error_code = "conflict"

    def __init__(
        self,
        message: str = "Resource already exists",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ValidationFailedError(JotterError):
    """
    Raised when input breaks a business rule the client can fix.

    Schema-level problems are caught by pydantic first; this covers the
    checks services repeat before touching the store.
    """

    status_code = 422
    error_code = "validation_failed"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(JotterError):
    """
    The target does not exist for this caller.

    Also used when the record exists but belongs to someone else, so the
    two cases look the same from the outside.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class UnexpectedError(JotterError):
    """Storage or infrastructure failure. The client only sees a generic message."""

    status_code = 500
    error_code = "unexpected_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
