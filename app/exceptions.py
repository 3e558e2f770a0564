# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a machine-readable code and, where useful, a suggestion
# telling the client how to recover.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class CivicException(Exception):
    """
    Base exception for the CivicMoncho API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CIVIC_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Generic HTTP-shaped Exceptions
# =============================================================================

class UnauthorizedError(CivicException):
    """Raised when an operation needs a logged-in user."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            code="UNAUTHORIZED",
            status_code=401,
            suggestion="Log in via POST /api/auth/login and retry",
        )


class ForbiddenError(CivicException):
    """Raised when the user is logged in but not allowed to do this."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(
            message=message,
            code="FORBIDDEN",
            status_code=403,
        )


class NotFoundError(CivicException):
    """Raised when a referenced row doesn't exist."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
            details=details,
        )


class ConflictError(CivicException):
    """Raised when a write would duplicate existing state."""

    def __init__(
        self,
        message: str,
        code: str = "CONFLICT",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=409,
            details=details,
        )


class BadRequestError(CivicException):
    """Raised when the request is well-formed but violates a domain rule."""

    def __init__(
        self,
        message: str,
        code: str = "BAD_REQUEST",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=400,
            suggestion=suggestion,
            details=details,
        )


# =============================================================================
# Action (vote / participation) Exceptions
# =============================================================================

class AlreadyActedError(ConflictError):
    """Raised when a user repeats a once-per-user action."""

    def __init__(self, message: str, kind: str, target_id: str):
        super().__init__(
            message=message,
            code="ALREADY_ACTED",
            details={"kind": kind, "target_id": target_id},
        )


class ActionNotFoundError(NotFoundError):
    """Raised when undoing an action the user never performed."""

    def __init__(self, message: str, kind: str, target_id: str):
        super().__init__(
            message=message,
            details={"kind": kind, "target_id": target_id},
        )


class EventEndedError(BadRequestError):
    """Raised when joining or leaving an event whose date has passed."""

    def __init__(self, event_id: str, event_date: str):
        super().__init__(
            message="This event has ended. Participation is no longer available.",
            code="EVENT_ENDED",
            details={"event_id": event_id, "date": event_date},
        )


# =============================================================================
# Account Exceptions
# =============================================================================

class DuplicateRegistrationError(ConflictError):
    """Raised when email, mobile or ID number is already registered or pending."""

    def __init__(self, message: str, field: str):
        super().__init__(
            message=message,
            code="DUPLICATE_REGISTRATION",
            details={"field": field},
        )


class InvalidCredentialsError(UnauthorizedError):
    """Raised on unknown username or wrong password."""

    def __init__(self):
        super().__init__(message="Invalid credentials")


# =============================================================================
# Exception Handlers
# =============================================================================

async def civic_exception_handler(
    request: Request,
    exc: CivicException
) -> JSONResponse:
    """
    Convert CivicException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
