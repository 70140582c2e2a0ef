"""
Base exception classes for the Life Lessons backend.

Each module defines its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status (see api/errors.py).
"""

from typing import Optional, Any


class LessonsError(Exception):
    """
    Base exception for all Life Lessons errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(LessonsError):
    """Resource not found."""

    pass


class ValidationError(LessonsError):
    """Input validation failed."""

    pass


class AuthenticationError(LessonsError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(LessonsError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(LessonsError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class InternalError(LessonsError):
    """Unexpected internal state that must be surfaced, not swallowed."""

    pass
