"""
Base exception classes for the Passhub backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class PasshubError(Exception):
    """
    Base exception for all Passhub errors.

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


class NotFoundError(PasshubError):
    """Resource not found (or not visible to the caller)."""

    pass


class ValidationError(PasshubError):
    """Input validation failed."""

    pass


class ConflictError(PasshubError):
    """Request conflicts with the current state of a resource."""

    pass


class AuthenticationError(PasshubError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(PasshubError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(PasshubError):
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


class StoreError(ExternalServiceError):
    """The persistence store rejected or failed a query."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, service="store", code=code or "STORE_ERROR", details=details)
