"""
Users module.

Handles attendee/organizer registration and profile lookup.

Public API:
- IUserService: Interface for user operations
- User: Stored user profile
- RegisterUserRequest / RegisterUserResponse
"""

from .interfaces import IUserService
from .models import User, RegisterUserRequest, RegisterUserResponse
from .exceptions import UserNotFoundError, UserAlreadyExistsError

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "RegisterUserRequest",
    "RegisterUserResponse",
    # Exceptions
    "UserNotFoundError",
    "UserAlreadyExistsError",
]
