"""
Users module interface.
"""

from typing import Protocol, runtime_checkable

from .models import User, RegisterUserRequest, RegisterUserResponse


@runtime_checkable
class IUserService(Protocol):
    """Interface for user operations."""

    async def register(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """
        Register a user and issue a bearer token.

        Raises:
            UserAlreadyExistsError: If phone or email is taken
        """
        ...

    async def get_user(self, user_id: int) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...
