"""
Users service implementation.
"""

import logging

from modules.auth.interfaces import IAuthService

from .interfaces import IUserService
from .models import User, RegisterUserRequest, RegisterUserResponse
from .repository import UserRepository
from .exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """User registration and lookup backed by UserRepository."""

    def __init__(self, repository: UserRepository, auth: IAuthService):
        self._repository = repository
        self._auth = auth

    async def register(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Create the user row, then mint a token for it."""
        user = self._repository.create(request.name, request.phone, request.email)
        logger.info("Registered user %s", user.id)
        return RegisterUserResponse(id=user.id, token=self._auth.issue_token(user.id))

    async def get_user(self, user_id: int) -> User:
        """Get a user by id."""
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
