"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated user.

        Args:
            token: JWT issued at registration

        Returns:
            AuthenticatedUser with the user's row id

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    def issue_token(self, user_id: int) -> str:
        """
        Issue a signed bearer token for a user.

        Args:
            user_id: users.id of the token subject

        Returns:
            Encoded JWT string
        """
        ...
