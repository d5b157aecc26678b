"""
Authentication service implementation.

Signs and validates HS256 JWTs whose subject is the user's row id.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses a shared secret from settings; there is no session storage.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """Validate a JWT token and return the authenticated user."""
        if not token:
            raise MissingTokenError()

        if not self._settings.jwt_secret:
            raise InvalidTokenError("Server authentication not configured")

        try:
            payload = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
            jwt_payload = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        if not jwt_payload.sub.isdigit():
            raise InvalidTokenError("Invalid token subject")

        return AuthenticatedUser(
            id=int(jwt_payload.sub),
            issued_at=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
        )

    def issue_token(self, user_id: int) -> str:
        """Issue a token valid for jwt_expire_hours."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(hours=self._settings.jwt_expire_hours)).timestamp()),
        }
        return jwt.encode(payload, self._settings.jwt_secret, algorithm=self._settings.jwt_algorithm)


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
