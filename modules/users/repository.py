"""
User repository for database access.

Encapsulates all Supabase queries against the users table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.exceptions import PasshubError
from shared.repository import BaseRepository, UNIQUE_VIOLATION
from .models import User
from .exceptions import UserAlreadyExistsError


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    The users table enforces unique phone and email; violations
    surface as UserAlreadyExistsError.
    """

    def create(self, name: str, phone: str, email: str) -> User:
        """Insert a user and return the stored row."""
        result = self._execute(
            self._db.table("users").insert({"name": name, "phone": phone, "email": email})
        )
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by id, or None if not found."""
        result = self._execute(self._db.table("users").select("*").eq("id", user_id))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_many(self, user_ids: list[int]) -> list[User]:
        """Get every user whose id is in user_ids, in no particular order."""
        if not user_ids:
            return []
        result = self._execute(self._db.table("users").select("*").in_("id", user_ids))
        return [self._map_to_user(row) for row in result.data]

    def _translate_error(self, error: APIError) -> PasshubError:
        if error.code == UNIQUE_VIOLATION:
            return UserAlreadyExistsError()
        return super()._translate_error(error)

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=data["id"],
            name=data["name"],
            phone=data["phone"],
            email=data["email"],
            created_at=data["created_at"],
        )
