"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating PostgREST errors into domain errors.
"""

from typing import Any, TypeVar, Generic
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import PasshubError, StoreError


T = TypeVar("T")

# Postgres SQLSTATE codes the repositories care about
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute(), which runs a query builder and maps APIError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class EventRepository(BaseRepository[Event]):
            def get_by_id(self, event_id: int) -> Optional[Event]:
                result = self._execute(self._db.table("events").select("*").eq("id", event_id))
                if not result.data:
                    return None
                return self._map_to_event(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any) -> Any:
        """
        Execute a PostgREST query builder.

        Raises:
            PasshubError: Whatever _translate_error() maps the failure to.
        """
        try:
            return query.execute()
        except APIError as e:
            raise self._translate_error(e) from e

    def _translate_error(self, error: APIError) -> PasshubError:
        """Map a PostgREST error to a domain error. Subclasses refine this."""
        return StoreError(
            error.message or "Store request failed",
            details={"sqlstate": error.code},
        )
