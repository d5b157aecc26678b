"""
Event repository for database access.

Writes are scoped with ``organizer_id`` in the WHERE clause; an empty
result means the event is missing or belongs to someone else.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, FOREIGN_KEY_VIOLATION
from .models import Event
from .exceptions import EventHasPassesError


class EventRepository(BaseRepository[Event]):
    """Repository for the events table."""

    def create(self, organizer_id: int, data: dict[str, Any]) -> Event:
        """Insert an event row and return it."""
        row = {**data, "organizer_id": organizer_id}
        result = self._execute(self._db.table("events").insert(row))
        return self._map_to_event(result.data[0])

    def get_by_id(self, event_id: int) -> Optional[Event]:
        """Get an event by id, or None if not found."""
        result = self._execute(self._db.table("events").select("*").eq("id", event_id))
        if not result.data:
            return None
        return self._map_to_event(result.data[0])

    def list_all(self) -> list[Event]:
        """List every event, oldest first."""
        result = self._execute(self._db.table("events").select("*").order("id"))
        return [self._map_to_event(row) for row in result.data]

    def update_owned(
        self,
        event_id: int,
        organizer_id: int,
        changes: dict[str, Any],
    ) -> Optional[Event]:
        """
        Apply changes to an event owned by organizer_id.

        Returns:
            The updated event, or None when zero rows matched.
        """
        result = self._execute(
            self._db.table("events")
            .update(changes)
            .eq("id", event_id)
            .eq("organizer_id", organizer_id)
        )
        if not result.data:
            return None
        return self._map_to_event(result.data[0])

    def delete_owned(self, event_id: int, organizer_id: int) -> bool:
        """
        Delete an event owned by organizer_id.

        Returns:
            True if a row was deleted, False when zero rows matched.

        Raises:
            EventHasPassesError: passes.event_id references the event.
        """
        query = (
            self._db.table("events")
            .delete()
            .eq("id", event_id)
            .eq("organizer_id", organizer_id)
        )
        try:
            result = query.execute()
        except APIError as e:
            if e.code == FOREIGN_KEY_VIOLATION:
                raise EventHasPassesError(event_id) from e
            raise self._translate_error(e) from e
        return bool(result.data)

    def _map_to_event(self, data: dict[str, Any]) -> Event:
        """Map database row to Event model."""
        return Event(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            date=data["date"],
            location=data["location"],
            organizer_id=data["organizer_id"],
            gold_limit=data.get("gold_limit", 0),
            silver_limit=data.get("silver_limit", 0),
            platinum_limit=data.get("platinum_limit", 0),
            created_at=data["created_at"],
        )
