"""
Events module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Event, CreateEventRequest, UpdateEventRequest


@runtime_checkable
class IEventService(Protocol):
    """
    Interface for event operations.

    Mutations are scoped to the organizer: a non-organizer gets the same
    EventNotFoundError as for a missing event.
    """

    async def create_event(self, organizer_id: int, request: CreateEventRequest) -> Event:
        """Create an event owned by organizer_id."""
        ...

    async def list_events(self) -> list[Event]:
        """List all events."""
        ...

    async def get_event(self, event_id: int) -> Event:
        """
        Get an event by id.

        Raises:
            EventNotFoundError: If no such event exists
        """
        ...

    async def update_event(
        self,
        event_id: int,
        organizer_id: int,
        request: UpdateEventRequest,
    ) -> Event:
        """
        Update name/description/date/location of an owned event.

        Raises:
            EventNotFoundError: If missing or not owned by organizer_id
        """
        ...

    async def delete_event(self, event_id: int, organizer_id: int) -> None:
        """
        Delete an owned event.

        Raises:
            EventNotFoundError: If missing or not owned by organizer_id
            EventHasPassesError: If passes reference the event
        """
        ...
