"""
Events service implementation.
"""

import logging

from .interfaces import IEventService
from .models import Event, CreateEventRequest, UpdateEventRequest
from .repository import EventRepository
from .exceptions import EventNotFoundError

logger = logging.getLogger(__name__)


class EventService(IEventService):
    """Event CRUD backed by EventRepository."""

    def __init__(self, repository: EventRepository):
        self._repository = repository

    async def create_event(self, organizer_id: int, request: CreateEventRequest) -> Event:
        """Create an event owned by organizer_id."""
        event = self._repository.create(organizer_id, request.model_dump(mode="json"))
        logger.info("User %s created event %s", organizer_id, event.id)
        return event

    async def list_events(self) -> list[Event]:
        """List all events."""
        return self._repository.list_all()

    async def get_event(self, event_id: int) -> Event:
        """Get an event by id."""
        event = self._repository.get_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def update_event(
        self,
        event_id: int,
        organizer_id: int,
        request: UpdateEventRequest,
    ) -> Event:
        """Update the provided fields of an owned event."""
        changes = request.model_dump(mode="json", exclude_none=True)

        if not changes:
            # Nothing to write; still answer as the owner-scoped update would
            event = self._repository.get_by_id(event_id)
            if event is None or event.organizer_id != organizer_id:
                raise EventNotFoundError(event_id)
            return event

        event = self._repository.update_owned(event_id, organizer_id, changes)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def delete_event(self, event_id: int, organizer_id: int) -> None:
        """Delete an owned event."""
        if not self._repository.delete_owned(event_id, organizer_id):
            raise EventNotFoundError(event_id)
        logger.info("User %s deleted event %s", organizer_id, event_id)
