"""
Events module.

Handles event creation and organizer-scoped updates and deletes.

Public API:
- IEventService: Interface for event operations
- Event, CreateEventRequest, UpdateEventRequest
- EventNotFoundError, EventHasPassesError
"""

from .interfaces import IEventService
from .models import Event, CreateEventRequest, UpdateEventRequest
from .exceptions import EventNotFoundError, EventHasPassesError

__all__ = [
    # Interface
    "IEventService",
    # Models
    "Event",
    "CreateEventRequest",
    "UpdateEventRequest",
    # Exceptions
    "EventNotFoundError",
    "EventHasPassesError",
]
