"""
Events module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class EventNotFoundError(NotFoundError):
    """
    Raised when an event is not found.

    Also raised when the caller is not the organizer of an event it tries
    to modify, so existence is not disclosed.
    """

    def __init__(self, event_id: int):
        super().__init__(
            "Event not found",
            code="EVENT_NOT_FOUND",
            details={"event_id": event_id},
        )


class EventHasPassesError(ValidationError):
    """Raised when deleting an event that passes still reference."""

    def __init__(self, event_id: int):
        super().__init__(
            "Event has issued passes and cannot be deleted",
            code="EVENT_HAS_PASSES",
            details={"event_id": event_id},
        )
