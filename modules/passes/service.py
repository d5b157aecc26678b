"""
Passes service implementation.
"""

import logging

from modules.events.repository import EventRepository
from modules.events.exceptions import EventNotFoundError

from .interfaces import IPassService
from .models import Pass, UserPass, PassCategory, PassStatus
from .repository import PassRepository
from .exceptions import PassNotFoundError

logger = logging.getLogger(__name__)


class PassService(IPassService):
    """
    Pass issuance and lifecycle.

    The quota check and insert run inside the store (PassRepository.issue),
    so this service holds no locks of its own.
    """

    def __init__(
        self,
        passes: PassRepository,
        events: EventRepository,
        one_per_user: bool = False,
    ):
        self._passes = passes
        self._events = events
        self._one_per_user = one_per_user

    async def issue_pass(self, event_id: int, category: PassCategory, user_id: int) -> Pass:
        """Issue an Active pass if the category still has room."""
        pass_ = self._passes.issue(event_id, user_id, category, self._one_per_user)
        logger.info(
            "Issued %s pass %s for event %s to user %s",
            category.value, pass_.id, event_id, user_id,
        )
        return pass_

    async def list_user_passes(self, user_id: int) -> list[UserPass]:
        return self._passes.list_for_user(user_id)

    async def get_owned_pass(self, pass_id: int, user_id: int) -> Pass:
        pass_ = self._passes.get_owned(pass_id, user_id)
        if pass_ is None:
            raise PassNotFoundError(pass_id)
        return pass_

    async def update_pass_status(self, pass_id: int, user_id: int, status: PassStatus) -> Pass:
        """Owner-scoped status change; zero rows matched means not found."""
        pass_ = self._passes.update_status_owned(pass_id, user_id, status)
        if pass_ is None:
            raise PassNotFoundError(pass_id)
        logger.info("Pass %s set to %s by user %s", pass_id, status.value, user_id)
        return pass_

    async def list_event_passes(self, event_id: int, organizer_id: int) -> list[Pass]:
        event = self._events.get_by_id(event_id)
        if event is None or event.organizer_id != organizer_id:
            raise EventNotFoundError(event_id)
        return self._passes.list_for_event(event_id)
