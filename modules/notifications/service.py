"""
Pass delivery service.

Resolves passes, events and users from the store and hands them to the
NotificationDispatcher.
"""

import logging
from typing import AsyncIterator

from modules.users.models import User
from modules.users.repository import UserRepository
from modules.users.exceptions import UserNotFoundError
from modules.events.models import Event
from modules.events.repository import EventRepository
from modules.events.exceptions import EventNotFoundError
from modules.passes.models import Pass, PassStatus
from modules.passes.repository import PassRepository
from modules.passes.exceptions import PassNotFoundError

from .interfaces import IPassDeliveryService
from .dispatcher import NotificationDispatcher
from .models import DispatchResult

logger = logging.getLogger(__name__)


class PassDeliveryService(IPassDeliveryService):
    """Sends passes to their holders."""

    def __init__(
        self,
        passes: PassRepository,
        events: EventRepository,
        users: UserRepository,
        dispatcher: NotificationDispatcher,
    ):
        self._passes = passes
        self._events = events
        self._users = users
        self._dispatcher = dispatcher

    async def send_pass(self, pass_id: int, user_id: int) -> DispatchResult:
        pass_ = self._passes.get_owned(pass_id, user_id)
        if pass_ is None:
            raise PassNotFoundError(pass_id)

        event = self._events.get_by_id(pass_.event_id)
        if event is None:
            raise EventNotFoundError(pass_.event_id)
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return await self._dispatcher.notify_one(user, event, pass_)

    async def send_event_passes(self, event_id: int, organizer_id: int) -> list[DispatchResult]:
        event, users, passes = self._load_batch(event_id, organizer_id)
        results = await self._dispatcher.notify_many(event, users, passes)
        self._log_batch(event_id, results)
        return results

    async def stream_event_passes(
        self,
        event_id: int,
        organizer_id: int,
    ) -> AsyncIterator[DispatchResult]:
        event, users, passes = self._load_batch(event_id, organizer_id)
        return self._dispatcher.iter_notify_many(event, users, passes)

    def _load_batch(
        self,
        event_id: int,
        organizer_id: int,
    ) -> tuple[Event, list[User], list[Pass]]:
        """
        Collect an owned event, its Active passes, and their holders.

        Holders are ordered by their first pass in issue order.
        """
        event = self._events.get_by_id(event_id)
        if event is None or event.organizer_id != organizer_id:
            raise EventNotFoundError(event_id)

        passes = [
            p for p in self._passes.list_for_event(event_id)
            if p.status == PassStatus.ACTIVE
        ]
        holder_ids = list(dict.fromkeys(p.user_id for p in passes))
        by_id = {u.id: u for u in self._users.get_many(holder_ids)}
        users = [by_id[uid] for uid in holder_ids if uid in by_id]

        logger.info(
            "Sending %d passes for event %s to %d users",
            len(passes), event_id, len(users),
        )
        return event, users, passes

    def _log_batch(self, event_id: int, results: list[DispatchResult]) -> None:
        failed = sum(1 for r in results if not r.success)
        logger.info(
            "Finished sending passes for event %s: %d sent, %d failed",
            event_id, len(results) - failed, failed,
        )
