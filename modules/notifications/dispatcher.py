"""
Pass delivery to users over the messaging channel.

A single delivery renders the pass to a temp file, uploads it, and sends
the resulting URL. The temp file is removed whatever happens. A batch
processes recipients one at a time and pauses a random interval after
each successful send so the channel does not see a burst.
"""

import asyncio
import logging
import random
from typing import AsyncIterator, Awaitable, Callable, Optional

from modules.users.models import User
from modules.events.models import Event
from modules.passes.models import Pass
from modules.rendering.interfaces import IPassRenderer
from modules.rendering.models import PassDetails
from modules.rendering.renderer import format_event_date

from .interfaces import IImageUploader, IMessagingChannel
from .models import DispatchResult

logger = logging.getLogger(__name__)

NO_PASS_ERROR = "No pass issued for user"
ALREADY_SENT_ERROR = "Pass already sent to user in this batch"


class NotificationDispatcher:
    """
    Renders, uploads and sends passes.

    Args:
        renderer: Produces the pass image file.
        uploader: Publishes the file and returns its URL.
        channel: Sends the URL to the user's phone.
        min_delay: Lower bound of the pause between batch sends (seconds).
        max_delay: Upper bound of the pause between batch sends (seconds).
        sleep: Awaitable sleep, replaceable in tests.
        rng: Random source for the pause length.
    """

    def __init__(
        self,
        renderer: IPassRenderer,
        uploader: IImageUploader,
        channel: IMessagingChannel,
        min_delay: float = 1.0,
        max_delay: float = 4.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ):
        if min_delay < 0 or max_delay < min_delay:
            raise ValueError("Require 0 <= min_delay <= max_delay")
        self._renderer = renderer
        self._uploader = uploader
        self._channel = channel
        self._min_delay = min_delay
        self._max_delay = max_delay
        self._sleep = sleep
        self._rng = rng or random.Random()

    async def notify_one(self, user: User, event: Event, pass_: Pass) -> DispatchResult:
        """
        Deliver one pass.

        Raises:
            RenderError, UploadError, MessagingError: Delivery failed. The
                temp file has already been removed.
        """
        details = PassDetails(
            user_name=user.name,
            event_name=event.name,
            event_date=format_event_date(event.date),
            category=pass_.category,
        )
        with self._renderer.render_to_file(details) as path:
            image_url = self._uploader.upload(path)
            await self._channel.send(user.phone, image_url)

        logger.info("Sent pass %s to user %s", pass_.id, user.id)
        return DispatchResult(user_id=user.id, success=True)

    async def iter_notify_many(
        self,
        event: Event,
        users: list[User],
        passes: list[Pass],
    ) -> AsyncIterator[DispatchResult]:
        """
        Deliver passes to users serially, yielding one result per user.

        Results come in input order. A failure is recorded in its result
        and the batch moves on. Each user receives the first pass in
        ``passes`` that they hold.
        """
        passes_by_user: dict[int, Pass] = {}
        for pass_ in passes:
            passes_by_user.setdefault(pass_.user_id, pass_)

        sent: set[int] = set()
        last_index = len(users) - 1

        for index, user in enumerate(users):
            pass_ = passes_by_user.get(user.id)
            if pass_ is None:
                yield DispatchResult(user_id=user.id, success=False, error=NO_PASS_ERROR)
                continue
            if user.id in sent:
                yield DispatchResult(user_id=user.id, success=False, error=ALREADY_SENT_ERROR)
                continue

            try:
                result = await self.notify_one(user, event, pass_)
            except Exception as e:
                logger.exception("Failed to send pass %s to user %s", pass_.id, user.id)
                yield DispatchResult(user_id=user.id, success=False, error=str(e))
                continue

            sent.add(user.id)
            yield result

            if index < last_index:
                await self._sleep(self._rng.uniform(self._min_delay, self._max_delay))

    async def notify_many(
        self,
        event: Event,
        users: list[User],
        passes: list[Pass],
    ) -> list[DispatchResult]:
        """Deliver a batch and return every result."""
        return [result async for result in self.iter_notify_many(event, users, passes)]
