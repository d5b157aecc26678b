"""
Notifications module interfaces.

The dispatcher talks to storage and the messaging channel only through
these protocols, so either can be swapped or faked.
"""

from pathlib import Path
from typing import Any, AsyncIterator, Optional, Protocol, runtime_checkable

from .models import DispatchResult


@runtime_checkable
class IImageUploader(Protocol):
    """Publishes a local image and returns a URL anyone can fetch."""

    def upload(self, path: Path) -> str:
        """
        Raises:
            UploadError: If the image could not be published
        """
        ...


@runtime_checkable
class IMessagingChannel(Protocol):
    """Sends a notification to a phone number."""

    async def send(self, phone: str, image_url: Optional[str] = None) -> dict[str, Any]:
        """
        Send a template message, or an image message when image_url is given.

        Raises:
            MessagingError: On transport or API failure
        """
        ...


@runtime_checkable
class IPassDeliveryService(Protocol):
    """Interface for sending issued passes to their holders."""

    async def send_pass(self, pass_id: int, user_id: int) -> DispatchResult:
        """
        Send one of the caller's passes to the caller's phone.

        Raises:
            PassNotFoundError: If missing or held by someone else
            UploadError / MessagingError: If delivery fails
        """
        ...

    async def send_event_passes(self, event_id: int, organizer_id: int) -> list[DispatchResult]:
        """
        Send every Active pass of an owned event to its holder.

        Raises:
            EventNotFoundError: If missing or organized by someone else
        """
        ...

    async def stream_event_passes(
        self,
        event_id: int,
        organizer_id: int,
    ) -> AsyncIterator[DispatchResult]:
        """
        Like send_event_passes, but returns the results as they happen.

        Ownership is checked before this returns, so a missing event
        raises here rather than mid-stream.
        """
        ...
