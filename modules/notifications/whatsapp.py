"""
WhatsApp Cloud API messaging channel.

Without an image the channel sends the approved notification template;
with one it sends an image message pointing at the uploaded pass.
"""

import logging
from typing import Any, Optional

import httpx

from .interfaces import IMessagingChannel
from .exceptions import MessagingError

logger = logging.getLogger(__name__)


class WhatsAppChannel(IMessagingChannel):
    """
    Posts messages to ``{api_url}/{phone_number_id}/messages``.

    Args:
        api_url: Graph API base URL including version.
        phone_number_id: Sender phone number id.
        access_token: Bearer token for the Cloud API.
        template_name: Template used for text-less notifications.
        template_language: Template language code.
        timeout: Request timeout in seconds.
        client: Optional shared AsyncClient. When omitted a client is
            created per send.
    """

    def __init__(
        self,
        api_url: str,
        phone_number_id: str,
        access_token: str,
        template_name: str = "pass_notification",
        template_language: str = "en",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._url = f"{api_url.rstrip('/')}/{phone_number_id}/messages"
        self._access_token = access_token
        self._template_name = template_name
        self._template_language = template_language
        self._timeout = timeout
        self._client = client

    def build_payload(self, phone: str, image_url: Optional[str] = None) -> dict[str, Any]:
        """Build the Cloud API message body."""
        payload: dict[str, Any] = {"messaging_product": "whatsapp", "to": phone}
        if image_url:
            payload["type"] = "image"
            payload["image"] = {"link": image_url}
        else:
            payload["type"] = "template"
            payload["template"] = {
                "name": self._template_name,
                "language": {"code": self._template_language},
            }
        return payload

    async def send(self, phone: str, image_url: Optional[str] = None) -> dict[str, Any]:
        """Send a message and return the API's JSON response."""
        if not self._access_token:
            raise MessagingError("WhatsApp access token not configured")

        payload = self.build_payload(phone, image_url)
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        }

        try:
            if self._client is not None:
                response = await self._client.post(
                    self._url, json=payload, headers=headers, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        self._url, json=payload, headers=headers, timeout=self._timeout
                    )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "WhatsApp API rejected message to %s: %s %s",
                phone, e.response.status_code, e.response.text,
            )
            raise MessagingError(
                f"WhatsApp API returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error("WhatsApp request to %s failed: %s", phone, e)
            raise MessagingError(f"WhatsApp request failed: {e}") from e

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "WhatsApp reply to %s was not JSON (%s)",
                phone, response.headers.get("content-type"),
            )
            raise MessagingError("WhatsApp API returned a non-JSON reply") from e
