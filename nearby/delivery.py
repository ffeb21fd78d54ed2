"""Forwards outbound actions to a chat transport over a JSON webhook."""

import httpx

from models import SendLinks, SendText
from nearby.errors import DeliveryError
from nearby.log import setup_logger

logger = setup_logger(__name__)


class WebhookSink:
    """POSTs each action as JSON to `url`. Failed deliveries are logged and dropped."""

    def __init__(self, url: str, timeout: float = 10.0, client: httpx.AsyncClient | None = None):
        self.url = url
        self.timeout = timeout
        self._client = client

    async def deliver(self, actions: list[SendText | SendLinks]) -> int:
        """Send actions in order; returns how many were accepted."""
        delivered = 0
        for action in actions:
            try:
                await self._send(action)
                delivered += 1
            except DeliveryError as e:
                logger.error(f"Delivery to conversation {action.conversation_id} failed: {e.message}")
        return delivered

    async def _send(self, action: SendText | SendLinks) -> None:
        payload = action.model_dump(mode="json")
        try:
            if self._client is not None:
                response = await self._client.post(self.url, json=payload, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DeliveryError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise DeliveryError(f"Request error: {e!r}") from e
