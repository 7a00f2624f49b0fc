"""Webhook notification adapter.

Implements NotificationPort by POSTing each message as JSON to a
configured URL (a chat webhook, a mail relay, etc).
"""

import logging

import httpx

from orderbench.core.ports import NotificationPort

logger = logging.getLogger(__name__)


class WebhookNotificationAdapter(NotificationPort):
    """Delivers notifications to an HTTP endpoint."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize webhook notification adapter.

        Args:
            url: Endpoint that receives `{"message": ...}` payloads.
            timeout_seconds: Per-request timeout.
            headers: Optional extra headers (e.g. authentication).
            transport: Optional httpx transport, mainly for tests.

        Raises:
            ValueError: If url is empty.
        """
        if not url:
            raise ValueError("url must be a non-empty string")
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.headers = headers or {}
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout_seconds,
                headers={"Content-Type": "application/json", **self.headers},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def send(self, message: str) -> None:
        """POST the message to the webhook.

        Raises:
            httpx.HTTPError: If the request fails or the endpoint answers
                with a non-2xx status.
        """
        client = self._get_client()
        try:
            response = client.post(self.url, json={"message": message})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Webhook notification rejected: {e.response.status_code}",
                extra={"url": self.url, "response": e.response.text},
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                f"Failed to deliver webhook notification: {e}",
                extra={"url": self.url},
            )
            raise

        logger.info(
            "Webhook notification delivered",
            extra={"url": self.url, "status_code": response.status_code},
        )
