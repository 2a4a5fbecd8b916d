"""Blocking HTTP client for the WeWork group-robot webhook."""

import logging
from typing import Optional

import httpx

from weworkbot.models import OutboundMessage, WebhookEnvelope, WebhookResponse

logger = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


class WebhookClient:
    """POST JSON messages to a webhook and parse the response envelope.

    Transport errors and unreadable bodies are reported on the returned
    :class:`WebhookResponse` instead of being raised, so the caller can
    classify them alongside HTTP status failures.

    Args:
        timeout: Seconds before a request is abandoned.
        http_client: Optional pre-built :class:`httpx.Client`.  When
            omitted each call uses :func:`httpx.post` directly.
    """

    def __init__(self, timeout: float = 10.0, http_client: Optional[httpx.Client] = None):
        self._timeout = timeout
        self._http_client = http_client

    def post(self, url: str, message: OutboundMessage) -> WebhookResponse:
        """Send *message* to *url*.

        Args:
            url: Full webhook URL including the robot key.
            message: Markdown or text message.

        Returns:
            Status code plus parsed envelope, or the failure cause.
        """
        payload = message.model_dump(mode="json")
        try:
            if self._http_client is not None:
                resp = self._http_client.post(url, json=payload, headers=_HEADERS, timeout=self._timeout)
            else:
                resp = httpx.post(url, json=payload, headers=_HEADERS, timeout=self._timeout)
        except httpx.HTTPError as exc:
            logger.warning("Webhook POST to %s failed: %s", url, exc)
            return WebhookResponse(error=f"{type(exc).__name__}: {exc}")

        if resp.status_code != 200:
            return WebhookResponse(status_code=resp.status_code)

        try:
            envelope = WebhookEnvelope.model_validate(resp.json())
        except ValueError as exc:
            logger.warning("Webhook %s returned an unreadable body: %r", url, resp.text[:200])
            return WebhookResponse(
                status_code=resp.status_code,
                error=f"Invalid webhook response: {exc}",
            )
        return WebhookResponse(status_code=resp.status_code, envelope=envelope)
