"""Send alert notifications through a WeWork group robot.

The rendered alert goes out first as a markdown message.  Markdown
messages cannot @-mention anyone, so when the receiver lists phone
numbers or user ids a second plain-text message follows.  Only the
first message decides whether :meth:`WeWorkRobotNotifyHandler.send`
succeeds; the follow-up is best-effort.
"""

import logging
from typing import Optional

from weworkbot.config import get_settings
from weworkbot.models import (
    AlertEvent,
    DeliveryStatus,
    NotifyReceiver,
    TextMessage,
)
from weworkbot.notify.client import WebhookClient
from weworkbot.notify.errors import ERROR_TAG, DeliveryError, NotifyError
from weworkbot.notify.interpreter import interpret_response
from weworkbot.notify.messages import build_markdown_message, build_mention_message

logger = logging.getLogger(__name__)


class WeWorkRobotNotifyHandler:
    """Deliver one alert to one WeWork robot receiver.

    Holds no per-call state, so a single instance may serve concurrent
    callers as long as the injected client allows it.

    Args:
        client: Webhook client; built from settings when omitted.
        webhook_url: Base URL the receiver key is appended to; defaults
            to ``Settings.webhook_url``.
    """

    #: Notification channel type code used by dispatchers.
    type_code = 4

    def __init__(self, client: Optional[WebhookClient] = None, webhook_url: Optional[str] = None):
        cfg = get_settings()
        self.client = client or WebhookClient(timeout=cfg.request_timeout)
        self.webhook_url = webhook_url if webhook_url is not None else cfg.webhook_url

    def send(self, receiver: NotifyReceiver, rendered_text: str, alert: AlertEvent) -> None:
        """Post the alert and, if needed, the mention follow-up.

        Args:
            receiver: Robot key and people to mention.
            rendered_text: Alert text already rendered from a template.
            alert: The alert, used for the mention message.

        Raises:
            NotifyError: The primary message was not delivered, or any
                other error occurred before it was.
        """
        try:
            url = self.webhook_url + receiver.wechat_id
            outcome = interpret_response(self.client.post(url, build_markdown_message(rendered_text)))

            if outcome.status is DeliveryStatus.TRANSPORT_FAILED:
                logger.warning("Send WeWork webhook %s failed: %s", url, outcome.detail)
                detail = outcome.detail or ""
                reason = f"Http StatusCode {detail}" if detail.isdigit() else f"Transport error {detail}"
                raise DeliveryError(reason, outcome)
            if outcome.status is DeliveryStatus.REJECTED:
                logger.warning("Send WeWork webhook %s rejected: %s", url, outcome.detail)
                raise DeliveryError(outcome.detail or "rejected", outcome)

            logger.debug("Send WeWork webhook %s success", url)
            mention = build_mention_message(receiver, alert)
            if mention is not None:
                self._send_mention(url, mention)
        except Exception as exc:
            raise NotifyError(f"{ERROR_TAG} {exc}", outcome=getattr(exc, "outcome", None)) from exc

    def _send_mention(self, url: str, message: TextMessage) -> None:
        """Post the mention message; failures are logged, never raised."""
        try:
            outcome = interpret_response(self.client.post(url, message))
        except Exception:
            logger.exception("Mention message to %s failed", url)
            return
        if not outcome.delivered:
            logger.warning(
                "Mention message to %s not delivered (%s): %s",
                url,
                outcome.status.value,
                outcome.detail,
            )
