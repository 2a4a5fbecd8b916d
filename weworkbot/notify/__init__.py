"""WeWork robot notification channel.

:func:`dispatch_notice` is the entry point for dispatchers that select a
handler by notification channel type code.
"""

import logging

from weworkbot.models import AlertEvent, NotifyReceiver
from weworkbot.notify.errors import NotifyError
from weworkbot.notify.handler import WeWorkRobotNotifyHandler

logger = logging.getLogger(__name__)

#: Handler classes keyed by channel type code.
HANDLERS = {
    WeWorkRobotNotifyHandler.type_code: WeWorkRobotNotifyHandler,
}


def get_handler(type_code: int) -> WeWorkRobotNotifyHandler:
    """Return a handler instance for *type_code*.

    Raises:
        KeyError: No handler is registered for the code.
    """
    try:
        handler_cls = HANDLERS[type_code]
    except KeyError:
        logger.warning("Unknown notification channel type: %s", type_code)
        raise
    return handler_cls()


def dispatch_notice(
    type_code: int,
    receiver: NotifyReceiver,
    rendered_text: str,
    alert: AlertEvent,
) -> None:
    """Route an alert to the handler registered for *type_code*.

    Args:
        type_code: Notification channel type (``4`` for WeWork robots).
        receiver: Delivery target.
        rendered_text: Alert text already rendered from a template.
        alert: The triggered alert.
    """
    get_handler(type_code).send(receiver, rendered_text, alert)


__all__ = [
    "HANDLERS",
    "NotifyError",
    "WeWorkRobotNotifyHandler",
    "dispatch_notice",
    "get_handler",
]
