"""Exceptions raised by the WeWork notifier."""

from typing import Optional

from weworkbot.models import DeliveryOutcome

#: Prefix identifying this channel on every propagated error message.
ERROR_TAG = "[WeWork Notify Error]"


class DeliveryError(Exception):
    """The primary message was rejected or failed in transport."""

    def __init__(self, message: str, outcome: DeliveryOutcome):
        super().__init__(message)
        self.outcome = outcome


class NotifyError(Exception):
    """The only error type that leaves :meth:`WeWorkRobotNotifyHandler.send`.

    Attributes:
        outcome: The classified primary-message outcome when the failure
            came from the webhook itself, ``None`` for any other error.
            Lets callers retry transport failures but not rejections.
    """

    def __init__(self, message: str, outcome: Optional[DeliveryOutcome] = None):
        super().__init__(message)
        self.message = message
        self.outcome = outcome
