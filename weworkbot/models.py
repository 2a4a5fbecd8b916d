"""Value objects exchanged with the WeWork group-robot webhook.

Models
------
* **NotifyReceiver** — who gets the notification (robot key + people to mention).
* **AlertEvent** — the triggered alert being announced.
* **MarkdownMessage** / **TextMessage** — the two outbound wire shapes,
  joined into the :data:`OutboundMessage` tagged union on ``msgtype``.
* **WebhookEnvelope** — the ``errcode`` / ``errmsg`` body the service answers with.
* **WebhookResponse** — what the HTTP client observed for one POST.
* **DeliveryOutcome** — the classified result of one POST.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

MARKDOWN = "markdown"
TEXT = "text"


class NotifyReceiver(BaseModel):
    """Delivery target for a WeWork robot notification.

    Attributes:
        wechat_id: Robot webhook key appended to the base webhook URL.
        phone: Comma-separated mobile numbers to @-mention.  May be blank.
        user_id: Comma-separated WeWork user ids to @-mention.  May be blank.
    """

    wechat_id: str
    phone: Optional[str] = None
    user_id: Optional[str] = None

    model_config = {"frozen": True}


class AlertEvent(BaseModel):
    """A triggered alert.

    Attributes:
        target: Identifier of the monitored object.
        content: Human-readable alert body.
    """

    target: str
    content: str

    model_config = {"frozen": True}


class MarkdownBody(BaseModel):
    """Payload of a markdown message.

    Attributes:
        content: Rendered alert text in WeWork markdown.
    """

    content: str

    model_config = {"frozen": True}


class MarkdownMessage(BaseModel):
    """Primary message: the rendered alert as markdown."""

    msgtype: Literal["markdown"] = MARKDOWN
    markdown: MarkdownBody

    model_config = {"frozen": True}


class TextBody(BaseModel):
    """Payload of a text message.

    Attributes:
        content: Plain-text message body.
        mentioned_list: WeWork user ids to @-mention.
        mentioned_mobile_list: Mobile numbers to @-mention.
    """

    content: str
    mentioned_list: list[str] = Field(default_factory=list)
    mentioned_mobile_list: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class TextMessage(BaseModel):
    """Follow-up plain-text message that @-mentions people."""

    msgtype: Literal["text"] = TEXT
    text: TextBody

    model_config = {"frozen": True}


OutboundMessage = Annotated[
    Union[MarkdownMessage, TextMessage],
    Field(discriminator="msgtype"),
]


class WebhookEnvelope(BaseModel):
    """Application-level result returned by the webhook.

    ``errcode == 0`` means the message was accepted.
    """

    errcode: int
    errmsg: Optional[str] = ""


class WebhookResponse(BaseModel):
    """Raw observation of a single POST.

    Attributes:
        status_code: HTTP status, or ``None`` when no response arrived.
        envelope: Parsed response body, or ``None`` when it could not be
            parsed (or was not read because the status was not 200).
        error: Transport or parse failure description, if any.
    """

    status_code: Optional[int] = None
    envelope: Optional[WebhookEnvelope] = None
    error: Optional[str] = None


class DeliveryStatus(str, Enum):
    """Classification of one webhook POST."""

    DELIVERED = "delivered"
    REJECTED = "rejected"
    TRANSPORT_FAILED = "transport_failed"


class DeliveryOutcome(BaseModel):
    """Result of one POST.

    Attributes:
        status: Delivered, rejected by the service, or failed in transport.
        detail: Rejection reason (``errmsg``) or transport status / cause.
    """

    status: DeliveryStatus
    detail: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status is DeliveryStatus.DELIVERED
