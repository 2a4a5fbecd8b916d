"""Construction of the outbound WeWork robot messages."""

from typing import Optional

from weworkbot.models import (
    AlertEvent,
    MarkdownBody,
    MarkdownMessage,
    NotifyReceiver,
    TextBody,
    TextMessage,
)
from weworkbot.notify.mentions import is_blank, parse_mention_list

MENTION_TEMPLATE = "Alert target: {target}\nDetail: {content}"


def build_markdown_message(rendered_text: str) -> MarkdownMessage:
    """Wrap pre-rendered alert text as the primary markdown message."""
    return MarkdownMessage(markdown=MarkdownBody(content=rendered_text))


def needs_mention(receiver: NotifyReceiver) -> bool:
    """Return ``True`` when the receiver lists anyone to @-mention."""
    return not is_blank(receiver.phone) or not is_blank(receiver.user_id)


def build_mention_message(receiver: NotifyReceiver, alert: AlertEvent) -> Optional[TextMessage]:
    """Build the follow-up text message that @-mentions people.

    Markdown messages cannot carry mentions, so mobiles and user ids go
    out in a separate plain-text message.

    Args:
        receiver: Supplies the ``phone`` and ``user_id`` mention lists.
        alert: Supplies the target and detail shown in the message.

    Returns:
        The message, or ``None`` when both mention fields are blank.
    """
    if not needs_mention(receiver):
        return None
    return TextMessage(
        text=TextBody(
            content=MENTION_TEMPLATE.format(target=alert.target, content=alert.content),
            mentioned_list=parse_mention_list(receiver.user_id),
            mentioned_mobile_list=parse_mention_list(receiver.phone),
        )
    )
