"""API router for sending a notification to a receiver on demand.

Endpoints
---------
* ``POST /api/notice/receiver/test`` — deliver one alert to a WeWork robot receiver.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from weworkbot.models import AlertEvent, NotifyReceiver
from weworkbot.notify import NotifyError, WeWorkRobotNotifyHandler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notice", tags=["notice"])

_DEFAULT_ALERT = AlertEvent(target="weworkbot", content="Test notification")


# ---------------------------------------------------------------------------
# Request / response schemas
# ---------------------------------------------------------------------------


class NoticeTestRequest(BaseModel):
    """Schema for a test notification.

    Attributes:
        receiver: Robot key plus optional mention lists.
        alert: Alert to announce.  Defaults to a canned test alert.
        content: Pre-rendered message text.  Defaults to the alert content.
    """

    receiver: NotifyReceiver
    alert: Optional[AlertEvent] = None
    content: Optional[str] = None


class NoticeTestResponse(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def get_notify_handler() -> WeWorkRobotNotifyHandler:
    """Provide a handler configured from application settings."""
    return WeWorkRobotNotifyHandler()


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/receiver/test", response_model=NoticeTestResponse)
def api_send_test_notice(
    body: NoticeTestRequest,
    handler: WeWorkRobotNotifyHandler = Depends(get_notify_handler),
):
    """Send one notification and report whether the robot accepted it."""
    alert = body.alert or _DEFAULT_ALERT
    rendered = body.content if body.content is not None else alert.content
    try:
        handler.send(body.receiver, rendered, alert)
    except NotifyError as exc:
        logger.warning("Test notice failed: %s", exc)
        status = exc.outcome.status.value if exc.outcome else "error"
        raise HTTPException(status_code=502, detail={"status": status, "message": exc.message})
    return NoticeTestResponse(status="delivered")
