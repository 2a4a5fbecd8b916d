"""Tests for :func:`weworkbot.notify.interpreter.interpret_response`."""

from weworkbot.models import DeliveryStatus, WebhookEnvelope, WebhookResponse
from weworkbot.notify.interpreter import interpret_response


def _ok(errcode=0, errmsg="ok"):
    return WebhookResponse(status_code=200, envelope=WebhookEnvelope(errcode=errcode, errmsg=errmsg))


class TestInterpretResponse:
    """Verify two-tier classification."""

    def test_delivered(self):
        """HTTP 200 with errcode 0 is delivered."""
        outcome = interpret_response(_ok())
        assert outcome.status is DeliveryStatus.DELIVERED
        assert outcome.delivered

    def test_rejected(self):
        """HTTP 200 with a non-zero errcode carries errmsg verbatim."""
        outcome = interpret_response(_ok(93000, "invalid webhook url, hint: [xyz]"))
        assert outcome.status is DeliveryStatus.REJECTED
        assert outcome.detail == "invalid webhook url, hint: [xyz]"

    def test_non_200_ignores_body(self):
        """Any non-200 status is a transport failure even with a success envelope."""
        response = WebhookResponse(status_code=500, envelope=WebhookEnvelope(errcode=0))
        outcome = interpret_response(response)
        assert outcome.status is DeliveryStatus.TRANSPORT_FAILED
        assert outcome.detail == "500"

    def test_no_response(self):
        """A network error with no status reports the cause."""
        outcome = interpret_response(WebhookResponse(error="ConnectError: refused"))
        assert outcome.status is DeliveryStatus.TRANSPORT_FAILED
        assert outcome.detail == "ConnectError: refused"

    def test_unparsed_body(self):
        """HTTP 200 without an envelope is a transport failure."""
        outcome = interpret_response(WebhookResponse(status_code=200, error="Invalid webhook response"))
        assert outcome.status is DeliveryStatus.TRANSPORT_FAILED
        assert not outcome.delivered
