"""Shared pytest fixtures for the weworkbot test suite.

HTTP traffic never leaves the process: every handler posts through an
:class:`httpx.MockTransport` that records requests and replays queued
responses.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from weworkbot.api.notice import get_notify_handler
from weworkbot.main import app
from weworkbot.notify.client import WebhookClient
from weworkbot.notify.handler import WeWorkRobotNotifyHandler

BASE_URL = "https://robot.test/send?key="


class FakeWebhook:
    """Scripted webhook endpoint.

    Attributes:
        requests: Every :class:`httpx.Request` received, in order.
        responses: Queue of responses (or exceptions to raise).  When it
            runs dry the endpoint answers ``{"errcode": 0}``.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list = []

    def reply(self, status_code=200, body=None, **kwargs):
        """Queue a response; *body* is JSON-encoded unless ``content`` is given."""
        if body is None and "content" not in kwargs:
            body = {"errcode": 0, "errmsg": "ok"}
        if body is not None:
            kwargs["json"] = body
        self.responses.append(httpx.Response(status_code, **kwargs))

    def fail(self, exc):
        """Queue a transport exception."""
        self.responses.append(exc)

    def bodies(self):
        """Decoded JSON bodies of all received requests."""
        return [json.loads(r.content) for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(200, json={"errcode": 0, "errmsg": "ok"})
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


@pytest.fixture()
def webhook():
    """Return a fresh :class:`FakeWebhook`."""
    return FakeWebhook()


@pytest.fixture()
def handler(webhook):
    """Build a handler that posts to the fake webhook.

    Yields:
        A :class:`WeWorkRobotNotifyHandler` using :data:`BASE_URL`.
    """
    http_client = httpx.Client(transport=httpx.MockTransport(webhook))
    yield WeWorkRobotNotifyHandler(
        client=WebhookClient(timeout=5.0, http_client=http_client),
        webhook_url=BASE_URL,
    )
    http_client.close()


@pytest.fixture()
def client(handler):
    """Return a FastAPI :class:`TestClient` wired to the fake webhook.

    The ``get_notify_handler`` dependency is overridden so every request
    uses the :func:`handler` fixture.

    Yields:
        A :class:`httpx.Client`-like test client.
    """
    app.dependency_overrides[get_notify_handler] = lambda: handler
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
