"""
Pytest configuration and fixtures for the ZeptoMail client tests.

HTTP is faked with httpx.MockTransport; no test touches the network.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from zeptomail.client import ZeptoMailClient
from zeptomail.models import EmailAddress, EmailRequest, Recipient

TEST_API_KEY = "test-api-key-123456"
TEST_BASE_URL = "https://api.zeptomail.test/v1.1"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(
        self,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        raise_exc: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.json = json
        self.content = content
        self.raise_exc = raise_exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def make_client() -> Callable[[Handler], ZeptoMailClient]:
    """Build a client whose HTTP traffic goes to ``handler``."""

    def _make(handler: Handler) -> ZeptoMailClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ZeptoMailClient(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            http_client=http_client,
        )

    return _make


@pytest.fixture
def email_request() -> EmailRequest:
    return EmailRequest(
        sender=EmailAddress(address="a@x.com"),
        recipients=[Recipient(email_address=EmailAddress(address="b@x.com"))],
        subject="Hi",
        htmlbody="<b>hi</b>",
    )


@pytest.fixture
def success_body() -> dict[str, Any]:
    return {
        "data": [{"code": "OK", "message": "sent"}],
        "message": "ok",
        "request_id": "r1",
    }


@pytest.fixture
def error_body() -> dict[str, Any]:
    return {
        "code": "TM_3301",
        "message": "Invalid address",
        "details": [{"code": "IA", "message": "bad", "target": "sender"}],
    }
