"""Shared fixtures: a client wired to an in-memory httpx transport."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from mailgunner import Client

DOMAIN = "samples.mailgun.org"
API_KEY = "xxx"


class RequestRecorder:
    """Capture outgoing requests and answer with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json: object = {"items": []}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        return self.last.url.raw_path.decode("ascii")


@pytest.fixture
def recorder() -> RequestRecorder:
    return RequestRecorder()


@pytest.fixture
def client(recorder: RequestRecorder) -> Iterator[Client]:
    client = Client(domain=DOMAIN, api_key=API_KEY, transport=httpx.MockTransport(recorder))
    yield client
    client.close()
