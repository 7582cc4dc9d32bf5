import json
from typing import Any, Callable, List

import httpx
import pytest

from core.client import GridlyClient
from core.config import Settings
from core.registry import ToolRegistry

BASE_URL = "https://api.gridly.test/v1"


class FakeGridly:
    """Records outgoing requests and answers them with a configurable responder."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None):
        self.requests: List[httpx.Request] = []
        self.responder = responder or (lambda request: httpx.Response(200, json={"ok": True}))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", api_base_url=BASE_URL)


@pytest.fixture
def fake_gridly() -> FakeGridly:
    return FakeGridly()


@pytest.fixture
def client(settings, fake_gridly) -> GridlyClient:
    return GridlyClient(settings, transport=httpx.MockTransport(fake_gridly.handler))


@pytest.fixture
def registry(client) -> ToolRegistry:
    return ToolRegistry(client)
