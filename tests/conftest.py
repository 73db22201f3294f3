import sys
from pathlib import Path
from typing import Callable, List

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from celestial_mcp.core.config import Settings
from celestial_mcp.core.dispatcher import Dispatcher
from celestial_mcp.core.tool_registry import ToolRegistry
from celestial_mcp.services.celestial_client import CelestialClient


class RecordingTransport(httpx.MockTransport):
    """
    MockTransport that remembers every request it was given.
    The responder receives the httpx.Request and returns an httpx.Response
    (or raises, to simulate transport failures).
    """
    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._responder = responder
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)


def json_response(payload, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's real credentials out of the tests."""
    for var in ("CELESTIAL_NODE_API_KEY", "CELESTIAL_NODE_API_BASE", "CELESTIAL_NODE_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def make_settings():
    def _make(api_key=None, **overrides) -> Settings:
        return Settings(_env_file=None, CELESTIAL_NODE_API_KEY=api_key, **overrides)
    return _make


@pytest.fixture(scope="session")
def registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture
def make_dispatcher(make_settings, registry):
    def _make(responder, api_key=None):
        transport = RecordingTransport(responder)
        client = CelestialClient(make_settings(api_key=api_key), transport=transport)
        return Dispatcher(registry=registry, client=client), transport
    return _make
