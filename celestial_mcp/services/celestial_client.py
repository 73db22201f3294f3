# The module performs the outbound requests to the Celestial Node API.
# Date: 2026-10-18
# Version: 1.1.0

import httpx
from typing import Any, Dict, Optional
from celestial_mcp.core.config import Settings
from celestial_mcp.core.exceptions import APIStatusError, AuthenticationError, RateLimitError
from celestial_mcp.utils.logger import console


class CelestialClient:
    """
    A thin async client for the Celestial Node REST API.

    Every fetch is a single GET with no retries. The settings are injected once;
    the client keeps no other state, so one instance can serve concurrent calls.
    """
    _api_base: str
    _api_key: Optional[str]
    _timeout: float

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            settings: The server settings holding the API base, key and timeout.
            transport: Optional httpx transport, mostly for tests.
        """
        self._api_base = settings.api_base
        self._api_key = settings.CELESTIAL_NODE_API_KEY or None
        self._timeout = settings.CELESTIAL_NODE_TIMEOUT
        self._transport = transport

    def build_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def build_url(self, path: str) -> str:
        return f"{self._api_base}{path}"

    async def fetch(self, path: str) -> Any:
        """
        Fetches a relative path and returns the decoded JSON body.

        Raises:
            AuthenticationError: on HTTP 401.
            RateLimitError: on HTTP 429.
            APIStatusError: on any other non-2xx status.
            httpx.HTTPError: on transport failures.
            ValueError: when the body is not valid JSON.
        """
        url = self.build_url(path)
        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            response = await client.get(url, headers=self.build_headers())

        console.debug(f"GET {url} -> {response.status_code}")

        if response.status_code == 401:
            raise AuthenticationError(response.reason_phrase)
        if response.status_code == 429:
            raise RateLimitError(response.reason_phrase)
        if not response.is_success:
            raise APIStatusError(response.status_code, response.reason_phrase)

        return response.json()
