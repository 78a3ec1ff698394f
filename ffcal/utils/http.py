import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import httpx

from ffcal.errors import MalformedResponse, NetworkError

log = logging.getLogger("http")

DEFAULT_BASE_URL = "https://www.forexfactory.com"

@dataclass(frozen=True)
class HttpPolicy:
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "Mozilla/5.0 (compatible; ffcal/1.0)"
    timeout_seconds: float = 20.0

class HttpClient:
    """
    Thin async client around one shared httpx.AsyncClient:
    - explicit User-Agent
    - conservative timeouts
    - relative endpoints resolved against the site base URL
    - no retries; request failures (transport, redirects, decoding) surface as NetworkError
    """

    def __init__(self, policy: HttpPolicy | None = None, *, transport: httpx.AsyncBaseTransport | None = None):
        self.policy = policy or HttpPolicy()
        self._client = httpx.AsyncClient(
            headers={
                "User-Agent": self.policy.user_agent,
                "Accept": "text/html,application/xhtml+xml,application/json;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.9",
            },
            timeout=self.policy.timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )

    def url_for(self, endpoint: str) -> str:
        if endpoint.startswith("http"):
            return endpoint
        return urljoin(self.policy.base_url.rstrip("/") + "/", endpoint.lstrip("/"))

    async def fetch_text(self, endpoint: str) -> tuple[int, str]:
        url = self.url_for(endpoint)
        try:
            resp = await self._client.get(url)
        except httpx.RequestError as ex:
            raise NetworkError(f"GET {url} failed: {ex}", url=url) from ex
        return resp.status_code, resp.text

    async def get_text(self, endpoint: str) -> str:
        status, text = await self.fetch_text(endpoint)
        if status >= 400:
            url = self.url_for(endpoint)
            log.warning("GET %s returned HTTP %d", url, status)
            raise NetworkError(f"GET {url} returned HTTP {status}", url=url, status_code=status)
        return text

    async def get_json(self, endpoint: str) -> Any:
        return parse_json(await self.get_text(endpoint))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as ex:
        raise MalformedResponse(f"invalid JSON: {ex}") from ex
