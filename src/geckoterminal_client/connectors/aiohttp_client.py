"""Concrete HTTP client implementation for async requests.

Wraps aiohttp behind IHttpClient abstraction.
"""

import asyncio
import json

import aiohttp

from geckoterminal_client.config.value_objects import HttpClientConfig
from geckoterminal_client.exceptions import TransportError
from geckoterminal_client.infrastructure.observability import get_transport_logger
from geckoterminal_client.ports.http import (
    HttpResponse,
    IHttpClient,
)


def _decode(raw: bytes, charset: str | None) -> str:
    """Decode a body without failing on bytes invalid for its charset."""
    try:
        return raw.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


class AiohttpClient(IHttpClient):
    """HTTP client implementation using aiohttp.

    One session is created lazily and reused, so a single instance can
    serve concurrent calls.
    """

    def __init__(self, config: HttpClientConfig | None = None):
        """Initialize HTTP client.

        Args:
            config: HTTP client configuration
        """
        self.config = config or HttpClientConfig()
        self._session: aiohttp.ClientSession | None = None
        self._log = get_transport_logger()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(
                total=self.config.timeout,
                connect=self.config.connect_timeout,
            )
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute GET request.

        Args:
            url: Full URL
            params: Query parameters
            headers: HTTP headers
            timeout: Request timeout override

        Returns:
            HttpResponse with status, decoded body, headers

        Raises:
            TransportError: On connection errors and timeouts
        """
        session = await self._get_session()
        timeout_obj = aiohttp.ClientTimeout(
            total=timeout or self.config.timeout,
            connect=self.config.connect_timeout,
        )

        try:
            async with session.get(
                url,
                params=params,
                headers=headers,
                timeout=timeout_obj,
            ) as resp:
                text = _decode(await resp.read(), resp.charset)
                try:
                    body = json.loads(text) if text else None
                except json.JSONDecodeError:
                    body = text
                return HttpResponse(
                    status_code=resp.status,
                    body=body,
                    headers=dict(resp.headers),
                    url=str(resp.url),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._log.error("transport_failed", url=url, error=str(e))
            raise TransportError(f"GET {url} failed: {e}", url=url) from e

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
