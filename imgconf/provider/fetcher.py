"""
Image Config Fetcher

Downloads the image preset config from the remote JSON endpoint.

Reuses a single HTTP client across refreshes. The whole request,
body included, must finish within the configured timeout.
"""

import asyncio
from typing import Any

import httpx

from ..common.exceptions import FetchError, ParseError
from ..common.logging_setup import get_service_logger

logger = get_service_logger("provider.fetcher")


class ConfigFetcher:
    """
    Fetches the image config over HTTP.

    Raises FetchError for transport failures and non-2xx responses,
    ParseError for bodies that are not JSON. Callers decide what to
    fall back to.
    """

    def __init__(
        self,
        config_url: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config_url = config_url
        self.timeout_seconds = timeout_seconds
        # Injected in tests (httpx.MockTransport)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create reusable HTTP client"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client"""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def fetch(self) -> Any:
        """
        Fetch and parse the remote config.

        Returns:
            Parsed JSON payload

        Raises:
            FetchError: network error, timeout, or status outside 200-299
            ParseError: body is not valid JSON, or is JSON null
        """
        client = await self._get_client()

        try:
            # httpx timeouts are per connect/read step; cap the total too
            response = await asyncio.wait_for(
                client.get(
                    self.config_url,
                    headers={"Cache-Control": "no-cache"},
                    timeout=self.timeout_seconds,
                ),
                self.timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise FetchError(
                f"timed out after {self.timeout_seconds}s", url=self.config_url
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(str(e) or type(e).__name__, url=self.config_url) from e

        if not response.is_success:
            raise FetchError(
                f"{response.status_code} {response.reason_phrase}",
                url=self.config_url,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        try:
            config = response.json()
        except ValueError as e:
            raise ParseError(str(e), url=self.config_url) from e

        if config is None:
            raise ParseError("config body is null", url=self.config_url)

        logger.debug(
            f"Fetched image config ({len(response.content)} bytes)",
            extra={"config_url": self.config_url, "status_code": response.status_code},
        )
        return config
