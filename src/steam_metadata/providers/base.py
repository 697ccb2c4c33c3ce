"""Base class for components that talk to remote HTTP services."""

from __future__ import annotations

import logging
from typing import Any

import httpx


class HttpService:
    """Shared plumbing for HTTP-backed components.

    Holds a lazily created ``httpx.AsyncClient`` and an injectable logger.
    A client passed in by the caller is shared and left open on ``close()``.

    Attributes:
        name: Service name used in logs and exceptions
        timeout: Request timeout in seconds
        logger: Logger used by this component
    """

    name: str = "base"

    def __init__(
        self,
        timeout: float = 30,
        user_agent: str = "steam-metadata/1.0",
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.timeout = timeout
        self._user_agent = user_agent
        self._client = client
        self._owns_client = client is None
        self.logger = logger or logging.getLogger(type(self).__module__)

    def _client_options(self) -> dict[str, Any]:
        """Keyword arguments for a newly created client."""
        return {
            "headers": {"User-Agent": self._user_agent},
            "timeout": self.timeout,
            "follow_redirects": True,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(**self._client_options())
            self._owns_client = True
        return self._client

    async def __aenter__(self) -> HttpService:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the httpx client if this component created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
