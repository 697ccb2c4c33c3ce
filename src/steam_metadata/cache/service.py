"""Store-details cache services.

A cache service holds the raw appdetails payload for an app id so repeated
lookups avoid the rate-limited store API. ``get`` returns an empty string on
a miss; ``put`` reports whether the write was accepted.
"""

from __future__ import annotations

import abc
import logging

import httpx

from steam_metadata.cache.base import CacheBackend
from steam_metadata.core.exceptions import CacheError


class StoreCacheService(abc.ABC):
    """Cache tier in front of the store-details API."""

    @abc.abstractmethod
    async def get(self, app_id: int) -> str:
        """Get the cached payload for an app, or "" when nothing is cached."""

    @abc.abstractmethod
    async def put(self, app_id: int, payload: str) -> bool:
        """Cache a payload fetched from the store API."""

    async def close(self) -> None:
        """Release any resources held by the service."""


class BackendStoreCache(StoreCacheService):
    """Store cache kept in a local CacheBackend (memory, redis, none).

    Args:
        backend: Backend holding the payloads
        ttl: Time-to-live for new entries (None uses the backend default)
        prefix: Key prefix within the backend
        logger: Logger for this component
    """

    def __init__(
        self,
        backend: CacheBackend,
        ttl: int | None = None,
        prefix: str = "steam:store:",
        logger: logging.Logger | None = None,
    ) -> None:
        self.backend = backend
        self._ttl = ttl
        self._prefix = prefix
        self.logger = logger or logging.getLogger(__name__)

    def _key(self, app_id: int) -> str:
        return f"{self._prefix}{app_id}"

    async def get(self, app_id: int) -> str:
        try:
            payload = await self.backend.get(self._key(app_id)) or ""
        except Exception as e:
            raise CacheError("get", str(e)) from e
        self.logger.debug("Cache backend: %s for %s", "hit" if payload else "miss", app_id)
        return payload

    async def put(self, app_id: int, payload: str) -> bool:
        try:
            await self.backend.set(self._key(app_id), payload, self._ttl)
        except Exception as e:
            raise CacheError("put", str(e)) from e
        return True

    async def close(self) -> None:
        await self.backend.close()


class ServicesStoreCache(StoreCacheService):
    """Store cache hosted by a remote web service.

    The service exposes ``GET {base_url}/steam/store/{app_id}`` returning the
    cached payload (empty body or 404 when missing) and accepts new payloads
    with ``POST`` to the same path.

    Example:
        cache = ServicesStoreCache("https://cache.example.com/api")
        payload = await cache.get(620)
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        user_agent: str = "steam-metadata/1.0",
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._user_agent = user_agent
        self._client = client
        self._owns_client = client is None
        self.logger = logger or logging.getLogger(__name__)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
            self._owns_client = True
        return self._client

    async def get(self, app_id: int) -> str:
        client = await self._get_client()
        self.logger.debug("Cache service: GET /steam/store/%s", app_id)
        try:
            response = await client.get(f"{self._base_url}/steam/store/{app_id}")
            if response.status_code == 404:
                return ""
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise CacheError("get", str(e)) from e
        return response.text

    async def put(self, app_id: int, payload: str) -> bool:
        client = await self._get_client()
        self.logger.debug("Cache service: POST /steam/store/%s", app_id)
        try:
            response = await client.post(
                f"{self._base_url}/steam/store/{app_id}",
                content=payload.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise CacheError("put", str(e)) from e
        return response.is_success

    async def close(self) -> None:
        """Close the httpx client if this service created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
