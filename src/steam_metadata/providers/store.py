"""Steam store details fetcher.

Store details come from the public appdetails endpoint, which rate limits
aggressively. Lookups go to the cache service first; on a miss the store API
is queried with a bounded retry loop and the payload is written back to the
cache.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from steam_metadata.core.exceptions import (
    FetchCancelledError,
    ProviderConnectionError,
    ProviderRateLimitError,
)
from steam_metadata.providers.base import HttpService
from steam_metadata.types.store import StoreDetails

if TYPE_CHECKING:
    from steam_metadata.cache.service import StoreCacheService

STORE_API_URL = "https://store.steampowered.com/api/appdetails"
DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_RETRY_DELAY = 2.5


def parse_store_payload(app_id: int, payload: str) -> StoreDetails | None:
    """Parse an appdetails response body.

    The body is keyed by app id, ``{"620": {"success": true, "data": {...}}}``.
    A bare ``{"success": ..., "data": ...}`` envelope is accepted as well.

    Args:
        app_id: Steam app id the payload belongs to
        payload: Raw response text

    Returns:
        StoreDetails, or None if the envelope is not successful

    Raises:
        ValueError: If the payload is not valid JSON
    """
    document = json.loads(payload)
    if not isinstance(document, Mapping):
        return None

    envelope: Any = document.get(str(app_id))
    if envelope is None and "success" in document:
        envelope = document
    if not isinstance(envelope, Mapping) or envelope.get("success") is not True:
        return None

    data = envelope.get("data")
    if not isinstance(data, Mapping):
        return None
    return StoreDetails.from_dict(data)


class StoreDetailsFetcher(HttpService):
    """Fetches store details with a cache-first, origin-fallback strategy.

    Example:
        cache = BackendStoreCache(MemoryCache())
        async with StoreDetailsFetcher(cache) as fetcher:
            details = await fetcher.fetch(620)
    """

    name = "steam_store"

    def __init__(
        self,
        cache: StoreCacheService | None = None,
        api_url: str = STORE_API_URL,
        language: str = "english",
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        strict: bool = False,
        timeout: float = 30,
        user_agent: str = "steam-metadata/1.0",
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(timeout, user_agent, client, logger)
        self.cache = cache
        self.api_url = api_url
        self.language = language
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.strict = strict

    async def fetch(
        self,
        app_id: int,
        cancel_event: asyncio.Event | None = None,
    ) -> StoreDetails | None:
        """Get store details for an app.

        Args:
            app_id: Steam app id
            cancel_event: Event that aborts the fetch when set

        Returns:
            StoreDetails, or None if unavailable

        Raises:
            FetchCancelledError: If ``cancel_event`` is set before completion
        """
        payload = await self._get_cached(app_id)
        if payload:
            self.logger.debug("Steam store data for %s served from cache", app_id)
        else:
            payload = await self._download(app_id, cancel_event)
            if payload is None:
                return None
            await self._set_cached(app_id, payload)

        try:
            details = parse_store_payload(app_id, payload)
        except (ValueError, TypeError, KeyError) as e:
            if self.strict:
                raise
            self.logger.warning("Malformed Steam store data for %s: %s", app_id, e)
            return None

        if details is None:
            self.logger.debug("Steam store reported no data for %s", app_id)
        return details

    async def _get_cached(self, app_id: int) -> str:
        if self.cache is None:
            return ""
        try:
            return await self.cache.get(app_id) or ""
        except Exception as e:
            self.logger.warning("Failed to get Steam store cache data for %s: %s", app_id, e)
            return ""

    async def _set_cached(self, app_id: int, payload: str) -> None:
        if self.cache is None:
            return
        try:
            stored = await self.cache.put(app_id, payload)
        except Exception as e:
            self.logger.warning("Failed to post Steam store data to cache for %s: %s", app_id, e)
            return
        if not stored:
            self.logger.warning("Cache rejected Steam store data for %s", app_id)

    async def _download(
        self,
        app_id: int,
        cancel_event: asyncio.Event | None,
    ) -> str | None:
        """Download the raw payload, retrying while rate limited."""
        for attempt in range(1, self.max_attempts + 1):
            if cancel_event is not None and cancel_event.is_set():
                raise FetchCancelledError(app_id, self.name)

            try:
                payload = await self._request(app_id)
            except ProviderRateLimitError:
                if attempt == self.max_attempts:
                    self.logger.error(
                        "Reached download limit for Steam store data %s after %d attempts",
                        app_id,
                        attempt,
                    )
                    if self.strict:
                        raise
                    return None
                self.logger.debug(
                    "Steam store rate limited %s (attempt %d/%d), waiting %ss",
                    app_id,
                    attempt,
                    self.max_attempts,
                    self.retry_delay,
                )
                await self._wait(app_id, cancel_event)
                continue
            except ProviderConnectionError as e:
                if self.strict:
                    raise
                self.logger.error("Failed to download Steam store data %s: %s", app_id, e)
                return None

            self.logger.debug("Steam store data for %s fetched from store API", app_id)
            return payload

        return None

    async def _wait(self, app_id: int, cancel_event: asyncio.Event | None) -> None:
        """Sleep for the retry delay, waking early if the fetch is cancelled."""
        if cancel_event is None:
            await asyncio.sleep(self.retry_delay)
            return
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=self.retry_delay)
        except TimeoutError:
            return
        raise FetchCancelledError(app_id, self.name)

    async def _request(self, app_id: int) -> str:
        """Make a single appdetails request."""
        client = await self._get_client()
        params = {"appids": str(app_id), "l": self.language}

        self.logger.debug("Steam store API: GET %s %s", self.api_url, params)
        try:
            response = await client.get(self.api_url, params=params)
            if response.status_code == 429:
                raise ProviderRateLimitError(self.name, retry_after=self.retry_delay)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderConnectionError(
                self.name, f"HTTP {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderConnectionError(self.name, str(e)) from e

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Steam store API response for %s:\n%s", app_id, response.text)
        return response.text
