"""Steam product info ("appinfo") fetching."""

from __future__ import annotations

import abc
import json
import logging
from typing import Any

import httpx

from steam_metadata.core.exceptions import MetadataError, ProviderConnectionError
from steam_metadata.providers.base import HttpService
from steam_metadata.types.keyvalue import KeyValue

STEAMCMD_INFO_URL = "https://api.steamcmd.net/v1/info"


class ProductInfoClient(abc.ABC):
    """Client for Steam's product info service."""

    @abc.abstractmethod
    async def get_product_info(self, app_id: int) -> KeyValue:
        """Get the product info tree for an app.

        Args:
            app_id: Steam app id

        Returns:
            Root node of the app's product info

        Raises:
            MetadataError: If the service cannot provide the product info
        """

    async def close(self) -> None:
        """Release any resources held by the client."""


class SteamCMDProductInfoClient(HttpService, ProductInfoClient):
    """Product info client backed by the steamcmd.net JSON mirror.

    The mirror answers ``GET /v1/info/{app_id}`` with
    ``{"status": "success", "data": {"<app_id>": {"common": ..., ...}}}``.
    """

    name = "steamcmd"

    def __init__(
        self,
        base_url: str = STEAMCMD_INFO_URL,
        timeout: float = 30,
        user_agent: str = "steam-metadata/1.0",
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(timeout, user_agent, client, logger)
        self._base_url = base_url.rstrip("/")

    async def get_product_info(self, app_id: int) -> KeyValue:
        client = await self._get_client()
        url = f"{self._base_url}/{app_id}"

        self.logger.debug("SteamCMD API: GET %s", url)
        try:
            response = await client.get(url)
            response.raise_for_status()
            document: Any = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderConnectionError(self.name, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise ProviderConnectionError(self.name, str(e)) from e
        except json.JSONDecodeError as e:
            raise ProviderConnectionError(self.name, f"invalid JSON: {e}") from e

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "SteamCMD API response:\n%s", json.dumps(document, indent=2, ensure_ascii=False)
            )

        if not isinstance(document, dict) or document.get("status") != "success":
            raise MetadataError(f"No product info returned for app {app_id}", self.name)
        app = (document.get("data") or {}).get(str(app_id))
        if not isinstance(app, dict):
            raise MetadataError(f"No product info returned for app {app_id}", self.name)

        return KeyValue.from_dict("appinfo", app)


class ProductInfoFetcher:
    """Fetches product info as a single fallible request.

    Failures are logged and reported as None so the rest of the metadata can
    still be assembled. With ``strict`` set, errors propagate instead.
    """

    def __init__(
        self,
        client: ProductInfoClient,
        strict: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.client = client
        self.strict = strict
        self.logger = logger or logging.getLogger(__name__)

    async def fetch(self, app_id: int) -> KeyValue | None:
        """Get product info for an app, or None if it could not be fetched."""
        try:
            return await self.client.get_product_info(app_id)
        except Exception as e:
            if self.strict:
                raise
            self.logger.error("Failed to get Steam appinfo %s: %s", app_id, e)
            return None
