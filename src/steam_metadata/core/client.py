"""MetadataClient - Main entry point for the steam-metadata library."""

from __future__ import annotations

import asyncio
import logging

import httpx

from steam_metadata.artwork.probe import ExistenceProber
from steam_metadata.artwork.resolver import AssetResolver
from steam_metadata.cache.base import NullCache
from steam_metadata.cache.memory import MemoryCache
from steam_metadata.cache.service import (
    BackendStoreCache,
    ServicesStoreCache,
    StoreCacheService,
)
from steam_metadata.core.composer import MetadataComposer
from steam_metadata.core.config import MetadataConfig
from steam_metadata.core.exceptions import (
    FetchCancelledError,
    InvalidAppIdError,
    InvalidConfigurationError,
    ProviderConnectionError,
)
from steam_metadata.core.resources import Resources
from steam_metadata.providers.product_info import (
    ProductInfoClient,
    ProductInfoFetcher,
    SteamCMDProductInfoClient,
)
from steam_metadata.providers.store import StoreDetailsFetcher
from steam_metadata.types.common import GameMetadataRecord


class MetadataClient:
    """Builds unified metadata records for Steam apps.

    Product info and store details are fetched concurrently; either may fail
    without affecting the other. Artwork is resolved afterwards and all of it
    is merged by the MetadataComposer.

    Example:
        from steam_metadata import BackgroundSource, MetadataClient, MetadataConfig

        config = MetadataConfig(background_source=BackgroundSource.BANNER)

        async with MetadataClient(config) as client:
            record = await client.get_metadata(620)
            print(record.name, record.cover_url)
    """

    def __init__(
        self,
        config: MetadataConfig | None = None,
        cache: StoreCacheService | None = None,
        product_info_client: ProductInfoClient | None = None,
        resources: Resources | None = None,
        http_client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the MetadataClient.

        Args:
            config: Client configuration (defaults if None)
            cache: Store cache service (built from ``config.cache`` if None)
            product_info_client: Product info client (steamcmd.net mirror if None)
            resources: Localized link labels (English if None)
            http_client: Shared httpx client for all HTTP requests
            logger: Logger passed to every component
        """
        self.config = config or MetadataConfig()
        self.logger = logger or logging.getLogger(__name__)
        self._cache = cache
        self._owns_cache = cache is None
        self._product_info_client = product_info_client
        self._owns_product_info_client = product_info_client is None
        self._resources = resources
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._initialized = False

    async def __aenter__(self) -> MetadataClient:
        """Async context manager entry."""
        try:
            await self._initialize()
        except Exception:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Create the cache, HTTP client and pipeline components."""
        if self._initialized:
            return

        self.config.validate()
        config = self.config

        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                headers={"User-Agent": config.user_agent},
                timeout=config.default_timeout,
                follow_redirects=True,
            )

        if self._cache is None:
            self._cache = self._create_cache()

        if self._product_info_client is None:
            try:
                self._product_info_client = SteamCMDProductInfoClient(
                    base_url=config.product_info_url,
                    timeout=config.default_timeout,
                    user_agent=config.user_agent,
                    client=self._http_client,
                    logger=self.logger,
                )
            except Exception as e:
                raise ProviderConnectionError("steamcmd", str(e)) from e

        self._product_info = ProductInfoFetcher(
            self._product_info_client,
            strict=config.strict,
            logger=self.logger,
        )
        self._store = StoreDetailsFetcher(
            cache=self._cache,
            api_url=config.store_api_url,
            language=config.language,
            max_attempts=config.max_attempts,
            retry_delay=config.retry_delay,
            strict=config.strict,
            timeout=config.default_timeout,
            user_agent=config.user_agent,
            client=self._http_client,
            logger=self.logger,
        )
        self._prober = ExistenceProber(
            timeout=config.default_timeout,
            user_agent=config.user_agent,
            client=self._http_client,
            logger=self.logger,
        )
        self._resolver = AssetResolver(
            self._prober,
            download_vertical_covers=config.download_vertical_covers,
            background_source=config.background_source,
            logger=self.logger,
        )
        self._composer = MetadataComposer(self._resources, logger=self.logger)
        self._initialized = True

    def _create_cache(self) -> StoreCacheService:
        """Build the store cache service described by ``config.cache``."""
        cache_config = self.config.cache

        if cache_config.backend == "memory":
            backend = MemoryCache(max_size=cache_config.max_size, default_ttl=cache_config.ttl)
            return BackendStoreCache(backend, ttl=cache_config.ttl, logger=self.logger)

        if cache_config.backend == "redis":
            try:
                from redis.asyncio import Redis

                from steam_metadata.cache.redis import RedisCache
            except ImportError as e:
                raise InvalidConfigurationError(
                    "the redis cache backend needs the 'redis' extra installed"
                ) from e

            client = Redis.from_url(
                cache_config.connection_string or "redis://localhost:6379",
                **cache_config.options,
            )
            return BackendStoreCache(
                RedisCache(client, default_ttl=cache_config.ttl),
                ttl=cache_config.ttl,
                logger=self.logger,
            )

        if cache_config.backend == "services":
            return ServicesStoreCache(
                cache_config.connection_string,
                timeout=self.config.default_timeout,
                user_agent=self.config.user_agent,
                client=self._http_client,
                logger=self.logger,
            )

        return BackendStoreCache(NullCache(), logger=self.logger)

    async def get_metadata(
        self,
        app_id: int,
        existing_name: str | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> GameMetadataRecord:
        """Build the metadata record for an app.

        Args:
            app_id: Steam app id
            existing_name: Name to use when product info has none
            cancel_event: Event that aborts the lookup when set

        Returns:
            The composed record; sources that failed leave their fields empty

        Raises:
            InvalidAppIdError: If ``app_id`` is not a positive integer
            FetchCancelledError: If ``cancel_event`` is set during the lookup
        """
        if isinstance(app_id, bool) or not isinstance(app_id, int) or app_id <= 0:
            raise InvalidAppIdError(app_id)

        await self._initialize()

        product_result, store_result = await asyncio.gather(
            self._product_info.fetch(app_id),
            self._store.fetch(app_id, cancel_event),
            return_exceptions=True,
        )
        product_info = self._unwrap(app_id, "product info", product_result)
        store_details = self._unwrap(app_id, "store details", store_result)

        if cancel_event is not None and cancel_event.is_set():
            raise FetchCancelledError(app_id)

        assets = await self._resolver.resolve(app_id, product_info, store_details, cancel_event)
        return self._composer.compose(
            app_id,
            product_info,
            store_details,
            assets,
            existing_name=existing_name,
        )

    def _unwrap(self, app_id: int, source: str, result):
        """Turn a gathered result into a value or None, re-raising when required."""
        if not isinstance(result, BaseException):
            return result
        if isinstance(result, (FetchCancelledError, asyncio.CancelledError)):
            raise result
        if self.config.strict or not isinstance(result, Exception):
            raise result
        self.logger.error("Failed to download Steam %s for %s: %s", source, app_id, result)
        return None

    async def close(self) -> None:
        """Close the components this client created.

        A cache, product info client or HTTP client passed in by the caller is
        left open.
        """
        if self._owns_cache and self._cache is not None:
            await self._cache.close()
            self._cache = None
        if self._owns_product_info_client and self._product_info_client is not None:
            await self._product_info_client.close()
            self._product_info_client = None
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        self._initialized = False
