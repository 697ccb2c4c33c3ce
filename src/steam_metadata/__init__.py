"""
steam-metadata: unified metadata for Steam apps.

This library combines Steam product info, store details and CDN artwork into
a single record per app. Store details are served from a cache tier first and
fetched from the rate-limited store API only on a miss.

Example usage:
    from steam_metadata import MetadataClient, MetadataConfig

    config = MetadataConfig(download_vertical_covers=True)

    async with MetadataClient(config) as client:
        record = await client.get_metadata(620)
        print(record.name, record.genres, record.cover_url)
"""

from steam_metadata.artwork import AssetResolver, ExistenceProber
from steam_metadata.cache import (
    BackendStoreCache,
    CacheBackend,
    MemoryCache,
    NullCache,
    ServicesStoreCache,
    StoreCacheService,
)
from steam_metadata.core.client import MetadataClient
from steam_metadata.core.composer import MetadataComposer
from steam_metadata.core.config import BackgroundSource, CacheConfig, MetadataConfig
from steam_metadata.core.exceptions import (
    CacheError,
    FetchCancelledError,
    InvalidAppIdError,
    InvalidConfigurationError,
    MetadataError,
    ProviderConnectionError,
    ProviderRateLimitError,
)
from steam_metadata.core.resources import DefaultResources, Resources
from steam_metadata.providers import (
    ProductInfoClient,
    ProductInfoFetcher,
    SteamCMDProductInfoClient,
    StoreDetailsFetcher,
)
from steam_metadata.types import (
    GameAction,
    GameActionType,
    GameMetadataRecord,
    KeyValue,
    Link,
    ResolvedAssets,
    StoreDetails,
)

__version__ = "1.0.0"

__all__ = [
    # Core
    "BackgroundSource",
    "CacheConfig",
    "MetadataClient",
    "MetadataComposer",
    "MetadataConfig",
    "DefaultResources",
    "Resources",
    # Components
    "AssetResolver",
    "ExistenceProber",
    "ProductInfoClient",
    "ProductInfoFetcher",
    "SteamCMDProductInfoClient",
    "StoreDetailsFetcher",
    # Cache
    "BackendStoreCache",
    "CacheBackend",
    "MemoryCache",
    "NullCache",
    "ServicesStoreCache",
    "StoreCacheService",
    # Exceptions
    "CacheError",
    "FetchCancelledError",
    "InvalidAppIdError",
    "InvalidConfigurationError",
    "MetadataError",
    "ProviderConnectionError",
    "ProviderRateLimitError",
    # Types
    "GameAction",
    "GameActionType",
    "GameMetadataRecord",
    "KeyValue",
    "Link",
    "ResolvedAssets",
    "StoreDetails",
]
