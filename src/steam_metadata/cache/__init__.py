"""Cache backends and store cache services for the steam-metadata library."""

from steam_metadata.cache.base import CacheBackend, NullCache
from steam_metadata.cache.memory import MemoryCache
from steam_metadata.cache.service import (
    BackendStoreCache,
    ServicesStoreCache,
    StoreCacheService,
)

__all__ = [
    "BackendStoreCache",
    "CacheBackend",
    "MemoryCache",
    "NullCache",
    "ServicesStoreCache",
    "StoreCacheService",
]
