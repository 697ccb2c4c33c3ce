"""In-memory cache backend implementation."""

from __future__ import annotations

import asyncio
import time
from collections import OrderedDict
from dataclasses import dataclass

from steam_metadata.cache.base import CacheBackend


@dataclass
class CacheEntry:
    """A single cache entry with expiration."""

    value: str
    expires_at: float | None = None

    def is_expired(self) -> bool:
        """Check if this entry has expired."""
        if self.expires_at is None:
            return False
        return time.time() > self.expires_at


class MemoryCache(CacheBackend):
    """In-memory LRU cache with TTL support.

    Expired entries are dropped lazily when they are read.

    Args:
        max_size: Maximum number of entries to store (default: 10000)
        default_ttl: Default TTL in seconds, 0 disables expiry (default: 86400)

    Example:
        cache = MemoryCache(max_size=1000, default_ttl=300)
        await cache.set("steam:store:620", payload)
        payload = await cache.get("steam:store:620")
    """

    def __init__(self, max_size: int = 10000, default_ttl: float = 86400) -> None:
        self._cache: OrderedDict[str, CacheEntry] = OrderedDict()
        self._max_size = max_size
        self._default_ttl = default_ttl
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        async with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            if entry.is_expired():
                del self._cache[key]
                return None

            # Move to end (most recently used)
            self._cache.move_to_end(key)
            return entry.value

    async def set(self, key: str, value: str, ttl: float | None = None) -> None:
        if ttl is None:
            ttl = self._default_ttl

        expires_at = time.time() + ttl if ttl > 0 else None

        async with self._lock:
            if key in self._cache:
                del self._cache[key]
            else:
                while len(self._cache) >= self._max_size:
                    self._cache.popitem(last=False)

            self._cache[key] = CacheEntry(value=value, expires_at=expires_at)

    async def delete(self, key: str) -> bool:
        async with self._lock:
            return self._cache.pop(key, None) is not None

    async def clear(self) -> None:
        async with self._lock:
            self._cache.clear()

    async def close(self) -> None:
        await self.clear()

    @property
    def size(self) -> int:
        """Get the current number of entries in the cache."""
        return len(self._cache)
