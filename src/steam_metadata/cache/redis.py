"""Redis cache backend implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from steam_metadata.cache.base import CacheBackend

if TYPE_CHECKING:
    from redis.asyncio import Redis


class RedisCache(CacheBackend):
    """Redis-based cache backend.

    Shares cached store payloads between processes. Values are stored as
    plain text with a Redis-side TTL.

    Args:
        client: An async Redis client instance
        default_ttl: Default TTL in seconds (default: 86400)
        prefix: Key prefix for namespacing (default: "steam_metadata:")

    Example:
        from redis.asyncio import Redis

        redis = Redis.from_url("redis://localhost:6379")
        cache = RedisCache(redis)
    """

    def __init__(
        self,
        client: Redis,
        default_ttl: int = 86400,
        prefix: str = "steam_metadata:",
    ) -> None:
        self._client = client
        self._default_ttl = default_ttl
        self._prefix = prefix

    def _make_key(self, key: str) -> str:
        """Create a prefixed key."""
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> str | None:
        data = await self._client.get(self._make_key(key))
        if data is None:
            return None
        if isinstance(data, bytes):
            return data.decode("utf-8")
        return data

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        if ttl is None:
            ttl = self._default_ttl

        if ttl > 0:
            await self._client.setex(self._make_key(key), ttl, value)
        else:
            await self._client.set(self._make_key(key), value)

    async def delete(self, key: str) -> bool:
        result = await self._client.delete(self._make_key(key))
        return result > 0

    async def clear(self) -> None:
        """Clear all entries with our prefix from the cache."""
        cursor = 0
        while True:
            cursor, keys = await self._client.scan(
                cursor, match=f"{self._prefix}*", count=100
            )
            if keys:
                await self._client.delete(*keys)
            if cursor == 0:
                break

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()
