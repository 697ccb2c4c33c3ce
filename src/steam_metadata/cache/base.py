"""Abstract base class for cache backends."""

from __future__ import annotations

import abc


class CacheBackend(abc.ABC):
    """Abstract base class for key/value cache backends.

    Backends store the raw store-details payload text keyed by a string, so
    every value is a ``str``.
    """

    @abc.abstractmethod
    async def get(self, key: str) -> str | None:
        """Retrieve a value from the cache.

        Args:
            key: The cache key

        Returns:
            The cached text, or None if not found or expired
        """

    @abc.abstractmethod
    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store a value in the cache.

        Args:
            key: The cache key
            value: The text to cache
            ttl: Time-to-live in seconds (None uses default)
        """

    @abc.abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a value from the cache.

        Returns:
            True if the key was deleted, False if it didn't exist
        """

    @abc.abstractmethod
    async def clear(self) -> None:
        """Clear all entries from the cache."""

    async def close(self) -> None:
        """Close any connections and clean up resources."""


class NullCache(CacheBackend):
    """A cache backend that doesn't cache anything.

    Every store lookup goes to the origin API.
    """

    async def get(self, key: str) -> str | None:
        return None

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        pass

    async def delete(self, key: str) -> bool:
        return False

    async def clear(self) -> None:
        pass
