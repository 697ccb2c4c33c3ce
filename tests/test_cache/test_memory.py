"""Tests for the memory cache backend."""

import pytest

from steam_metadata.cache import memory
from steam_metadata.cache.memory import MemoryCache

PAYLOAD = '{"620": {"success": true, "data": {"name": "Portal 2"}}}'


@pytest.fixture
def cache():
    """Create a memory cache for testing."""
    return MemoryCache(max_size=10, default_ttl=60)


@pytest.fixture
def clock(monkeypatch):
    """Controllable replacement for time.time inside the memory cache."""

    class Clock:
        now = 1_000_000.0

    monkeypatch.setattr(memory.time, "time", lambda: Clock.now)
    return Clock


class TestMemoryCache:
    """Tests for MemoryCache."""

    async def test_set_and_get(self, cache):
        """Test that stored payloads are returned unchanged."""
        await cache.set("steam:store:620", PAYLOAD)
        assert await cache.get("steam:store:620") == PAYLOAD

    async def test_get_missing_key(self, cache):
        """Test getting a missing key returns None."""
        assert await cache.get("steam:store:1") is None

    async def test_delete(self, cache):
        """Test deleting a key reports whether it existed."""
        await cache.set("steam:store:620", PAYLOAD)

        assert await cache.delete("steam:store:620") is True
        assert await cache.delete("steam:store:620") is False
        assert await cache.get("steam:store:620") is None

    async def test_clear(self, cache):
        """Test clearing all keys."""
        await cache.set("a", "1")
        await cache.set("b", "2")
        await cache.clear()

        assert cache.size == 0
        assert await cache.get("a") is None

    async def test_default_ttl_expiry(self, cache, clock):
        """Test that entries expire after the default TTL."""
        await cache.set("steam:store:620", PAYLOAD)

        clock.now += 59
        assert await cache.get("steam:store:620") == PAYLOAD

        clock.now += 2
        assert await cache.get("steam:store:620") is None
        assert cache.size == 0

    async def test_custom_ttl(self, cache, clock):
        """Test that a per-key TTL overrides the default."""
        await cache.set("short", "1", ttl=5)
        await cache.set("long", "2", ttl=600)

        clock.now += 120

        assert await cache.get("short") is None
        assert await cache.get("long") == "2"

    async def test_zero_ttl_never_expires(self, clock):
        """Test that a TTL of zero keeps entries forever."""
        cache = MemoryCache(default_ttl=0)
        await cache.set("steam:store:620", PAYLOAD)

        clock.now += 10 * 365 * 86400

        assert await cache.get("steam:store:620") == PAYLOAD

    async def test_lru_eviction(self):
        """Test that the least recently used entry is evicted when full."""
        cache = MemoryCache(max_size=3, default_ttl=60)

        await cache.set("10", "a")
        await cache.set("20", "b")
        await cache.set("30", "c")
        await cache.get("10")
        await cache.set("40", "d")

        assert cache.size == 3
        assert await cache.get("10") == "a"
        assert await cache.get("20") is None
        assert await cache.get("30") == "c"
        assert await cache.get("40") == "d"

    async def test_overwrite_does_not_evict(self):
        """Test that replacing a key in a full cache keeps the others."""
        cache = MemoryCache(max_size=2, default_ttl=60)
        await cache.set("10", "a")
        await cache.set("20", "b")
        await cache.set("10", "c")

        assert await cache.get("10") == "c"
        assert await cache.get("20") == "b"

    async def test_close(self, cache):
        """Test that closing the cache drops its entries."""
        await cache.set("steam:store:620", PAYLOAD)
        await cache.close()
        assert await cache.get("steam:store:620") is None
