"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from steam_metadata import CacheConfig, KeyValue, MetadataConfig
from steam_metadata.cache.service import StoreCacheService
from steam_metadata.core.exceptions import CacheError
from steam_metadata.providers.product_info import ProductInfoClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(filename: str) -> Any:
    """Load a JSON fixture from tests/fixtures."""
    with open(FIXTURES_DIR / filename) as f:
        return json.load(f)


def load_fixture_text(filename: str) -> str:
    """Load a fixture file as raw text."""
    return (FIXTURES_DIR / filename).read_text()


class RecordingStoreCache(StoreCacheService):
    """Store cache that records every call, optionally failing on demand."""

    def __init__(
        self,
        entries: dict[int, str] | None = None,
        fail_get: bool = False,
        fail_put: bool = False,
    ) -> None:
        self.entries = dict(entries or {})
        self.fail_get = fail_get
        self.fail_put = fail_put
        self.gets: list[int] = []
        self.puts: list[tuple[int, str]] = []

    async def get(self, app_id: int) -> str:
        self.gets.append(app_id)
        if self.fail_get:
            raise CacheError("get", "service unavailable")
        return self.entries.get(app_id, "")

    async def put(self, app_id: int, payload: str) -> bool:
        self.puts.append((app_id, payload))
        if self.fail_put:
            raise CacheError("put", "service unavailable")
        self.entries[app_id] = payload
        return True


class StaticProductInfoClient(ProductInfoClient):
    """Product info client returning canned trees, or raising an error."""

    def __init__(
        self,
        trees: dict[int, KeyValue] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.trees = trees or {}
        self.error = error
        self.calls: list[int] = []

    async def get_product_info(self, app_id: int) -> KeyValue:
        self.calls.append(app_id)
        if self.error is not None:
            raise self.error
        return self.trees[app_id]


@pytest.fixture
def product_info() -> KeyValue:
    """Product info tree for Portal 2."""
    document = load_fixture("steamcmd_info_620.json")
    return KeyValue.from_dict("appinfo", document["data"]["620"])


@pytest.fixture
def store_payload() -> str:
    """Raw appdetails payload for Portal 2."""
    return load_fixture_text("store_appdetails_620.json")


@pytest.fixture
def store_cache() -> RecordingStoreCache:
    """Empty recording store cache."""
    return RecordingStoreCache()


@pytest.fixture
def fast_config() -> MetadataConfig:
    """Configuration with no retry delay and an in-memory cache."""
    return MetadataConfig(
        retry_delay=0,
        cache=CacheConfig(backend="memory", ttl=3600, max_size=100),
    )


@pytest.fixture
def make_store_cache() -> type[RecordingStoreCache]:
    """Factory for recording store caches with custom contents."""
    return RecordingStoreCache


@pytest.fixture
def make_product_client() -> type[StaticProductInfoClient]:
    """Factory for static product info clients."""
    return StaticProductInfoClient


@pytest.fixture
def steamcmd_document() -> dict[str, Any]:
    """Decoded steamcmd.net response for Portal 2."""
    return load_fixture("steamcmd_info_620.json")
