"""End-to-end tests for MetadataClient with mocked HTTP services."""

import asyncio
import sys

import httpx
import pytest

from steam_metadata import (
    BackgroundSource,
    CacheConfig,
    MetadataClient,
    MetadataConfig,
)
from steam_metadata.core.exceptions import (
    FetchCancelledError,
    InvalidAppIdError,
    InvalidConfigurationError,
    MetadataError,
)
from steam_metadata.providers.store import STORE_API_URL

CDN = "https://steamcdn-a.akamaihd.net"
CACHE_SERVICE_URL = "https://cache.example.com/api"

pytestmark = pytest.mark.respx(assert_all_called=False)


@pytest.fixture
def cdn(respx_mock):
    """CDN where only the header image and the first page background exist."""
    respx_mock.head(f"{CDN}/steam/apps/620/header.jpg").respond(200)
    respx_mock.head(f"{CDN}/steam/apps/620/page.bg.jpg").respond(200)
    respx_mock.head(url__startswith=CDN).respond(404)
    return respx_mock


@pytest.fixture
def store_api(cdn, store_payload):
    """Store API answering with the Portal 2 payload."""
    return cdn.get(STORE_API_URL).respond(200, text=store_payload)


@pytest.fixture
def product_client(make_product_client, product_info):
    return make_product_client({620: product_info})


class TestGetMetadata:
    """Tests for complete lookups."""

    async def test_full_record(self, store_api, fast_config, store_cache, product_client):
        """Test a lookup where every source answers."""
        async with MetadataClient(
            fast_config, cache=store_cache, product_info_client=product_client
        ) as client:
            record = await client.get_metadata(620)

        assert record.app_id == 620
        assert record.name == "Portal 2"
        assert record.critic_score == 95
        assert record.publishers == ["Valve"]
        assert "VR Support" not in record.features
        assert [a.name for a in record.actions] == [
            "Play Portal 2 (skip intro)",
            "Authoring Tools",
            "Manual",
        ]
        assert len(record.links) == 7
        assert record.icon_url == (
            f"{CDN}/steamcommunity/public/images/apps/620/"
            "2e478fc6874d06ae5baf0d147f6f21203291aa02.ico"
        )
        assert record.cover_url == f"{CDN}/steam/apps/620/header.jpg"
        assert record.background_url == f"{CDN}/steam/apps/620/page.bg.jpg"

        assert store_api.call_count == 1
        assert product_client.calls == [620]
        assert [app_id for app_id, _ in store_cache.puts] == [620]

    async def test_second_lookup_uses_cache(self, store_api, fast_config, product_client):
        """Test that the built-in memory cache serves repeated lookups."""
        async with MetadataClient(fast_config, product_info_client=product_client) as client:
            first = await client.get_metadata(620)
            second = await client.get_metadata(620)

        assert store_api.call_count == 1
        assert first.description == second.description

    async def test_screenshot_background(self, store_api, store_cache, product_client):
        """Test the store screenshot background strategy."""
        config = MetadataConfig(
            retry_delay=0, background_source=BackgroundSource.STORE_SCREENSHOT
        )

        async with MetadataClient(
            config, cache=store_cache, product_info_client=product_client
        ) as client:
            record = await client.get_metadata(620)

        assert record.background_url.endswith(".1920x1080.jpg")
        assert "?" not in record.background_url

    async def test_product_info_failure_degrades(
        self, store_api, fast_config, store_cache, make_product_client
    ):
        """Test that a product info failure leaves only its fields empty."""
        product_client = make_product_client(error=MetadataError("steam down"))

        async with MetadataClient(
            fast_config, cache=store_cache, product_info_client=product_client
        ) as client:
            record = await client.get_metadata(620, existing_name="Portal 2 (library)")

        assert record.name == "Portal 2 (library)"
        assert record.actions == []
        assert record.icon_url is None
        assert record.critic_score == 95
        assert record.cover_url == f"{CDN}/steam/apps/620/header.jpg"

    async def test_store_failure_degrades(self, cdn, fast_config, store_cache, product_client):
        """Test that a store failure leaves only its fields empty."""
        cdn.get(STORE_API_URL).respond(500)

        async with MetadataClient(
            fast_config, cache=store_cache, product_info_client=product_client
        ) as client:
            record = await client.get_metadata(620)

        assert record.name == "Portal 2"
        assert record.description is None
        assert record.features == []
        assert len(record.links) == 5
        assert store_cache.puts == []

    async def test_both_sources_missing(self, cdn, fast_config, store_cache, make_product_client):
        """Test that a record is still produced when nothing is available."""
        cdn.get(STORE_API_URL).respond(500)
        product_client = make_product_client(error=MetadataError("steam down"))

        async with MetadataClient(
            fast_config, cache=store_cache, product_info_client=product_client
        ) as client:
            record = await client.get_metadata(620, existing_name="Portal 2")

        assert record.name == "Portal 2"
        assert len(record.links) == 5
        assert record.actions == []
        assert record.features == []

    async def test_strict_propagates_errors(
        self, store_api, store_cache, make_product_client
    ):
        """Test that strict mode raises instead of degrading."""
        product_client = make_product_client(error=MetadataError("steam down"))
        config = MetadataConfig(retry_delay=0, strict=True)

        async with MetadataClient(
            config, cache=store_cache, product_info_client=product_client
        ) as client:
            with pytest.raises(MetadataError, match="steam down"):
                await client.get_metadata(620)

    async def test_cancelled_lookup(self, store_api, fast_config, store_cache, product_client):
        """Test that a set cancel event aborts the lookup."""
        cancel = asyncio.Event()
        cancel.set()

        async with MetadataClient(
            fast_config, cache=store_cache, product_info_client=product_client
        ) as client:
            with pytest.raises(FetchCancelledError):
                await client.get_metadata(620, cancel_event=cancel)

        assert store_api.call_count == 0

    async def test_cancelled_during_artwork(
        self, respx_mock, store_payload, fast_config, store_cache, product_client
    ):
        """Test that cancelling during artwork checks stops the remaining requests."""
        cancel = asyncio.Event()

        def cancel_and_miss(request):
            cancel.set()
            return httpx.Response(404)

        respx_mock.get(STORE_API_URL).respond(200, text=store_payload)
        artwork = respx_mock.head(url__startswith=CDN).mock(side_effect=cancel_and_miss)

        async with MetadataClient(
            fast_config, cache=store_cache, product_info_client=product_client
        ) as client:
            with pytest.raises(FetchCancelledError):
                await client.get_metadata(620, cancel_event=cancel)

        assert artwork.call_count == 1

    @pytest.mark.parametrize("app_id", [0, -5, True, "620", 6.2])
    async def test_invalid_app_id(self, app_id, product_client):
        """Test that invalid app ids are rejected before any request."""
        client = MetadataClient(product_info_client=product_client)

        with pytest.raises(InvalidAppIdError):
            await client.get_metadata(app_id)

        assert product_client.calls == []


class TestCacheBackends:
    """Tests for cache services built from configuration."""

    async def test_none_backend(self, store_api, product_client):
        """Test that the none backend always goes to the store API."""
        config = MetadataConfig(retry_delay=0, cache=CacheConfig(backend="none"))

        async with MetadataClient(config, product_info_client=product_client) as client:
            await client.get_metadata(620)
            await client.get_metadata(620)

        assert store_api.call_count == 2

    async def test_services_backend(self, cdn, store_api, store_payload, product_client):
        """Test that the services backend is read and written over HTTP."""
        cache_url = f"{CACHE_SERVICE_URL}/steam/store/620"
        cache_get = cdn.get(cache_url).respond(404)
        cache_post = cdn.post(cache_url).respond(201)
        config = MetadataConfig(
            retry_delay=0,
            cache=CacheConfig(backend="services", connection_string=CACHE_SERVICE_URL),
        )

        async with MetadataClient(config, product_info_client=product_client) as client:
            record = await client.get_metadata(620)

        assert record.critic_score == 95
        assert cache_get.call_count == 1
        assert store_api.call_count == 1
        assert cache_post.call_count == 1
        assert cache_post.calls.last.request.content == store_payload.encode("utf-8")

    async def test_services_backend_hit(self, cdn, store_api, store_payload, product_client):
        """Test that a services cache hit skips the store API."""
        cdn.get(f"{CACHE_SERVICE_URL}/steam/store/620").respond(200, text=store_payload)
        config = MetadataConfig(
            cache=CacheConfig(backend="services", connection_string=CACHE_SERVICE_URL),
        )

        async with MetadataClient(config, product_info_client=product_client) as client:
            record = await client.get_metadata(620)

        assert record.genres == ["Action", "Adventure"]
        assert store_api.call_count == 0

    async def test_redis_backend_without_redis(self, monkeypatch, product_client):
        """Test that a missing redis package is a configuration error."""
        monkeypatch.setitem(sys.modules, "redis.asyncio", None)
        config = MetadataConfig(cache=CacheConfig(backend="redis"))

        with pytest.raises(InvalidConfigurationError, match="redis"):
            async with MetadataClient(config, product_info_client=product_client):
                pass


class TestLifecycle:
    """Tests for configuration checks and resource ownership."""

    async def test_invalid_config(self, product_client):
        """Test that configuration is validated on entry."""
        config = MetadataConfig(max_attempts=0)

        with pytest.raises(InvalidConfigurationError, match="max_attempts"):
            async with MetadataClient(config, product_info_client=product_client):
                pass

    async def test_shared_http_client_left_open(self, product_client):
        """Test that a caller's HTTP client survives the MetadataClient."""
        async with httpx.AsyncClient() as http_client:
            async with MetadataClient(
                product_info_client=product_client, http_client=http_client
            ):
                pass
            assert not http_client.is_closed
