"""Tests for URL existence probing."""

import httpx

from steam_metadata.artwork.probe import ExistenceProber

URL = "https://steamcdn-a.akamaihd.net/steam/apps/620/header.jpg"


class TestExistenceProber:
    """Tests for ExistenceProber."""

    async def test_success_status(self, respx_mock):
        """Test that a 200 response means the URL exists."""
        route = respx_mock.head(URL).mock(return_value=httpx.Response(200))

        async with ExistenceProber() as prober:
            assert await prober.probe(URL) is True

        assert route.call_count == 1

    async def test_not_found(self, respx_mock):
        """Test that a 404 response means the URL does not exist."""
        respx_mock.head(URL).mock(return_value=httpx.Response(404))

        async with ExistenceProber() as prober:
            assert await prober.probe(URL) is False

    async def test_other_success_codes(self, respx_mock):
        """Test that any 2xx status counts as success."""
        respx_mock.head(URL).mock(return_value=httpx.Response(204))

        async with ExistenceProber() as prober:
            assert await prober.probe(URL) is True

    async def test_follows_redirects(self, respx_mock):
        """Test that redirects are followed to the final status."""
        target = "https://cdn.akamai.steamstatic.com/steam/apps/620/header.jpg"
        respx_mock.head(URL).mock(
            return_value=httpx.Response(302, headers={"Location": target})
        )
        respx_mock.head(target).mock(return_value=httpx.Response(200))

        async with ExistenceProber() as prober:
            assert await prober.probe(URL) is True

    async def test_transport_error(self, respx_mock):
        """Test that network failures mean the URL does not exist."""
        route = respx_mock.head(URL).mock(side_effect=httpx.ConnectTimeout)

        async with ExistenceProber() as prober:
            assert await prober.probe(URL) is False

        # No retry
        assert route.call_count == 1
