"""URL existence probing.

Steam has no API listing which artwork an app has, so candidate CDN URLs are
checked with a HEAD request instead.
"""

from __future__ import annotations

import logging

import httpx

from steam_metadata.providers.base import HttpService


class ExistenceProber(HttpService):
    """Checks whether a URL resolves to a successful response.

    Example:
        async with ExistenceProber() as prober:
            if await prober.probe("https://steamcdn-a.akamaihd.net/steam/apps/620/header.jpg"):
                ...
    """

    name = "probe"

    def __init__(
        self,
        timeout: float = 10,
        user_agent: str = "steam-metadata/1.0",
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(timeout, user_agent, client, logger)

    async def probe(self, url: str) -> bool:
        """Issue a single HEAD request.

        Args:
            url: Candidate URL

        Returns:
            True if the final response status is 2xx, False otherwise
        """
        client = await self._get_client()
        try:
            response = await client.head(url, follow_redirects=True)
        except httpx.HTTPError as e:
            self.logger.debug("Probe failed for %s: %s", url, e)
            return False

        self.logger.debug("Probe %s -> %d", url, response.status_code)
        return response.is_success
