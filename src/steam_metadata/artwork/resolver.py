"""Artwork URL resolution for Steam apps."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import TYPE_CHECKING, Final

from steam_metadata.core.config import BackgroundSource
from steam_metadata.core.exceptions import FetchCancelledError
from steam_metadata.types.common import ResolvedAssets
from steam_metadata.urls import (
    BACKGROUND_IMAGE_URLS,
    BANNER_URL,
    COMMUNITY_ICON_URL,
    COMMUNITY_IMAGE_URL,
    HEADER_IMAGE_URL,
    STORE_BACKGROUND_URL,
    VERTICAL_COVER_URL,
)

if TYPE_CHECKING:
    from steam_metadata.artwork.probe import ExistenceProber
    from steam_metadata.types.keyvalue import KeyValue
    from steam_metadata.types.store import StoreDetails

QUERY_STRING_PATTERN: Final = re.compile(r"\?.*$")


def strip_query_string(url: str) -> str:
    """Remove everything from the first ``?`` onwards."""
    return QUERY_STRING_PATTERN.sub("", url)


class AssetResolver:
    """Derives icon, cover and background URLs for an app.

    Icons come straight from product info. Covers and the default background
    are picked among CDN templates by probing which ones exist.

    Args:
        prober: Prober used to check candidate URLs
        download_vertical_covers: Try the vertical library capsule first
        background_source: Strategy for the background image
        logger: Logger for this component
    """

    def __init__(
        self,
        prober: ExistenceProber,
        download_vertical_covers: bool = True,
        background_source: BackgroundSource = BackgroundSource.IMAGE,
        logger: logging.Logger | None = None,
    ) -> None:
        self.prober = prober
        self.download_vertical_covers = download_vertical_covers
        self.background_source = background_source
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(
        self,
        app_id: int,
        product_info: KeyValue | None,
        store_details: StoreDetails | None,
        cancel_event: asyncio.Event | None = None,
    ) -> ResolvedAssets:
        """Resolve all artwork for an app.

        Args:
            app_id: Steam app id
            product_info: Product info tree, if it was fetched
            store_details: Store details, if they were fetched
            cancel_event: Event that aborts resolution before the next probe

        Returns:
            ResolvedAssets with each URL set or None

        Raises:
            FetchCancelledError: If ``cancel_event`` is set before a probe
        """
        return ResolvedAssets(
            icon_url=self.resolve_icon(app_id, product_info),
            cover_url=await self.resolve_cover(app_id, product_info, cancel_event),
            background_url=await self.resolve_background(app_id, store_details, cancel_event),
        )

    async def _probe(self, app_id: int, url: str, cancel_event: asyncio.Event | None) -> bool:
        if cancel_event is not None and cancel_event.is_set():
            raise FetchCancelledError(app_id)
        return await self.prober.probe(url)

    def resolve_icon(self, app_id: int, product_info: KeyValue | None) -> str | None:
        if product_info is None:
            return None

        client_icon = product_info.get("common", "clienticon")
        if client_icon:
            return COMMUNITY_ICON_URL.format(app_id=app_id, hash=client_icon)

        icon = product_info.get("common", "icon")
        if icon:
            return COMMUNITY_IMAGE_URL.format(app_id=app_id, hash=icon)

        # Some apps have no icon assigned
        return None

    async def resolve_cover(
        self,
        app_id: int,
        product_info: KeyValue | None,
        cancel_event: asyncio.Event | None = None,
    ) -> str | None:
        candidates = [HEADER_IMAGE_URL.format(app_id=app_id)]
        if self.download_vertical_covers:
            candidates.insert(0, VERTICAL_COVER_URL.format(app_id=app_id))

        for url in candidates:
            if await self._probe(app_id, url, cancel_event):
                return url

        if product_info is not None:
            logo = product_info.get("common", "logo")
            if logo:
                self.logger.debug("No store cover for %s, using community logo", app_id)
                return COMMUNITY_IMAGE_URL.format(app_id=app_id, hash=logo)

        return None

    async def resolve_background(
        self,
        app_id: int,
        store_details: StoreDetails | None,
        cancel_event: asyncio.Event | None = None,
    ) -> str | None:
        source = self.background_source

        if source == BackgroundSource.IMAGE:
            for template in BACKGROUND_IMAGE_URLS:
                url = template.format(app_id=app_id)
                if await self._probe(app_id, url, cancel_event):
                    return url
            return None

        if source == BackgroundSource.STORE_SCREENSHOT:
            if store_details is None or not store_details.screenshots:
                return None
            path = store_details.screenshots[0].path_full
            return strip_query_string(path) if path else None

        if source == BackgroundSource.STORE_BACKGROUND:
            return STORE_BACKGROUND_URL.format(app_id=app_id)

        if source == BackgroundSource.BANNER:
            return BANNER_URL.format(app_id=app_id)

        return None
