"""Remote data providers for steam-metadata."""

from steam_metadata.providers.base import HttpService
from steam_metadata.providers.product_info import (
    ProductInfoClient,
    ProductInfoFetcher,
    SteamCMDProductInfoClient,
)
from steam_metadata.providers.store import StoreDetailsFetcher, parse_store_payload

__all__ = [
    "HttpService",
    "ProductInfoClient",
    "ProductInfoFetcher",
    "SteamCMDProductInfoClient",
    "StoreDetailsFetcher",
    "parse_store_payload",
]
