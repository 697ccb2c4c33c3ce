"""Artwork resolution for steam-metadata.

Example usage:
    from steam_metadata.artwork import AssetResolver, ExistenceProber

    async with ExistenceProber() as prober:
        resolver = AssetResolver(prober, download_vertical_covers=False)
        assets = await resolver.resolve(620, product_info, store_details)
"""

from steam_metadata.artwork.probe import ExistenceProber
from steam_metadata.artwork.resolver import AssetResolver, strip_query_string

__all__ = [
    "AssetResolver",
    "ExistenceProber",
    "strip_query_string",
]
