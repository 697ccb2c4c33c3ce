"""Type definitions for the steam-metadata library."""

from steam_metadata.types.common import (
    INSTALLATION_DIRECTORY,
    GameAction,
    GameActionType,
    GameMetadataRecord,
    Link,
    ResolvedAssets,
)
from steam_metadata.types.keyvalue import MISSING, KeyValue
from steam_metadata.types.store import (
    SteamCategory,
    StoreCategory,
    StoreDetails,
    StoreGenre,
    StoreScreenshot,
)

__all__ = [
    "INSTALLATION_DIRECTORY",
    "GameAction",
    "GameActionType",
    "GameMetadataRecord",
    "Link",
    "ResolvedAssets",
    "MISSING",
    "KeyValue",
    "SteamCategory",
    "StoreCategory",
    "StoreDetails",
    "StoreGenre",
    "StoreScreenshot",
]
