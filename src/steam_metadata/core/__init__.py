"""Core functionality for steam-metadata.

The MetadataClient lives in ``steam_metadata.core.client``; it is not
re-exported here because it depends on the provider and artwork packages.
"""

from steam_metadata.core.composer import MetadataComposer
from steam_metadata.core.config import BackgroundSource, CacheConfig, MetadataConfig
from steam_metadata.core.exceptions import (
    CacheError,
    FetchCancelledError,
    InvalidAppIdError,
    InvalidConfigurationError,
    MetadataError,
    ProviderConnectionError,
    ProviderRateLimitError,
)
from steam_metadata.core.resources import DefaultResources, Resources
from steam_metadata.core.text import parse_description, title_case

__all__ = [
    "MetadataComposer",
    "BackgroundSource",
    "CacheConfig",
    "MetadataConfig",
    "CacheError",
    "FetchCancelledError",
    "InvalidAppIdError",
    "InvalidConfigurationError",
    "MetadataError",
    "ProviderConnectionError",
    "ProviderRateLimitError",
    "DefaultResources",
    "Resources",
    "parse_description",
    "title_case",
]
