"""Configuration classes for the steam-metadata library."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from steam_metadata.core.exceptions import InvalidConfigurationError

CACHE_BACKENDS = frozenset(["memory", "redis", "services", "none"])


def _check_number(name: str, value: Any, integer: bool = False) -> None:
    expected = int if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, expected):
        raise InvalidConfigurationError(
            f"{name} must be a number, got {type(value).__name__}"
        )


@enum.unique
class BackgroundSource(enum.StrEnum):
    """Strategy used to pick a game's background image."""

    IMAGE = "image"
    STORE_SCREENSHOT = "store_screenshot"
    STORE_BACKGROUND = "store_background"
    BANNER = "banner"
    NONE = "none"


@dataclass
class CacheConfig:
    """Configuration for the store-details cache tier.

    Attributes:
        backend: Cache backend type ("memory", "redis", "services", "none")
        ttl: Time-to-live for cached store payloads in seconds
        max_size: Maximum number of entries for memory cache
        connection_string: Redis URL, or base URL of the cache web service
        options: Extra keyword arguments for the Redis client
    """

    backend: str = "memory"
    ttl: int = 86400  # 1 day
    max_size: int = 10000
    connection_string: str = ""
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class MetadataConfig:
    """Main configuration for the MetadataClient.

    Attributes:
        download_vertical_covers: Prefer the 600x900 library capsule as cover
        background_source: Strategy for the background image
        cache: Cache configuration
        default_timeout: Request timeout in seconds
        user_agent: User agent string for HTTP requests
        max_attempts: Store API attempts before giving up on rate limiting
        retry_delay: Seconds to wait after a 429 response
        strict: Propagate fetch errors instead of degrading to absence
        language: Store API language for descriptions
        store_api_url: Store details endpoint
        product_info_url: Product info endpoint
    """

    download_vertical_covers: bool = True
    background_source: BackgroundSource = BackgroundSource.IMAGE
    cache: CacheConfig = field(default_factory=CacheConfig)
    default_timeout: int = 30
    user_agent: str = "steam-metadata/1.0"
    max_attempts: int = 10
    retry_delay: float = 2.5
    strict: bool = False
    language: str = "english"
    store_api_url: str = "https://store.steampowered.com/api/appdetails"
    product_info_url: str = "https://api.steamcmd.net/v1/info"

    def validate(self) -> None:
        """Check field values, raising InvalidConfigurationError on bad input."""
        _check_number("max_attempts", self.max_attempts, integer=True)
        _check_number("retry_delay", self.retry_delay)
        _check_number("default_timeout", self.default_timeout)
        _check_number("cache.ttl", self.cache.ttl)
        _check_number("cache.max_size", self.cache.max_size, integer=True)

        if self.max_attempts < 1:
            raise InvalidConfigurationError("max_attempts must be at least 1")
        if self.retry_delay < 0:
            raise InvalidConfigurationError("retry_delay must not be negative")
        if self.default_timeout <= 0:
            raise InvalidConfigurationError("default_timeout must be positive")
        if self.cache.backend not in CACHE_BACKENDS:
            raise InvalidConfigurationError(
                f"unknown cache backend '{self.cache.backend}'"
            )
        if self.cache.backend == "services" and not self.cache.connection_string:
            raise InvalidConfigurationError(
                "the services cache backend needs a connection_string"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MetadataConfig:
        """Create a MetadataConfig from a dictionary."""
        kwargs: dict[str, Any] = {}

        if "cache" in data:
            try:
                kwargs["cache"] = CacheConfig(**data["cache"])
            except TypeError as e:
                raise InvalidConfigurationError(f"invalid cache settings: {e}") from e

        if "background_source" in data:
            try:
                kwargs["background_source"] = BackgroundSource(data["background_source"])
            except ValueError as e:
                raise InvalidConfigurationError(
                    f"unknown background_source '{data['background_source']}'"
                ) from e

        # Copy simple fields
        for key in [
            "download_vertical_covers",
            "default_timeout",
            "user_agent",
            "max_attempts",
            "retry_delay",
            "strict",
            "language",
            "store_api_url",
            "product_info_url",
        ]:
            if key in data:
                kwargs[key] = data[key]

        config = cls(**kwargs)
        config.validate()
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary."""
        from dataclasses import asdict

        data = asdict(self)
        data["background_source"] = str(self.background_source)
        return data
