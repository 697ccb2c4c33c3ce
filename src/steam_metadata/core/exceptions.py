"""Custom exceptions for the steam-metadata library."""

from __future__ import annotations


class MetadataError(Exception):
    """Base exception for all metadata-related errors."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        self.provider = provider
        super().__init__(message)


class ProviderConnectionError(MetadataError):
    """Raised when connection to a provider fails."""

    def __init__(self, provider: str, details: str | None = None) -> None:
        message = f"Connection failed for provider '{provider}'"
        if details:
            message += f": {details}"
        super().__init__(message, provider)


class ProviderRateLimitError(MetadataError):
    """Raised when a provider rate limit is exceeded."""

    def __init__(
        self, provider: str, retry_after: float | None = None, details: str | None = None
    ) -> None:
        self.retry_after = retry_after
        message = f"Rate limit exceeded for provider '{provider}'"
        if retry_after:
            message += f" (retry after {retry_after}s)"
        if details:
            message += f": {details}"
        super().__init__(message, provider)


class InvalidAppIdError(MetadataError):
    """Raised when an app id is not a positive integer."""

    def __init__(self, app_id: object) -> None:
        self.app_id = app_id
        super().__init__(f"Invalid app id: {app_id!r}")


class InvalidConfigurationError(MetadataError):
    """Raised when configuration is invalid."""

    def __init__(self, details: str) -> None:
        super().__init__(f"Invalid configuration: {details}")


class CacheError(MetadataError):
    """Raised when a cache operation fails."""

    def __init__(self, operation: str, details: str | None = None) -> None:
        message = f"Cache {operation} failed"
        if details:
            message += f": {details}"
        super().__init__(message)


class FetchCancelledError(MetadataError):
    """Raised when a caller cancels a fetch in progress."""

    def __init__(self, app_id: int, provider: str | None = None) -> None:
        self.app_id = app_id
        super().__init__(f"Fetch cancelled for app {app_id}", provider)
