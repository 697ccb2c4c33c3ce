"""Common type definitions used across the steam-metadata library.

These types describe the unified record produced for a Steam app from its
product info, store details and resolved artwork.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

# Resolved by the host application when the action is launched
INSTALLATION_DIRECTORY = "{InstallDir}"


@enum.unique
class GameActionType(enum.StrEnum):
    """Kind of launch action."""

    FILE = "file"
    URL = "url"


@dataclass
class Link:
    """A labelled web link.

    Attributes:
        name: Display label
        url: Target URL
    """

    name: str
    url: str


@dataclass
class GameAction:
    """A launch action exposed to the user.

    Attributes:
        name: Display name
        path: Executable path relative to the working directory, or a URL
        arguments: Command line arguments
        type: Whether the action runs a file or opens a URL
        working_dir: Working directory placeholder, None for URL actions
        is_handled_by_plugin: Whether the host should defer launch to a plugin
    """

    name: str
    path: str | None = None
    arguments: str = ""
    type: GameActionType = GameActionType.FILE
    working_dir: str | None = None
    is_handled_by_plugin: bool = False


@dataclass
class ResolvedAssets:
    """Artwork URLs resolved for an app. Each is None when unavailable."""

    icon_url: str | None = None
    cover_url: str | None = None
    background_url: str | None = None


@dataclass
class GameMetadataRecord:
    """Unified metadata for a Steam app.

    This is the main type returned by the MetadataClient.

    Attributes:
        app_id: Steam app id
        name: Game name
        links: Community, store and wiki links
        description: HTML description
        release_date: Release date as displayed by the store
        critic_score: Metacritic score
        publishers: Publisher names
        developers: Developer names
        genres: Genre names
        features: Store categories and VR capabilities
        actions: Additional launch actions
        icon_url: Icon URL
        cover_url: Cover image URL
        background_url: Background image URL
    """

    app_id: int
    name: str | None = None
    links: list[Link] = field(default_factory=list)
    description: str | None = None
    release_date: str | None = None
    critic_score: int | None = None
    publishers: list[str] = field(default_factory=list)
    developers: list[str] = field(default_factory=list)
    genres: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    actions: list[GameAction] = field(default_factory=list)
    icon_url: str | None = None
    cover_url: str | None = None
    background_url: str | None = None

    @property
    def assets(self) -> ResolvedAssets:
        """Convenience accessor for the artwork URLs."""
        return ResolvedAssets(self.icon_url, self.cover_url, self.background_url)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        from dataclasses import asdict

        return asdict(self)
