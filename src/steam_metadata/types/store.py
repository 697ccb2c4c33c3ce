"""Steam store (appdetails) type definitions.

Based on the store endpoint: https://store.steampowered.com/api/appdetails
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@enum.unique
class SteamCategory(enum.IntEnum):
    """Store category ids with special handling."""

    ACHIEVEMENTS = 22
    WORKSHOP = 30
    VR_SUPPORT = 31


@dataclass
class StoreCategory:
    """A store category tag (e.g. "Single-player", "Steam Achievements")."""

    id: int
    description: str = ""


@dataclass
class StoreGenre:
    """A store genre."""

    id: str
    description: str = ""


@dataclass
class StoreScreenshot:
    """A store screenshot with thumbnail and full-size paths."""

    id: int
    path_thumbnail: str = ""
    path_full: str = ""


def _strings(values: Any) -> list[str]:
    if not isinstance(values, list):
        return []
    return [str(v) for v in values if v is not None]


@dataclass
class StoreDetails:
    """The ``data`` object of a successful appdetails response.

    Attributes:
        name: Store title
        detailed_description: HTML description, may contain CDN placeholders
        release_date: Release date as displayed by the store
        critic_score: Metacritic score, if any
        publishers: Publisher names
        developers: Developer names
        categories: Category tags
        genres: Genres
        screenshots: Screenshots in store order
    """

    name: str = ""
    detailed_description: str = ""
    release_date: str | None = None
    critic_score: int | None = None
    publishers: list[str] = field(default_factory=list)
    developers: list[str] = field(default_factory=list)
    categories: list[StoreCategory] = field(default_factory=list)
    genres: list[StoreGenre] = field(default_factory=list)
    screenshots: list[StoreScreenshot] = field(default_factory=list)

    def has_category(self, category_id: int) -> bool:
        """Check whether a category id is tagged on this app."""
        return any(c.id == category_id for c in self.categories)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StoreDetails:
        """Build StoreDetails from the ``data`` object of the store envelope."""
        release = data.get("release_date")
        release_date = release.get("date") if isinstance(release, Mapping) else None

        metacritic = data.get("metacritic")
        critic_score = None
        if isinstance(metacritic, Mapping) and metacritic.get("score") is not None:
            try:
                critic_score = int(metacritic["score"])
            except (TypeError, ValueError):
                critic_score = None

        categories = [
            StoreCategory(id=int(c["id"]), description=c.get("description") or "")
            for c in data.get("categories") or []
            if isinstance(c, Mapping) and "id" in c
        ]
        genres = [
            StoreGenre(id=str(g.get("id", "")), description=g.get("description") or "")
            for g in data.get("genres") or []
            if isinstance(g, Mapping)
        ]
        screenshots = [
            StoreScreenshot(
                id=int(s.get("id", 0)),
                path_thumbnail=s.get("path_thumbnail") or "",
                path_full=s.get("path_full") or "",
            )
            for s in data.get("screenshots") or []
            if isinstance(s, Mapping)
        ]

        return cls(
            name=data.get("name") or "",
            detailed_description=data.get("detailed_description") or "",
            release_date=release_date or None,
            critic_score=critic_score,
            publishers=_strings(data.get("publishers")),
            developers=_strings(data.get("developers")),
            categories=categories,
            genres=genres,
            screenshots=screenshots,
        )
