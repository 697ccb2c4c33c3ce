"""Localized label lookup for generated links."""

from __future__ import annotations

import abc
from collections.abc import Mapping

LINK_COMMUNITY_HUB = "links.community_hub"
LINK_DISCUSSIONS = "links.discussions"
LINK_NEWS = "links.news"
LINK_STORE_PAGE = "links.store_page"
LINK_ACHIEVEMENTS = "links.achievements"
LINK_WORKSHOP = "links.workshop"

ENGLISH_STRINGS: dict[str, str] = {
    LINK_COMMUNITY_HUB: "Community Hub",
    LINK_DISCUSSIONS: "Discussions",
    LINK_NEWS: "News",
    LINK_STORE_PAGE: "Store Page",
    LINK_ACHIEVEMENTS: "Achievements",
    LINK_WORKSHOP: "Workshop",
}


class Resources(abc.ABC):
    """Source of localized strings supplied by the host application."""

    @abc.abstractmethod
    def get_string(self, key: str) -> str:
        """Get the localized string for a key."""


class DefaultResources(Resources):
    """English labels, optionally overridden per key.

    Unknown keys are returned unchanged.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._strings = dict(ENGLISH_STRINGS)
        if overrides:
            self._strings.update(overrides)

    def get_string(self, key: str) -> str:
        return self._strings.get(key, key)
