"""Assembly of the unified metadata record.

The composer is pure: given product info, store details and resolved artwork
it always produces the same GameMetadataRecord. Any of the inputs may be
missing, in which case the matching fields are left empty.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from steam_metadata.core.resources import (
    LINK_ACHIEVEMENTS,
    LINK_COMMUNITY_HUB,
    LINK_DISCUSSIONS,
    LINK_NEWS,
    LINK_STORE_PAGE,
    LINK_WORKSHOP,
    DefaultResources,
    Resources,
)
from steam_metadata.core.text import parse_description, title_case
from steam_metadata.types.common import (
    INSTALLATION_DIRECTORY,
    GameAction,
    GameActionType,
    GameMetadataRecord,
    Link,
    ResolvedAssets,
)
from steam_metadata.types.store import SteamCategory
from steam_metadata.urls import (
    ACHIEVEMENTS_URL,
    COMMUNITY_HUB_URL,
    DISCUSSIONS_URL,
    NEWS_URL,
    PCGAMINGWIKI_URL,
    STORE_PAGE_URL,
    WORKSHOP_URL,
)

if TYPE_CHECKING:
    from steam_metadata.types.keyvalue import KeyValue
    from steam_metadata.types.store import StoreDetails

MANUAL_ACTION_NAME: Final = "Manual"
SUPPORTED_OS: Final = "windows"

FEATURE_VR: Final = "VR"
FEATURE_VR_SEATED: Final = "VR Seated"
FEATURE_VR_STANDING: Final = "VR Standing"
FEATURE_VR_ROOM_SCALE: Final = "VR Room-Scale"
FEATURE_VR_KEYBOARD_MOUSE: Final = "VR Keyboard / Mouse"
FEATURE_VR_GAMEPAD: Final = "VR Gamepad"
FEATURE_VR_MOTION_CONTROLLERS: Final = "VR Motion Controllers"

# Child names under common/controllervr that mean tracked motion controllers
MOTION_CONTROLLER_KEYS: Final = frozenset(["oculus", "steamvr"])


def _enabled(node: KeyValue) -> bool:
    return node.value == "1"


def _has_non_empty_items(values: list[str]) -> bool:
    return any(v for v in values)


class MetadataComposer:
    """Builds GameMetadataRecord instances.

    Args:
        resources: Localized labels for generated links
        logger: Logger for this component
    """

    def __init__(
        self,
        resources: Resources | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.resources = resources or DefaultResources()
        self.logger = logger or logging.getLogger(__name__)

    def compose(
        self,
        app_id: int,
        product_info: KeyValue | None,
        store_details: StoreDetails | None,
        assets: ResolvedAssets | None = None,
        existing_name: str | None = None,
    ) -> GameMetadataRecord:
        """Merge all sources into a metadata record.

        Args:
            app_id: Steam app id
            product_info: Product info tree, if it was fetched
            store_details: Store details, if they were fetched
            assets: Resolved artwork URLs
            existing_name: Name to use when product info has none

        Returns:
            The composed record
        """
        assets = assets or ResolvedAssets()

        name = existing_name
        if product_info is not None:
            name = product_info.get("common", "name", default=existing_name)

        description = None
        release_date = None
        critic_score = None
        publishers: list[str] = []
        developers: list[str] = []
        genres: list[str] = []
        features: list[str] = []

        if store_details is not None:
            description = parse_description(store_details.detailed_description)
            release_date = store_details.release_date
            critic_score = store_details.critic_score

            if _has_non_empty_items(store_details.publishers):
                publishers = list(store_details.publishers)
            if _has_non_empty_items(store_details.developers):
                developers = list(store_details.developers)

            features = self._category_features(store_details)

            if store_details.genres:
                genres = [g.description for g in store_details.genres if g.description]

        actions: list[GameAction] = []
        if product_info is not None:
            actions = self._launch_actions(product_info)
            manual = self._manual_action(product_info)
            if manual is not None:
                actions.append(manual)
            features.extend(self._vr_features(product_info, features))

        self.logger.debug(
            "Composing metadata for %s (product info: %s, store details: %s)",
            app_id,
            product_info is not None,
            store_details is not None,
        )
        return GameMetadataRecord(
            app_id=app_id,
            name=name,
            links=self._links(app_id, store_details),
            description=description,
            release_date=release_date,
            critic_score=critic_score,
            publishers=publishers,
            developers=developers,
            genres=genres,
            features=features,
            actions=actions,
            icon_url=assets.icon_url,
            cover_url=assets.cover_url,
            background_url=assets.background_url,
        )

    def _links(self, app_id: int, store_details: StoreDetails | None) -> list[Link]:
        label = self.resources.get_string
        links = [
            Link(label(LINK_COMMUNITY_HUB), COMMUNITY_HUB_URL.format(app_id=app_id)),
            Link(label(LINK_DISCUSSIONS), DISCUSSIONS_URL.format(app_id=app_id)),
            Link(label(LINK_NEWS), NEWS_URL.format(app_id=app_id)),
            Link(label(LINK_STORE_PAGE), STORE_PAGE_URL.format(app_id=app_id)),
            Link("PCGamingWiki", PCGAMINGWIKI_URL.format(app_id=app_id)),
        ]

        if store_details is not None:
            if store_details.has_category(SteamCategory.ACHIEVEMENTS):
                links.append(
                    Link(label(LINK_ACHIEVEMENTS), ACHIEVEMENTS_URL.format(app_id=app_id))
                )
            if store_details.has_category(SteamCategory.WORKSHOP):
                links.append(Link(label(LINK_WORKSHOP), WORKSHOP_URL.format(app_id=app_id)))

        return links

    def _category_features(self, store_details: StoreDetails) -> list[str]:
        # VR support comes from product info instead, which is more detailed.
        # Achievements and workshop stay features even though they also add links.
        return [
            title_case(category.description)
            for category in store_details.categories
            if category.id != SteamCategory.VR_SUPPORT and category.description
        ]

    def _launch_actions(self, product_info: KeyValue) -> list[GameAction]:
        actions = []
        # The first launch entry is the main game executable
        for task in list(product_info["config"]["launch"])[1:]:
            oslist = task["config"]["oslist"]
            if oslist.exists and oslist.value != SUPPORTED_OS:
                continue

            # Entries without a description are not meant for end users
            description = task["description"]
            if not description.exists:
                continue

            actions.append(
                GameAction(
                    name=description.value or "",
                    path=task.get("executable"),
                    arguments=task.get("arguments", default=""),
                    type=GameActionType.FILE,
                    working_dir=INSTALLATION_DIRECTORY,
                    is_handled_by_plugin=False,
                )
            )

        return actions

    def _manual_action(self, product_info: KeyValue) -> GameAction | None:
        manual = product_info["extended"]["gamemanualurl"]
        if not manual.exists:
            return None
        return GameAction(
            name=MANUAL_ACTION_NAME,
            path=manual.value,
            type=GameActionType.URL,
            is_handled_by_plugin=False,
        )

    def _vr_features(self, product_info: KeyValue, existing: list[str]) -> list[str]:
        """Collect VR features from ``common/playareavr`` and ``common/controllervr``.

        Room-scale is added only if it is not listed yet; the other entries
        may repeat.
        """
        added: list[str] = []
        vr_support = False

        for area in product_info["common"]["playareavr"]:
            if area.name == "seated" and _enabled(area):
                added.append(FEATURE_VR_SEATED)
                vr_support = True
            elif area.name == "standing" and _enabled(area):
                added.append(FEATURE_VR_STANDING)
                vr_support = True
            if area.name is not None and "roomscale" in area.name:
                if FEATURE_VR_ROOM_SCALE not in existing and FEATURE_VR_ROOM_SCALE not in added:
                    added.append(FEATURE_VR_ROOM_SCALE)
                vr_support = True

        for controller in product_info["common"]["controllervr"]:
            if controller.name == "kbm" and _enabled(controller):
                added.append(FEATURE_VR_KEYBOARD_MOUSE)
                vr_support = True
            elif controller.name == "xinput" and _enabled(controller):
                added.append(FEATURE_VR_GAMEPAD)
                vr_support = True
            if controller.name in MOTION_CONTROLLER_KEYS and _enabled(controller):
                added.append(FEATURE_VR_MOTION_CONTROLLERS)
                vr_support = True

        if vr_support:
            added.append(FEATURE_VR)
        return added
