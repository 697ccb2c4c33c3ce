"""Steam URL templates.

All templates are formatted with ``str.format`` keyword arguments.
"""

from __future__ import annotations

from typing import Final

CDN_HOST: Final = "steamcdn-a.akamaihd.net"

# Placeholder the store uses for its media host inside descriptions
CDN_HOST_PLACEHOLDER: Final = "%CDN_HOST_MEDIA_SSL%"

# Community image assets, addressed by the hash found in product info
COMMUNITY_ICON_URL: Final = f"https://{CDN_HOST}/steamcommunity/public/images/apps/{{app_id}}/{{hash}}.ico"
COMMUNITY_IMAGE_URL: Final = f"https://{CDN_HOST}/steamcommunity/public/images/apps/{{app_id}}/{{hash}}.jpg"

# Per-app store assets
VERTICAL_COVER_URL: Final = f"https://{CDN_HOST}/steam/apps/{{app_id}}/library_600x900_2x.jpg"
HEADER_IMAGE_URL: Final = f"https://{CDN_HOST}/steam/apps/{{app_id}}/header.jpg"
STORE_BACKGROUND_URL: Final = f"https://{CDN_HOST}/steam/apps/{{app_id}}/page_bg_generated_v6b.jpg"
BANNER_URL: Final = f"https://{CDN_HOST}/steam/apps/{{app_id}}/library_hero.jpg"

# Tried in order for the plain image background
BACKGROUND_IMAGE_URLS: Final = (
    f"https://{CDN_HOST}/steam/apps/{{app_id}}/page.bg.jpg",
    f"https://{CDN_HOST}/steam/apps/{{app_id}}/page_bg_generated.jpg",
)

# Links
COMMUNITY_HUB_URL: Final = "https://steamcommunity.com/app/{app_id}"
DISCUSSIONS_URL: Final = "https://steamcommunity.com/app/{app_id}/discussions/"
NEWS_URL: Final = "https://store.steampowered.com/news/?appids={app_id}"
STORE_PAGE_URL: Final = "https://store.steampowered.com/app/{app_id}"
PCGAMINGWIKI_URL: Final = "https://pcgamingwiki.com/api/appid.php?appid={app_id}"
ACHIEVEMENTS_URL: Final = "https://steamcommunity.com/stats/{app_id}/achievements"
WORKSHOP_URL: Final = "https://steamcommunity.com/app/{app_id}/workshop/"
