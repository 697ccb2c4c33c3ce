"""Text helpers for store data."""

from __future__ import annotations

import re
from typing import Final

from steam_metadata.urls import CDN_HOST, CDN_HOST_PLACEHOLDER

# Runs of letters, optionally joined by an apostrophe ("Steam's")
WORD_PATTERN: Final = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")


def _title_word(match: re.Match[str]) -> str:
    word = match.group(0)
    if word.isupper():
        # Acronyms like "HDR" or "MMO" stay as they are
        return word
    return word[0].upper() + word[1:].lower()


def title_case(text: str) -> str:
    """Title-case a store category description.

    Unlike ``str.title``, words written entirely in upper case are kept and
    letters after an apostrophe stay lower case.

    Examples:
        >>> title_case("single-player")
        'Single-Player'
        >>> title_case("HDR available")
        'HDR Available'
    """
    return WORD_PATTERN.sub(_title_word, text)


def parse_description(description: str) -> str:
    """Replace the store's media host placeholder with the CDN host."""
    return description.replace(CDN_HOST_PLACEHOLDER, CDN_HOST)
