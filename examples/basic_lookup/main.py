#!/usr/bin/env python3
"""Example: Basic Lookup

This example builds the metadata record for a single Steam app.

To run:
    python main.py 620
"""

from __future__ import annotations

import asyncio
import logging
import sys

from steam_metadata import BackgroundSource, MetadataClient, MetadataConfig


async def main() -> None:
    app_id = int(sys.argv[1]) if len(sys.argv) > 1 else 620

    config = MetadataConfig(background_source=BackgroundSource.STORE_SCREENSHOT)

    async with MetadataClient(config) as client:
        record = await client.get_metadata(app_id)

    print(f"{record.name} ({record.app_id})")
    print(f"  Released: {record.release_date}")
    print(f"  Critic score: {record.critic_score}")
    print(f"  Developers: {', '.join(record.developers)}")
    print(f"  Genres: {', '.join(record.genres)}")
    print(f"  Features: {', '.join(record.features)}")
    print(f"  Icon: {record.icon_url}")
    print(f"  Cover: {record.cover_url}")
    print(f"  Background: {record.background_url}")

    print("\nActions:")
    for action in record.actions:
        print(f"  {action.name}: {action.path} {action.arguments}".rstrip())

    print("\nLinks:")
    for link in record.links:
        print(f"  {link.name}: {link.url}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
