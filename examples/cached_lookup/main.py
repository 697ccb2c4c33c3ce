#!/usr/bin/env python3
"""Example: Cached Store Lookups

This example shows how the store details cache avoids repeated calls to the
rate-limited store API. Set REDIS_URL to share the cache through Redis
(requires the "redis" extra), otherwise an in-memory cache is used.

To run:
    python main.py
"""

from __future__ import annotations

import asyncio
import os
import time

from steam_metadata import CacheConfig, MetadataClient, MetadataConfig


async def main() -> None:
    redis_url = os.getenv("REDIS_URL", "")

    if redis_url:
        cache = CacheConfig(backend="redis", connection_string=redis_url, ttl=3600)
    else:
        cache = CacheConfig(backend="memory", max_size=1000, ttl=1800)

    config = MetadataConfig(cache=cache)

    async with MetadataClient(config) as client:
        for attempt in ("first", "second"):
            start = time.time()
            record = await client.get_metadata(400)
            elapsed = time.time() - start
            print(f"{attempt} lookup: {record.name} in {elapsed:.3f}s")


if __name__ == "__main__":
    asyncio.run(main())
