#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "forcecache",
# ]
#
# [tool.uv.sources]
# forcecache = { path = "../", editable = true }
# ///

import asyncio
import time

import forcecache


def seconds_until_midnight() -> int:
    return 86400 - int(time.time()) % 86400


async def main():
    builder = forcecache.on(forcecache.AsyncClientBuilder()).override_server_cache_policy(seconds_until_midnight)

    async with builder.apply().build() as client:
        response = await client.get("https://hishel.com/")
        print(f"⏰ Cache-Control: {response.headers.get('Cache-Control')}")


if __name__ == "__main__":
    asyncio.run(main())
