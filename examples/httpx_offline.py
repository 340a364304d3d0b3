#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "forcecache[hishel]",
# ]
#
# [tool.uv.sources]
# forcecache = { path = "../", editable = true }
# ///

import sqlite3

from hishel import SyncSqliteStorage

import forcecache
from forcecache.hishel import sync_cache_layer

online = True

storage = SyncSqliteStorage(connection=sqlite3.connect(":memory:"))
client = (
    forcecache.on(forcecache.ClientBuilder(cache=sync_cache_layer(storage=storage)))
    .override_server_cache_policy(5, forcecache.TimeUnit.MINUTES)
    .force_cache_when_offline(lambda: online)
    .apply()
    .build()
)


def fetch_and_print(url: str):
    print(f"\n➡ Sending request to {url} (online={online})...")
    response = client.get(url)

    print(f"📦 Status: {response.status_code}")
    print(f"⏰ Cache-Control: {response.headers.get('Cache-Control')}")
    print(f"🔄 From Cache: {response.extensions.get('hishel_from_cache')}")


if __name__ == "__main__":
    url = "https://hishel.com/"
    fetch_and_print(url)
    online = False
    fetch_and_print(url)
