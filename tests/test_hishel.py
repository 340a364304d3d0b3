import sqlite3
import typing as t
from datetime import datetime, timezone

import httpx
import pytest
from hishel import SyncSqliteStorage
from httpx import MockTransport
from time_machine import travel

from forcecache import ClientBuilder, TimeUnit, on
from forcecache.hishel import sync_cache_layer


@travel(datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc), tick=False)
def test_hishel_stores_responses_with_overridden_policy(monkeypatch: pytest.MonkeyPatch, tmp_path: t.Any) -> None:
    monkeypatch.chdir(tmp_path)
    network_calls: t.List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        network_calls.append(str(request.url))
        return httpx.Response(
            200,
            headers={"Cache-Control": "no-store", "Pragma": "no-cache", "Date": "Mon, 01 Jan 2024 00:00:00 GMT"},
            text="hello",
        )

    storage = SyncSqliteStorage(connection=sqlite3.connect(":memory:"))
    builder = on(ClientBuilder(transport=MockTransport(handler), cache=sync_cache_layer(storage=storage)))
    builder.override_server_cache_policy(1, TimeUnit.HOURS)

    with builder.apply().build() as client:
        first = client.get("https://example.com")
        second = client.get("https://example.com")

    assert first.text == second.text == "hello"
    assert second.headers["Cache-Control"] == "max-age=3600"
    assert network_calls == ["https://example.com"]


def test_server_policy_is_kept_without_max_age_override(monkeypatch: pytest.MonkeyPatch, tmp_path: t.Any) -> None:
    monkeypatch.chdir(tmp_path)
    network_calls: t.List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        network_calls.append(str(request.url))
        return httpx.Response(200, headers={"Cache-Control": "no-store"}, text="hello")

    storage = SyncSqliteStorage(connection=sqlite3.connect(":memory:"))
    builder = on(ClientBuilder(transport=MockTransport(handler), cache=sync_cache_layer(storage=storage)))
    builder.force_cache_when_offline(lambda: True)

    with builder.apply().build() as client:
        client.get("https://example.com")
        client.get("https://example.com")

    assert network_calls == ["https://example.com", "https://example.com"]
