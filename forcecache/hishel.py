from __future__ import annotations

import typing as t

try:
    import httpx
    from hishel.httpx import AsyncCacheTransport, SyncCacheTransport
except ImportError as e:
    raise ImportError(
        "hishel is required to use forcecache.hishel module. "
        "Please install forcecache with the 'hishel' extra, "
        "e.g., 'pip install forcecache[hishel]'."
    ) from e

from forcecache._async._chain import AsyncCacheLayer
from forcecache._sync._chain import CacheLayer

if t.TYPE_CHECKING:  # pragma: no cover
    from hishel import AsyncBaseStorage, SyncBaseStorage

__all__ = ("async_cache_layer", "sync_cache_layer")


def sync_cache_layer(storage: SyncBaseStorage | None = None, **kwargs: t.Any) -> CacheLayer:
    """
    Cache layer for `ClientBuilder` backed by hishel's `SyncCacheTransport`.

    Extra keyword arguments are passed to `SyncCacheTransport`.

    Example:
    ```python
        builder = ClientBuilder(cache=sync_cache_layer(storage=SyncSqliteStorage()))
    ```
    """

    def wrap(next_transport: httpx.BaseTransport) -> httpx.BaseTransport:
        return SyncCacheTransport(next_transport=next_transport, storage=storage, **kwargs)

    return wrap


def async_cache_layer(storage: AsyncBaseStorage | None = None, **kwargs: t.Any) -> AsyncCacheLayer:
    """
    Cache layer for `AsyncClientBuilder` backed by hishel's `AsyncCacheTransport`.
    """

    def wrap(next_transport: httpx.AsyncBaseTransport) -> httpx.AsyncBaseTransport:
        return AsyncCacheTransport(next_transport=next_transport, storage=storage, **kwargs)

    return wrap
