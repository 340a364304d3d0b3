from __future__ import annotations

import datetime
import logging
import typing as t
from dataclasses import replace

from forcecache._async._chain import AsyncClientBuilder
from forcecache._config import CacheControlOptions
from forcecache._exceptions import ConfigurationError
from forcecache._interceptors import CacheControlInterceptor
from forcecache._max_age import DynamicMaxAge, MaxAgeProvider, MaxAgeSource, StaticMaxAge
from forcecache._rewriters import (
    MaxAgeResponseRewriter,
    NetworkMonitor,
    OfflineRequestRewriter,
    RequestRewriter,
    ResponseRewriter,
)
from forcecache._sync._chain import ClientBuilder
from forcecache._units import TimeUnit

if t.TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import Self

__all__ = ("CacheControlBuilder", "on")

logger = logging.getLogger("forcecache.builder")

B = t.TypeVar("B", ClientBuilder, AsyncClientBuilder)


class CacheControlBuilder(t.Generic[B]):
    """
    Fluent configuration of the cache overrides installed on a client builder.

    Nothing is registered until `apply` is called. Each setter replaces `options`,
    so the last max-age policy set is the one that applies.

    Example:
    ```python
        client = (
            forcecache.on(forcecache.ClientBuilder(cache=sync_cache_layer()))
            .override_server_cache_policy(5, forcecache.TimeUnit.MINUTES)
            .force_cache_when_offline(lambda: network.is_up)
            .apply()
            .build()
        )
    ```
    """

    def __init__(self, client_builder: B, options: CacheControlOptions | None = None) -> None:
        self.client_builder = client_builder
        self.options = options if options is not None else CacheControlOptions()

    @t.overload
    def override_server_cache_policy(self, max_age: int, unit: TimeUnit) -> Self: ...
    @t.overload
    def override_server_cache_policy(self, max_age: datetime.timedelta) -> Self: ...
    @t.overload
    def override_server_cache_policy(self, max_age: MaxAgeProvider) -> Self: ...
    @t.overload
    def override_server_cache_policy(self, max_age: MaxAgeSource) -> Self: ...
    def override_server_cache_policy(
        self,
        max_age: t.Union[int, datetime.timedelta, MaxAgeProvider, MaxAgeSource],
        unit: t.Optional[TimeUnit] = None,
    ) -> Self:
        """
        Replace the caching headers of every network response with `Cache-Control: max-age=<seconds>`.

        Accepts a duration and its unit, a `datetime.timedelta`, a `MaxAgeSource`, or a
        zero-argument callable evaluated for every response. Replaces any policy set before.
        """
        if unit is not None and not isinstance(max_age, int):
            raise ConfigurationError("`unit` can only be used together with an integer duration.")

        source: MaxAgeSource
        if isinstance(max_age, MaxAgeSource):
            source = max_age
        elif isinstance(max_age, datetime.timedelta):
            source = StaticMaxAge(max_age // datetime.timedelta(microseconds=1), TimeUnit.MICROSECONDS)
        elif isinstance(max_age, int) and not isinstance(max_age, bool):
            if not isinstance(unit, TimeUnit):
                raise ConfigurationError(f"Expected a TimeUnit for duration {max_age!r}, got {unit!r}.")
            source = StaticMaxAge(max_age, unit)
        elif callable(max_age):
            source = DynamicMaxAge(max_age)
        else:
            raise ConfigurationError(f"Unsupported cache policy: {max_age!r}.")

        self.options = replace(self.options, max_age=source)
        return self

    def force_cache_when_offline(self, network_monitor: NetworkMonitor) -> Self:
        """
        Serve cached responses, however stale, whenever `network_monitor()` returns False.
        """
        if not callable(network_monitor):
            raise ConfigurationError(f"Expected a callable network monitor, got {network_monitor!r}.")

        self.options = replace(self.options, network_monitor=network_monitor)
        return self

    def build_interceptor(self) -> CacheControlInterceptor:
        request_rewriter = (
            OfflineRequestRewriter(self.options.network_monitor)
            if self.options.network_monitor is not None
            else RequestRewriter()
        )
        response_rewriter = (
            MaxAgeResponseRewriter(self.options.max_age) if self.options.max_age is not None else ResponseRewriter()
        )
        return CacheControlInterceptor(request_rewriter, response_rewriter)

    def apply(self) -> B:
        """
        Register the overrides with the client builder and return it.

        The interceptor always goes to the network boundary. When offline forcing is
        configured, the same interceptor is also registered at the application boundary
        so it runs before the cache layer decides whether to use the network.
        """
        if self.options.is_empty:
            logger.debug("No cache overrides configured, leaving client builder untouched")
            return self.client_builder

        interceptor = self.build_interceptor()

        logger.debug("Registering cache control interceptor at the network boundary")
        self.client_builder.add_network_interceptor(interceptor)

        if self.options.forces_cache_when_offline:
            logger.debug("Registering cache control interceptor at the application boundary")
            self.client_builder.add_interceptor(interceptor)

        return self.client_builder


def on(client_builder: B) -> CacheControlBuilder[B]:
    """
    Start configuring cache overrides for `client_builder`.
    """
    return CacheControlBuilder(client_builder)
