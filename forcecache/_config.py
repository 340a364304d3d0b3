from __future__ import annotations

import typing as t
from dataclasses import dataclass

from forcecache._max_age import MaxAgeSource
from forcecache._rewriters import NetworkMonitor

__all__ = ("CacheControlOptions",)


@dataclass(frozen=True)
class CacheControlOptions:
    """
    Overrides configured on a `CacheControlBuilder`.

    Attributes:
    ----------
    max_age : MaxAgeSource | None
        Source of the max-age stamped onto network responses. `None` keeps the
        server's caching headers.

    network_monitor : Callable[[], bool] | None
        Reports whether the device is online. `None` never forces the cache.

    Examples:
    --------
    >>> options = CacheControlOptions()
    >>> options.is_empty
    True
    >>> options = CacheControlOptions(network_monitor=lambda: False)
    >>> options.forces_cache_when_offline
    True
    """

    max_age: t.Optional[MaxAgeSource] = None
    network_monitor: t.Optional[NetworkMonitor] = None

    @property
    def overrides_max_age(self) -> bool:
        return self.max_age is not None

    @property
    def forces_cache_when_offline(self) -> bool:
        return self.network_monitor is not None

    @property
    def is_empty(self) -> bool:
        return not self.overrides_max_age and not self.forces_cache_when_offline
