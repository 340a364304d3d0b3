from __future__ import annotations

import abc
import typing as t
from dataclasses import dataclass

from forcecache._units import TimeUnit

__all__ = ("MaxAgeSource", "StaticMaxAge", "DynamicMaxAge", "MaxAgeProvider")

MaxAgeProvider = t.Callable[[], int]
"""Zero-argument callable returning the current max-age, in seconds."""


class MaxAgeSource(abc.ABC):
    """
    Supplies the max-age stamped onto every response coming from the network.

    `seconds` is called once per rewritten response and its result is never cached.
    """

    @abc.abstractmethod
    def seconds(self) -> int:
        pass


@dataclass(frozen=True)
class StaticMaxAge(MaxAgeSource):
    """
    A fixed cache lifetime expressed as a duration and a unit.
    """

    duration: int
    unit: TimeUnit

    def seconds(self) -> int:
        return self.unit.to_seconds(self.duration)


@dataclass(frozen=True)
class DynamicMaxAge(MaxAgeSource):
    """
    A cache lifetime computed by `provider` every time a response is rewritten.

    The provider may read the clock or any other external state, and must be safe to
    call from several threads at once.
    """

    provider: MaxAgeProvider

    def seconds(self) -> int:
        return self.provider()
