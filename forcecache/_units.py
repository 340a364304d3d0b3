from __future__ import annotations

import enum

__all__ = ("TimeUnit",)


class TimeUnit(enum.Enum):
    """
    Unit of a cache lifetime passed to `override_server_cache_policy`.

    The enum value is the number of nanoseconds in one unit.
    """

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 60 * 60 * 1_000_000_000
    DAYS = 24 * 60 * 60 * 1_000_000_000

    def to_seconds(self, duration: int) -> int:
        """
        Convert `duration` expressed in this unit to whole seconds.

        Sub-second units truncate toward zero, so `MILLISECONDS.to_seconds(1999)` is 1
        and `MILLISECONDS.to_seconds(-1999)` is -1.

        Examples:
            >>> TimeUnit.MINUTES.to_seconds(5)
            300
            >>> TimeUnit.HOURS.to_seconds(1)
            3600
        """
        nanos = duration * self.value
        seconds = abs(nanos) // TimeUnit.SECONDS.value
        return seconds if nanos >= 0 else -seconds
