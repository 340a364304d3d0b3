import pytest

from forcecache import TimeUnit


@pytest.mark.parametrize(
    "unit, duration, seconds",
    [
        (TimeUnit.DAYS, 1, 86400),
        (TimeUnit.HOURS, 1, 3600),
        (TimeUnit.MINUTES, 5, 300),
        (TimeUnit.SECONDS, 42, 42),
        (TimeUnit.MILLISECONDS, 1999, 1),
        (TimeUnit.MICROSECONDS, 2_500_000, 2),
        (TimeUnit.NANOSECONDS, 999_999_999, 0),
    ],
)
def test_to_seconds(unit: TimeUnit, duration: int, seconds: int) -> None:
    assert unit.to_seconds(duration) == seconds


def test_to_seconds_truncates_toward_zero() -> None:
    assert TimeUnit.MILLISECONDS.to_seconds(-1999) == -1
    assert TimeUnit.MINUTES.to_seconds(-2) == -120


def test_large_values_are_not_clamped() -> None:
    assert TimeUnit.DAYS.to_seconds(10**9) == 86400 * 10**9
