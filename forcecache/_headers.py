from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

__all__ = ("CacheControl", "FORCE_CACHE", "parse_cache_control")

# Largest delta-seconds value caches are required to understand (RFC 9111, Section 1.2.2).
MAX_DELTA_SECONDS = 2147483647


@dataclass(frozen=True)
class CacheControl:
    """
    The subset of Cache-Control directives this package reads and writes.

    Values are `None` (or `False`) when a directive is absent. Directives that are not
    modelled here are kept verbatim in `extensions` so rendering a parsed value does not
    drop them.

    Examples:
        >>> CacheControl(max_age=300).render()
        'max-age=300'
        >>> CacheControl(only_if_cached=True, max_stale=2147483647).render()
        'only-if-cached, max-stale=2147483647'
    """

    max_age: Optional[int] = None
    max_stale: Optional[int] = None
    only_if_cached: bool = False
    no_cache: bool = False
    no_store: bool = False
    extensions: Tuple[str, ...] = field(default=())

    def render(self) -> str:
        directives: List[str] = []
        if self.no_cache:
            directives.append("no-cache")
        if self.no_store:
            directives.append("no-store")
        if self.only_if_cached:
            directives.append("only-if-cached")
        if self.max_age is not None:
            directives.append(f"max-age={self.max_age}")
        if self.max_stale is not None:
            directives.append(f"max-stale={self.max_stale}")
        directives.extend(self.extensions)
        return ", ".join(directives)

    def __str__(self) -> str:
        return self.render()


# Answer from the cache only, however stale the stored response is.
FORCE_CACHE = CacheControl(only_if_cached=True, max_stale=MAX_DELTA_SECONDS)


def parse_int_value(value: str) -> Optional[int]:
    """Parse integer value, return None if invalid."""
    try:
        val = int(value.strip().strip('"'))
    except ValueError:
        return None
    return min(val, MAX_DELTA_SECONDS) if val >= 0 else None


def handle_directive_with_value(directives: Dict[str, Any], token: str, value: str) -> None:
    if token == "max-age":
        directives["max_age"] = parse_int_value(value)
    elif token == "max-stale":
        directives["max_stale"] = parse_int_value(value)
    else:
        directives["extensions"].append(f"{token}={value}")


def handle_directive_without_value(directives: Dict[str, Any], token: str) -> None:
    if token == "max-stale":
        # max-stale without value means accept any stale response
        directives["max_stale"] = MAX_DELTA_SECONDS
    elif token == "only-if-cached":
        directives["only_if_cached"] = True
    elif token == "no-cache":
        directives["no_cache"] = True
    elif token == "no-store":
        directives["no_store"] = True
    else:
        directives["extensions"].append(token)


def parse_cache_control(value: Optional[str]) -> CacheControl:
    """
    Parse a Cache-Control header value from either a request or a response.

    Malformed directives are ignored rather than rejected, and a missing header
    yields an empty `CacheControl`.

    Examples:
        >>> cc = parse_cache_control("only-if-cached, max-stale=2147483647")
        >>> cc.only_if_cached, cc.max_stale
        (True, 2147483647)
        >>> parse_cache_control("max-age=abc").max_age is None
        True
    """
    directives: Dict[str, Any] = {"extensions": []}

    if not value:
        return CacheControl()

    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if "=" in part:
            token, _, directive_value = part.partition("=")
            token = token.strip().lower()
            if not token:
                continue
            handle_directive_with_value(directives, token, directive_value.strip())
        else:
            handle_directive_without_value(directives, part.lower())

    directives["extensions"] = tuple(directives["extensions"])
    return CacheControl(**directives)
