from __future__ import annotations

import logging
import typing as t

import httpx

from forcecache._headers import FORCE_CACHE
from forcecache._max_age import MaxAgeSource

__all__ = (
    "NetworkMonitor",
    "RequestRewriter",
    "OfflineRequestRewriter",
    "ResponseRewriter",
    "MaxAgeResponseRewriter",
)

logger = logging.getLogger("forcecache.rewriters")

NetworkMonitor = t.Callable[[], bool]
"""Zero-argument callable returning `True` while the device is online."""


def copy_request(request: httpx.Request, headers: httpx.Headers) -> httpx.Request:
    """
    Create a new request sharing the method, URL, body and extensions of `request`.

    A body that was already read is copied from `request.content`, so the new request
    does not depend on the original stream being readable twice.
    """
    stream: t.Union[httpx.SyncByteStream, httpx.AsyncByteStream]
    try:
        stream = httpx.ByteStream(request.content)
    except httpx.RequestNotRead:
        stream = request.stream

    return httpx.Request(
        method=request.method,
        url=request.url,
        headers=headers,
        stream=stream,
        extensions=dict(request.extensions),
    )


def copy_response(response: httpx.Response, headers: httpx.Headers) -> httpx.Response:
    """
    Create a new response sharing the status, body and extensions of `response`.

    A body that was already read is copied from `response.content`, so the new response
    does not depend on the original stream being readable twice.
    """
    stream: t.Union[httpx.SyncByteStream, httpx.AsyncByteStream]
    try:
        content = response.content
    except httpx.ResponseNotRead:
        stream = response.stream
    else:
        stream = httpx.ByteStream(content)
        if "Content-Encoding" in headers:
            # The content is already decoded, so describe it as it is now.
            headers = headers.copy()
            headers.pop("Content-Encoding")
            headers["Content-Length"] = str(len(content))

    return httpx.Response(
        status_code=response.status_code,
        headers=headers,
        stream=stream,
        extensions=dict(response.extensions),
    )


class RequestRewriter:
    """Leaves requests untouched."""

    def rewrite(self, request: httpx.Request) -> httpx.Request:
        return request


class OfflineRequestRewriter(RequestRewriter):
    """
    Forces the cache to answer, even with an expired entry, while the device is offline.

    `network_monitor` is queried on every request; its answer is never remembered.
    Online requests are passed through as they are.
    """

    def __init__(self, network_monitor: NetworkMonitor) -> None:
        self.network_monitor = network_monitor

    def rewrite(self, request: httpx.Request) -> httpx.Request:
        if self.network_monitor():
            return request

        logger.debug("Network is offline, forcing cached response for %s", request.url)
        headers = request.headers.copy()
        headers["Cache-Control"] = FORCE_CACHE.render()
        return copy_request(request, headers)


class ResponseRewriter:
    """Leaves responses untouched."""

    def rewrite(self, response: httpx.Response) -> httpx.Response:
        return response


class MaxAgeResponseRewriter(ResponseRewriter):
    """
    Replaces the server's caching headers with `Cache-Control: max-age=<seconds>`.

    Any `Pragma` and `Cache-Control` headers are dropped, never merged, and the
    max-age is read from `max_age` once per response.
    """

    def __init__(self, max_age: MaxAgeSource) -> None:
        self.max_age = max_age

    def rewrite(self, response: httpx.Response) -> httpx.Response:
        seconds = self.max_age.seconds()
        logger.debug("Overriding server cache policy with max-age=%d", seconds)

        headers = response.headers.copy()
        headers.pop("Pragma", None)
        headers.pop("Cache-Control", None)
        headers["Cache-Control"] = f"max-age={seconds}"
        return copy_response(response, headers)
