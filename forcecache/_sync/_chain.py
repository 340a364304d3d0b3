from __future__ import annotations

import logging
import typing as t

import httpx

from forcecache._interceptors import Interceptor

if t.TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import Self

__all__ = ("CacheLayer", "Chain", "ClientBuilder", "InterceptorTransport")

logger = logging.getLogger("forcecache.chain")

CacheLayer = t.Callable[[httpx.BaseTransport], httpx.BaseTransport]
"""Wraps the network side of a client in a caching transport."""


class Chain:
    """
    The view an interceptor gets of the request it is handling.

    `request` is the request as it reached this interceptor. `proceed` hands a request
    to the next interceptor, or to the wrapped transport once every interceptor ran.
    """

    def __init__(
        self,
        interceptors: t.Sequence[Interceptor],
        index: int,
        request: httpx.Request,
        transport: httpx.BaseTransport,
    ) -> None:
        self._interceptors = interceptors
        self._index = index
        self._request = request
        self._transport = transport

    @property
    def request(self) -> httpx.Request:
        return self._request

    def proceed(self, request: httpx.Request) -> httpx.Response:
        if self._index >= len(self._interceptors):
            return self._transport.handle_request(request)

        next_chain = Chain(self._interceptors, self._index + 1, request, self._transport)
        return self._interceptors[self._index].intercept(next_chain)


class InterceptorTransport(httpx.BaseTransport):
    """
    An HTTPX transport running interceptors, in registration order, before `next_transport`.

    :param next_transport: Transport that answers once every interceptor called `proceed`
    :type next_transport: httpx.BaseTransport
    :param interceptors: Interceptors to run for every request
    :type interceptors: t.Iterable[Interceptor]
    """

    def __init__(
        self,
        next_transport: httpx.BaseTransport,
        interceptors: t.Iterable[Interceptor] = (),
    ) -> None:
        self.next_transport = next_transport
        self.interceptors = list(interceptors)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        chain = Chain(self.interceptors, 0, request, self.next_transport)
        return chain.proceed(request)

    def close(self) -> None:
        self.next_transport.close()


class ClientBuilder:
    """
    Collects interceptors and assembles them into an HTTPX client.

    Application interceptors run for every request, even ones the cache layer answers
    without going to the network. Network interceptors run only when a request actually
    reaches `transport`.

    The resulting transport stack, outermost first, is: application interceptors, the
    cache layer, network interceptors, `transport`.

    :param transport: Transport that talks to the network, defaults to `httpx.HTTPTransport()`
    :type transport: t.Optional[httpx.BaseTransport], optional
    :param cache: Factory wrapping the network side in a caching transport, defaults to None
    :type cache: t.Optional[CacheLayer], optional
    """

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        cache: CacheLayer | None = None,
    ) -> None:
        self.transport = transport
        self.cache = cache
        self.interceptors: list[Interceptor] = []
        self.network_interceptors: list[Interceptor] = []

    def add_interceptor(self, interceptor: Interceptor) -> Self:
        self.interceptors.append(interceptor)
        return self

    def add_network_interceptor(self, interceptor: Interceptor) -> Self:
        self.network_interceptors.append(interceptor)
        return self

    def build_transport(self) -> httpx.BaseTransport:
        logger.debug(
            "Building transport with %d application and %d network interceptors",
            len(self.interceptors),
            len(self.network_interceptors),
        )
        transport = self.transport if self.transport is not None else httpx.HTTPTransport()

        if self.network_interceptors:
            transport = InterceptorTransport(transport, self.network_interceptors)
        if self.cache is not None:
            transport = self.cache(transport)
        if self.interceptors:
            transport = InterceptorTransport(transport, self.interceptors)
        return transport

    def build(self, **kwargs: t.Any) -> httpx.Client:
        """
        Create an `httpx.Client` using the assembled transport.

        Keyword arguments are passed to `httpx.Client`, except `transport`.
        """
        return httpx.Client(transport=self.build_transport(), **kwargs)
