from __future__ import annotations

import logging
import typing as t

import httpx

from forcecache._interceptors import AsyncInterceptor

if t.TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import Self

__all__ = ("AsyncCacheLayer", "AsyncChain", "AsyncClientBuilder", "AsyncInterceptorTransport")

logger = logging.getLogger("forcecache.chain")

AsyncCacheLayer = t.Callable[[httpx.AsyncBaseTransport], httpx.AsyncBaseTransport]
"""Wraps the network side of a client in a caching transport."""


class AsyncChain:
    """
    The view an interceptor gets of the request it is handling.

    `request` is the request as it reached this interceptor. `proceed` hands a request
    to the next interceptor, or to the wrapped transport once every interceptor ran.
    """

    def __init__(
        self,
        interceptors: t.Sequence[AsyncInterceptor],
        index: int,
        request: httpx.Request,
        transport: httpx.AsyncBaseTransport,
    ) -> None:
        self._interceptors = interceptors
        self._index = index
        self._request = request
        self._transport = transport

    @property
    def request(self) -> httpx.Request:
        return self._request

    async def proceed(self, request: httpx.Request) -> httpx.Response:
        if self._index >= len(self._interceptors):
            return await self._transport.handle_async_request(request)

        next_chain = AsyncChain(self._interceptors, self._index + 1, request, self._transport)
        return await self._interceptors[self._index].aintercept(next_chain)


class AsyncInterceptorTransport(httpx.AsyncBaseTransport):
    """
    An HTTPX transport running interceptors, in registration order, before `next_transport`.

    :param next_transport: Transport that answers once every interceptor called `proceed`
    :type next_transport: httpx.AsyncBaseTransport
    :param interceptors: Interceptors to run for every request
    :type interceptors: t.Iterable[AsyncInterceptor]
    """

    def __init__(
        self,
        next_transport: httpx.AsyncBaseTransport,
        interceptors: t.Iterable[AsyncInterceptor] = (),
    ) -> None:
        self.next_transport = next_transport
        self.interceptors = list(interceptors)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        chain = AsyncChain(self.interceptors, 0, request, self.next_transport)
        return await chain.proceed(request)

    async def aclose(self) -> None:
        await self.next_transport.aclose()


class AsyncClientBuilder:
    """
    Collects interceptors and assembles them into an HTTPX client.

    Application interceptors run for every request, even ones the cache layer answers
    without going to the network. Network interceptors run only when a request actually
    reaches `transport`.

    The resulting transport stack, outermost first, is: application interceptors, the
    cache layer, network interceptors, `transport`.

    :param transport: Transport that talks to the network, defaults to `httpx.AsyncHTTPTransport()`
    :type transport: t.Optional[httpx.AsyncBaseTransport], optional
    :param cache: Factory wrapping the network side in a caching transport, defaults to None
    :type cache: t.Optional[AsyncCacheLayer], optional
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        cache: AsyncCacheLayer | None = None,
    ) -> None:
        self.transport = transport
        self.cache = cache
        self.interceptors: list[AsyncInterceptor] = []
        self.network_interceptors: list[AsyncInterceptor] = []

    def add_interceptor(self, interceptor: AsyncInterceptor) -> Self:
        self.interceptors.append(interceptor)
        return self

    def add_network_interceptor(self, interceptor: AsyncInterceptor) -> Self:
        self.network_interceptors.append(interceptor)
        return self

    def build_transport(self) -> httpx.AsyncBaseTransport:
        logger.debug(
            "Building transport with %d application and %d network interceptors",
            len(self.interceptors),
            len(self.network_interceptors),
        )
        transport = self.transport if self.transport is not None else httpx.AsyncHTTPTransport()

        if self.network_interceptors:
            transport = AsyncInterceptorTransport(transport, self.network_interceptors)
        if self.cache is not None:
            transport = self.cache(transport)
        if self.interceptors:
            transport = AsyncInterceptorTransport(transport, self.interceptors)
        return transport

    def build(self, **kwargs: t.Any) -> httpx.AsyncClient:
        """
        Create an `httpx.AsyncClient` using the assembled transport.

        Keyword arguments are passed to `httpx.AsyncClient`, except `transport`.
        """
        return httpx.AsyncClient(transport=self.build_transport(), **kwargs)
