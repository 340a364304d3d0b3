from __future__ import annotations

import typing as t

import httpx

from forcecache._rewriters import RequestRewriter, ResponseRewriter

if t.TYPE_CHECKING:  # pragma: no cover
    from forcecache._async._chain import AsyncChain
    from forcecache._sync._chain import Chain

__all__ = ("Interceptor", "AsyncInterceptor", "CacheControlInterceptor")


@t.runtime_checkable
class Interceptor(t.Protocol):
    def intercept(self, chain: Chain) -> httpx.Response: ...


@t.runtime_checkable
class AsyncInterceptor(t.Protocol):
    async def aintercept(self, chain: AsyncChain) -> httpx.Response: ...


class CacheControlInterceptor:
    """
    Rewrites the request, lets the rest of the chain answer it, then rewrites the response.

    One instance may be registered at several points of the same client, and works with
    both sync and async clients. Errors raised further down the chain are not caught.

    :param request_rewriter: Applied to the request before it is forwarded
    :type request_rewriter: RequestRewriter
    :param response_rewriter: Applied to whatever response comes back
    :type response_rewriter: ResponseRewriter
    """

    def __init__(self, request_rewriter: RequestRewriter, response_rewriter: ResponseRewriter) -> None:
        self.request_rewriter = request_rewriter
        self.response_rewriter = response_rewriter

    def intercept(self, chain: Chain) -> httpx.Response:
        request = self.request_rewriter.rewrite(chain.request)
        response = chain.proceed(request)
        return self.response_rewriter.rewrite(response)

    async def aintercept(self, chain: AsyncChain) -> httpx.Response:
        request = self.request_rewriter.rewrite(chain.request)
        response = await chain.proceed(request)
        return self.response_rewriter.rewrite(response)
