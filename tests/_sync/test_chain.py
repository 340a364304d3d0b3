import typing as t

import httpx
import pytest
from httpx import MockTransport

from forcecache import Chain, ClientBuilder, InterceptorTransport


class RecordingInterceptor:
    def __init__(self, name: str, calls: t.List[str]) -> None:
        self.name = name
        self.calls = calls

    def intercept(self, chain: Chain) -> httpx.Response:
        self.calls.append(self.name)
        request = chain.request
        request.headers["X-Seen-By"] = ",".join(self.calls)
        return chain.proceed(request)


class ShortCircuitInterceptor:
    def intercept(self, chain: Chain) -> httpx.Response:
        return httpx.Response(203, text="from interceptor")


class ClosingTransport(httpx.BaseTransport):
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True



def test_interceptors_run_in_registration_order() -> None:
    calls: t.List[str] = []
    seen_headers: t.List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_headers.append(request.headers["X-Seen-By"])
        return httpx.Response(200)

    transport = InterceptorTransport(
        MockTransport(handler),
        [RecordingInterceptor("first", calls), RecordingInterceptor("second", calls)],
    )
    response = transport.handle_request(httpx.Request("GET", "https://example.com"))

    assert response.status_code == 200
    assert calls == ["first", "second"]
    assert seen_headers == ["first,second"]



def test_interceptor_can_answer_without_proceeding() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("transport must not be reached")

    transport = InterceptorTransport(MockTransport(handler), [ShortCircuitInterceptor()])
    response = transport.handle_request(httpx.Request("GET", "https://example.com"))

    assert response.status_code == 203



def test_chain_exposes_request_passed_to_proceed() -> None:
    replacement = httpx.Request("GET", "https://example.com/replaced")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=str(request.url))

    chain = Chain([], 0, httpx.Request("GET", "https://example.com"), MockTransport(handler))
    response = chain.proceed(replacement)
    response.read()

    assert chain.request.url == "https://example.com"
    assert response.text == "https://example.com/replaced"



def test_transport_errors_propagate() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Network is unreachable", request=request)

    calls: t.List[str] = []
    transport = InterceptorTransport(MockTransport(handler), [RecordingInterceptor("only", calls)])

    with pytest.raises(httpx.ConnectError, match="Network is unreachable"):
        transport.handle_request(httpx.Request("GET", "https://example.com"))
    assert calls == ["only"]



def test_closing_transport_closes_wrapped_transport() -> None:
    wrapped = ClosingTransport()
    transport = InterceptorTransport(wrapped)

    transport.close()

    assert wrapped.closed


def test_builder_without_interceptors_uses_transport_as_is() -> None:
    mock_transport = MockTransport(lambda request: httpx.Response(200))

    assert ClientBuilder(transport=mock_transport).build_transport() is mock_transport


def test_builder_places_cache_layer_between_boundaries() -> None:
    mock_transport = MockTransport(lambda request: httpx.Response(200))
    wrapped_by_cache: t.List[httpx.BaseTransport] = []

    def cache(next_transport: httpx.BaseTransport) -> httpx.BaseTransport:
        wrapped_by_cache.append(next_transport)
        return next_transport

    application = ShortCircuitInterceptor()
    network = ShortCircuitInterceptor()
    transport = (
        ClientBuilder(transport=mock_transport, cache=cache)
        .add_interceptor(application)
        .add_network_interceptor(network)
        .build_transport()
    )

    assert isinstance(transport, InterceptorTransport)
    assert transport.interceptors == [application]

    network_transport = wrapped_by_cache[0]
    assert isinstance(network_transport, InterceptorTransport)
    assert network_transport.interceptors == [network]
    assert network_transport.next_transport is mock_transport
    assert transport.next_transport is network_transport



def test_built_client_sends_through_interceptors() -> None:
    calls: t.List[str] = []
    builder = ClientBuilder(transport=MockTransport(lambda request: httpx.Response(200, text="ok")))
    builder.add_interceptor(RecordingInterceptor("application", calls))
    builder.add_network_interceptor(RecordingInterceptor("network", calls))

    with builder.build(base_url="https://example.com") as client:
        response = client.get("/")

    assert response.text == "ok"
    assert calls == ["application", "network"]
