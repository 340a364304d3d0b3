from ._chain import (
    CacheLayer as CacheLayer,
    Chain as Chain,
    ClientBuilder as ClientBuilder,
    InterceptorTransport as InterceptorTransport,
)
