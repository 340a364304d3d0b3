from ._chain import (
    AsyncCacheLayer as AsyncCacheLayer,
    AsyncChain as AsyncChain,
    AsyncClientBuilder as AsyncClientBuilder,
    AsyncInterceptorTransport as AsyncInterceptorTransport,
)
