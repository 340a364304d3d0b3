from forcecache._async._chain import (
    AsyncCacheLayer as AsyncCacheLayer,
    AsyncChain as AsyncChain,
    AsyncClientBuilder as AsyncClientBuilder,
    AsyncInterceptorTransport as AsyncInterceptorTransport,
)
from forcecache._builder import CacheControlBuilder as CacheControlBuilder, on as on
from forcecache._config import CacheControlOptions as CacheControlOptions
from forcecache._exceptions import ConfigurationError as ConfigurationError, ForceCacheError as ForceCacheError
from forcecache._headers import (
    FORCE_CACHE as FORCE_CACHE,
    CacheControl as CacheControl,
    parse_cache_control as parse_cache_control,
)
from forcecache._interceptors import (
    AsyncInterceptor as AsyncInterceptor,
    CacheControlInterceptor as CacheControlInterceptor,
    Interceptor as Interceptor,
)
from forcecache._max_age import (
    DynamicMaxAge as DynamicMaxAge,
    MaxAgeProvider as MaxAgeProvider,
    MaxAgeSource as MaxAgeSource,
    StaticMaxAge as StaticMaxAge,
)
from forcecache._rewriters import (
    MaxAgeResponseRewriter as MaxAgeResponseRewriter,
    NetworkMonitor as NetworkMonitor,
    OfflineRequestRewriter as OfflineRequestRewriter,
    RequestRewriter as RequestRewriter,
    ResponseRewriter as ResponseRewriter,
)
from forcecache._sync._chain import (
    CacheLayer as CacheLayer,
    Chain as Chain,
    ClientBuilder as ClientBuilder,
    InterceptorTransport as InterceptorTransport,
)
from forcecache._units import TimeUnit as TimeUnit

__all__ = (
    # Configuration
    "on",
    "CacheControlBuilder",
    "CacheControlOptions",
    "TimeUnit",
    ## Max-age sources
    "MaxAgeSource",
    "MaxAgeProvider",
    "StaticMaxAge",
    "DynamicMaxAge",
    # Rewriters
    "NetworkMonitor",
    "RequestRewriter",
    "OfflineRequestRewriter",
    "ResponseRewriter",
    "MaxAgeResponseRewriter",
    # Interceptors
    "Interceptor",
    "AsyncInterceptor",
    "CacheControlInterceptor",
    ## Client builders
    "Chain",
    "AsyncChain",
    "CacheLayer",
    "AsyncCacheLayer",
    "InterceptorTransport",
    "AsyncInterceptorTransport",
    "ClientBuilder",
    "AsyncClientBuilder",
    # Headers
    "CacheControl",
    "FORCE_CACHE",
    "parse_cache_control",
    # Exceptions
    "ForceCacheError",
    "ConfigurationError",
)
