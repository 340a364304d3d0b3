__all__ = ("ForceCacheError", "ConfigurationError")


class ForceCacheError(Exception): ...


class ConfigurationError(ForceCacheError): ...
