"""spaserve exception hierarchy.

Shared across the adapter, bridge, router, and bindings so every module
raises and catches the same types. A path that matches no area is not an
error: the router returns ``None`` and the caller decides on a 404.
"""


class SpaServeError(Exception):
    """Base for all spaserve-specific errors."""


class ConfigurationError(SpaServeError):
    """Raised when server configuration is invalid.

    Typically raised at startup, before any request is served.
    """


class RouteConfigurationError(ConfigurationError):
    """Raised when the area table cannot be built.

    A missing index document, a duplicate area path, or a base path
    without an area all abort configuration instead of being skipped.
    """


class AdaptationError(SpaServeError):
    """Raised when an inbound transaction cannot become a ``Request``.

    The underlying failure (a ``receive`` error or an early disconnect)
    is chained as ``__cause__``. No partial request is ever returned.
    """


class StreamWriteError(SpaServeError):
    """Raised when the response sink rejects a write.

    Chunks flushed before the failure are not rolled back.
    """
