"""Server bindings — a fixed registry of application kinds.

``SERVER_TYPES`` is built once at import and never changes. Selecting a
binding by name is a lookup; passing a binding object uses it as is.
"""

from types import MappingProxyType

from spaserve.bindings.asgi import ASGIServer, asgi_server
from spaserve.bindings.fetch import FetchServer, fetch_server
from spaserve.bindings.protocol import Continue, ServerType
from spaserve.errors import ConfigurationError

SERVER_TYPES: MappingProxyType[str, ServerType] = MappingProxyType(
    {
        fetch_server.name: fetch_server,
        asgi_server.name: asgi_server,
    }
)


def get_server_type(server_type: str | ServerType) -> ServerType:
    """Return the binding for *server_type*.

    Raises:
        ConfigurationError: If a name is not registered, or an object
            does not implement ``ServerType``.
    """
    if isinstance(server_type, str):
        try:
            return SERVER_TYPES[server_type]
        except KeyError:
            msg = f"Unknown server type {server_type!r}; expected one of {sorted(SERVER_TYPES)}"
            raise ConfigurationError(msg) from None
    if not isinstance(server_type, ServerType):
        msg = f"{type(server_type).__name__} does not implement ServerType (name, handle, script)"
        raise ConfigurationError(msg)
    return server_type


__all__ = [
    "SERVER_TYPES",
    "ASGIServer",
    "Continue",
    "FetchServer",
    "ServerType",
    "asgi_server",
    "fetch_server",
    "get_server_type",
]
