"""spaserve — serve single-page application areas next to your handlers.

Bridges ASGI transactions to immutable Request/Response values, resolves
which SPA area serves a path, and lets application 404s fall through to
the area documents.

Basic usage::

    from spaserve import Response, SPAServer, SPAServerConfig

    async def api(request):
        if request.path.startswith("/api/"):
            return Response('{"ok": true}').with_header("content-type", "application/json")
        return Response.not_found()

    server = SPAServer(
        api,
        config=SPAServerConfig(
            client_dir="dist/client",
            areas={"/": "index.html", "/admin": "admin/index.html"},
        ),
    )

Run ``server`` with any ASGI server, or ``spaserve run myapp:api``.
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "AdaptationError",
    "AreaRoute",
    "AreaTable",
    "ConfigurationError",
    "Headers",
    "Request",
    "Response",
    "RouteConfigurationError",
    "SPAServer",
    "SPAServerConfig",
    "SpaServeError",
    "StreamWriteError",
    "adapt",
    "build_area_table",
    "send_response",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import spaserve`` fast while providing a clean top-level API.
    """
    if name == "SPAServer":
        from spaserve.app import SPAServer

        return SPAServer

    if name == "SPAServerConfig":
        from spaserve.config import SPAServerConfig

        return SPAServerConfig

    if name == "Headers":
        from spaserve.http.headers import Headers

        return Headers

    if name == "Request":
        from spaserve.http.request import Request

        return Request

    if name == "Response":
        from spaserve.http.response import Response

        return Response

    if name in ("AreaRoute", "AreaTable", "build_area_table"):
        import spaserve.routing as routing

        return getattr(routing, name)

    if name == "adapt":
        from spaserve.server.adapter import adapt

        return adapt

    if name == "send_response":
        from spaserve.server.sender import send_response

        return send_response

    if name in (
        "AdaptationError",
        "ConfigurationError",
        "RouteConfigurationError",
        "SpaServeError",
        "StreamWriteError",
    ):
        import spaserve.errors as errors

        return getattr(errors, name)

    msg = f"module 'spaserve' has no attribute {name!r}"
    raise AttributeError(msg)
