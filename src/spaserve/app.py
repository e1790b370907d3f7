"""SPAServer — the ASGI application that ties the pieces together.

Each HTTP transaction goes to the application through its binding
first. When the application declines (an unmarked 404), the request
moves on to the area chain: static assets, then area documents. Whatever
is still unclaimed gets a plain 404.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from spaserve._internal.asgi import Receive, Scope, Send
from spaserve.bindings import ServerType, get_server_type
from spaserve.config import SPAServerConfig
from spaserve.http.request import Request
from spaserve.http.response import Response
from spaserve.middleware.documents import AreaDocuments
from spaserve.middleware.protocol import Middleware, build_chain
from spaserve.middleware.static import StaticFiles
from spaserve.routing.table import AreaTable, build_area_table
from spaserve.server.adapter import BODYLESS_METHODS, adapt
from spaserve.server.fallback import should_fall_through
from spaserve.server.sender import send_response
from spaserve.server.sink import ASGISink

logger = logging.getLogger("spaserve.server")


class SPAServer:
    """Serve SPA areas next to an application handler.

    Usage::

        from spaserve import Response, SPAServer, SPAServerConfig

        def api(request):
            if request.path == "/api/ping":
                return Response("pong")
            return Response.not_found()

        server = SPAServer(api, config=SPAServerConfig(client_dir="dist/client"))

    ``server`` is an ASGI application; run it with any ASGI server.
    """

    __slots__ = ("_app", "_areas", "_chain", "_server_type", "config")

    def __init__(
        self,
        app: Any = None,
        *,
        config: SPAServerConfig | None = None,
        server_type: str | ServerType | None = None,
        middleware: tuple[Middleware, ...] = (),
    ) -> None:
        self.config = config or SPAServerConfig()
        self._app = app
        self._server_type = get_server_type(server_type or self.config.server_type)
        self._areas = self._build_areas(self.config)
        self._chain = build_chain(
            (
                *middleware,
                StaticFiles(self.config.client_dir, cache_control=self.config.static_cache_control),
                AreaDocuments(lambda: self._areas),
            )
        )

    @staticmethod
    def _build_areas(config: SPAServerConfig) -> AreaTable:
        return build_area_table(
            config.areas,
            client_dir=config.client_dir,
            base=config.base,
            history=config.history,
        )

    @property
    def areas(self) -> AreaTable:
        """The area table currently in service."""
        return self._areas

    @property
    def server_type(self) -> ServerType:
        return self._server_type

    def reload_areas(self, config: SPAServerConfig | None = None) -> AreaTable:
        """Rebuild the area table and swap it in.

        The new table is fully built before the reference changes, so
        in-flight requests see either the old table or the new one. A
        configuration error leaves the current table in service.
        """
        config = config or self.config
        table = self._build_areas(config)
        self._areas = table
        logger.info("Reloaded area table (%d area(s))", len(table))
        return table

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        if scope["type"] != "http":
            # Websockets and other scopes belong to an ASGI application
            if self._app is not None and self._server_type.name == "asgi":
                await self._app(scope, receive, send)
            return

        async def fall_through(request: Request | None) -> None:
            await self._serve_areas(scope, receive, send, request)

        if self._app is None:
            await fall_through(None)
            return
        await self._server_type.handle(self._app, scope, receive, send, fall_through)

    async def _serve_areas(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
        request: Request | None,
    ) -> None:
        """Run the area chain for a request the application declined."""
        sink = ASGISink(send)
        if request is None:
            # Areas only answer GET and HEAD; never re-read a consumed body
            if (scope.get("method") or "GET").upper() not in BODYLESS_METHODS:
                await send_response(Response.not_found(), sink)
                return
            request = await adapt(scope, receive)

        response = await self._chain(request)
        if should_fall_through(response):
            logger.debug("No area for %s %s", request.method, request.path)
        await send_response(response, sink)

    async def _handle_lifespan(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Delegated to an ASGI application when there is one; otherwise
        startup and shutdown complete immediately.
        """
        if self._app is not None and self._server_type.name == "asgi":
            await self._app(scope, receive, send)
            return

        while True:
            message: MutableMapping[str, Any] = await receive()
            if message["type"] == "lifespan.startup":
                logger.info(
                    "Serving %d area(s) from %s (main %s)",
                    len(self._areas),
                    self.config.client_dir,
                    self._areas.main.path,
                )
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
