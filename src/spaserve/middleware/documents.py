"""Area document middleware — serves each area's index document.

Redirects bare ``/`` to a non-root main area, resolves the request path
through the area table, and answers with the matched document. Paths no
area claims fall through.
"""

import logging
from collections.abc import Callable

import anyio

from spaserve.http.headers import Headers
from spaserve.http.request import Request
from spaserve.http.response import Response
from spaserve.middleware.protocol import Next
from spaserve.routing.table import AreaTable

logger = logging.getLogger("spaserve.routing")


class AreaDocuments:
    """Middleware that answers GET/HEAD requests with an area's document.

    The table is read through *table_source* on every request, so a
    server can swap in a rebuilt table without touching this object.
    """

    __slots__ = ("_table_source",)

    def __init__(self, table_source: AreaTable | Callable[[], AreaTable]) -> None:
        if isinstance(table_source, AreaTable):
            table = table_source
            self._table_source: Callable[[], AreaTable] = lambda: table
        else:
            self._table_source = table_source

    async def __call__(self, request: Request, next: Next) -> Response:
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        table = self._table_source()

        target = table.redirect_for(request.path)
        if target is not None:
            logger.debug("Redirecting %s to main area %s", request.path, target)
            return Response.redirect(target)

        route = table.resolve(request.path) or table.history_fallback(request.path)
        if route is None:
            return await next(request)

        document = await anyio.Path(route.source_document).read_bytes()
        headers = Headers.from_pairs(
            [
                ("content-type", "text/html; charset=utf-8"),
                ("content-length", str(len(document))),
                ("cache-control", "no-cache"),
            ]
        )
        body = None if request.method == "HEAD" else document
        return Response(body=body, headers=headers)
