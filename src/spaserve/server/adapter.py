"""Request adapter — turns an ASGI transaction into an immutable Request.

The only place that reads the ASGI receive channel. The body is drained
once, for methods that carry one, and never re-read.
"""

import logging

from spaserve._internal.asgi import HTTPScope, Receive, Scope
from spaserve.errors import AdaptationError
from spaserve.http.headers import Headers
from spaserve.http.request import Request

logger = logging.getLogger("spaserve.server")

DEFAULT_SCHEME = "http"
DEFAULT_HOST = "localhost:3000"
BODYLESS_METHODS = frozenset({"GET", "HEAD"})


def build_url(http_scope: HTTPScope, headers: Headers) -> str:
    """Absolute URL from the forwarded scheme, the host header and the target."""
    scheme = headers.get("x-forwarded-proto") or DEFAULT_SCHEME
    host = headers.get("host") or DEFAULT_HOST
    return f"{scheme}://{host}{http_scope.target}"


async def read_body(receive: Receive) -> bytes:
    """Drain the receive channel into one contiguous byte string.

    Raises:
        AdaptationError: If ``receive`` fails or the client disconnects
            before the final body message.
    """
    chunks: list[bytes] = []
    while True:
        try:
            message = await receive()
        except Exception as exc:
            msg = f"Failed to read request body: {exc}"
            raise AdaptationError(msg) from exc

        if message.get("type") == "http.disconnect":
            msg = "Client disconnected before the request body was complete"
            raise AdaptationError(msg)

        body = message.get("body", b"")
        if body:
            chunks.append(body)
        if not message.get("more_body", False):
            return b"".join(chunks)


async def adapt(scope: Scope, receive: Receive) -> Request:
    """Build a ``Request`` from an ASGI HTTP scope and receive callable.

    Every header pair is copied in order, so repeated names (several
    ``set-cookie`` lines, say) stay separate values. GET and HEAD never
    touch ``receive``.
    """
    http_scope = HTTPScope.from_scope(scope)
    headers = Headers(http_scope.headers)
    method = http_scope.method.upper()

    body: bytes | None = None
    if method not in BODYLESS_METHODS:
        body = await read_body(receive)

    request = Request(
        method=method,
        url=build_url(http_scope, headers),
        headers=headers,
        body=body,
    )
    logger.debug("Adapted %s %s", request.method, request.url)
    return request
