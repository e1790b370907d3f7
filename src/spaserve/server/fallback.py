"""Fallback protocol — lets a handler's 404 mean "someone else try".

A 404 response is treated as unhandled and control passes to the next
handler, unless the response carries ``spa-server: false``. The value
comparison is exact: ``"False"``, ``"0"`` or ``"no"`` still fall through.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from spaserve.http.response import FALLBACK_HEADER, Response
from spaserve.server.sender import send_response
from spaserve.server.sink import ResponseSink

logger = logging.getLogger("spaserve.server")

FALLBACK_DISABLED = "false"

# Continuation invoked when a response falls through
Fallthrough: TypeAlias = Callable[[], Awaitable[None]]

__all__ = ["FALLBACK_DISABLED", "FALLBACK_HEADER", "Fallthrough", "forward", "should_fall_through"]


def should_fall_through(response: Response) -> bool:
    """True when *response* cedes the request to the next handler."""
    if response.status != 404:
        return False
    return response.headers.get(FALLBACK_HEADER) != FALLBACK_DISABLED


async def forward(response: Response, sink: ResponseSink, next: Fallthrough) -> None:
    """Send *response* through the bridge, or call *next* if it falls through."""
    if should_fall_through(response):
        logger.debug("404 without %s marker; falling through", FALLBACK_HEADER)
        await next()
        return
    await send_response(response, sink)
