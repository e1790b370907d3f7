"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: Request, next: Next) -> Response: ...

No base class required. The server checks the shape, not the lineage.
Returning a fallthrough 404 (see ``Response.not_found``) hands the
request to whatever sits after the chain.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from spaserve.http.request import Request
from spaserve.http.response import Response

# The next handler in the middleware chain
type Next = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Protocol for spaserve middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(request: Request, next: Next) -> Response:
            start = time.monotonic()
            response = await next(request)
            elapsed = time.monotonic() - start
            return response.with_header("X-Time", f"{elapsed:.3f}")

        # Class middleware
        class Gate:
            async def __call__(self, request: Request, next: Next) -> Response:
                ...
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...


async def _not_found(request: Request) -> Response:  # noqa: ARG001
    return Response.not_found()


def build_chain(middleware: tuple[Middleware, ...]) -> Next:
    """Compose *middleware* into a single handler.

    The innermost handler returns the fallthrough 404.
    """
    handler: Next = _not_found
    for mw in reversed(middleware):
        outer = handler
        mw_ref = mw

        async def make_next(req: Request, _mw: Middleware = mw_ref, _next: Next = outer) -> Response:
            return await _mw(req, _next)

        handler = make_next
    return handler
