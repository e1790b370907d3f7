"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    AreaDocuments -- Serve each area's index document (history routing)
    StaticFiles -- Serve built client assets from a directory
"""

from spaserve.middleware.documents import AreaDocuments
from spaserve.middleware.protocol import Middleware, Next, build_chain
from spaserve.middleware.static import StaticFiles

__all__ = [
    "AreaDocuments",
    "Middleware",
    "Next",
    "StaticFiles",
    "build_chain",
]
