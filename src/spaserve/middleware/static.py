"""Static file serving middleware.

Serves built client assets (scripts, styles, images) from the client
directory. Files are streamed in chunks so large assets never sit in
memory. Directories and missing files fall through to the next handler,
which is where SPA documents are resolved.
"""

import mimetypes
from collections.abc import AsyncIterator
from pathlib import Path

import anyio

from spaserve.http.headers import Headers
from spaserve.http.request import Request
from spaserve.http.response import Response
from spaserve.middleware.protocol import Next

CHUNK_SIZE = 64 * 1024


async def iter_file(path: Path, chunk_size: int = CHUNK_SIZE) -> AsyncIterator[bytes]:
    """Yield the contents of *path* in chunks."""
    async with await anyio.open_file(path, "rb") as handle:
        while chunk := await handle.read(chunk_size):
            yield chunk


class StaticFiles:
    """Middleware that serves static files from a directory.

    Files are served for paths matching the configured prefix.
    Non-matching paths fall through to the next handler.

    Security: resolves symlinks and verifies the final path
    is within the configured directory to prevent path traversal.

    Usage::

        server = SPAServer(app, config=config, middleware=(
            StaticFiles(directory="dist/client", cache_control="no-cache"),
        ))
    """

    __slots__ = ("_cache_control", "_directory", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/",
        *,
        cache_control: str = "public, max-age=3600",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._cache_control = cache_control

        # Normalize prefix: ensure leading slash, strip trailing.
        # Root prefix "/" normalizes to "" (every path is a candidate).
        stripped = "/" + prefix.strip("/")
        self._prefix = stripped if stripped != "/" else ""

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a static file or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        path = request.path

        if self._prefix:
            if not path.startswith(self._prefix + "/") and path != self._prefix:
                return await next(request)
            relative = path[len(self._prefix) :].lstrip("/")
        else:
            relative = path.lstrip("/")

        if not relative or "\x00" in relative:
            return await next(request)

        file_path = (self._directory / relative).resolve()
        if not file_path.is_relative_to(self._directory):
            return Response(body="Forbidden", status=403)

        if not await anyio.Path(file_path).is_file():
            return await next(request)

        return await self._serve_file(file_path, head=request.method == "HEAD")

    async def _serve_file(self, file_path: Path, *, head: bool) -> Response:
        """Build a streaming response for a file."""
        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"

        stat = await anyio.Path(file_path).stat()
        headers = Headers.from_pairs(
            [
                ("content-type", content_type),
                ("content-length", str(stat.st_size)),
                ("cache-control", self._cache_control),
            ]
        )
        body = None if head else iter_file(file_path)
        return Response(body=body, headers=headers)
