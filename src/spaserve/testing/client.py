"""Async test client for spaserve servers.

Uses the same Response type as production. Sends requests through the
ASGI interface directly — no HTTP involved.
"""

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote, unquote

from spaserve._internal.asgi import ASGIApp
from spaserve.http.headers import Headers
from spaserve.http.response import Response


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for ASGI applications such as ``SPAServer``.

    Returns a buffered ``Response``. Header values may be lists, which
    become repeated header lines.

    Usage::

        async with TestClient(server) as client:
            response = await client.get("/about")
            assert response.status == 200
    """

    __slots__ = ("app", "started")

    def __init__(self, app: ASGIApp) -> None:
        self.app = app
        self.started = False

    async def __aenter__(self) -> "TestClient":
        await self._lifespan("startup")
        self.started = True
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._lifespan("shutdown")

    async def _lifespan(self, phase: str) -> None:
        sent = False
        replies: list[str] = []

        async def receive() -> dict[str, Any]:
            nonlocal sent
            if not sent:
                sent = True
                return {"type": f"lifespan.{phase}"}
            # Ends the lifespan loop after a startup
            return {"type": "lifespan.shutdown"}

        async def send(message: dict[str, Any]) -> None:
            replies.append(message["type"])

        await self.app({"type": "lifespan", "asgi": {"version": "3.0"}}, receive, send)
        if f"lifespan.{phase}.complete" not in replies:
            msg = f"Lifespan {phase} did not complete: {replies}"
            raise RuntimeError(msg)

    async def get(self, path: str, *, headers: Mapping[str, str | Sequence[str]] | None = None) -> Response:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def head(self, path: str, *, headers: Mapping[str, str | Sequence[str]] | None = None) -> Response:
        """Send a HEAD request."""
        return await self.request("HEAD", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: Mapping[str, str | Sequence[str]] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send a POST request."""
        return await self.request("POST", path, headers=headers, body=body)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str | Sequence[str]] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        # Split path and query string
        if "?" in path:
            path_part, query_string = path.split("?", 1)
        else:
            path_part = path
            query_string = ""

        # Servers hand over a decoded path and the percent-encoded original
        decoded_path = unquote(path_part)
        raw_headers = Headers.from_mapping({"host": "testserver", **(headers or {})}).raw

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": decoded_path,
            "raw_path": quote(decoded_path).encode("ascii"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": list(raw_headers),
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        request_body = body or b""
        body_sent = False

        async def receive() -> dict[str, Any]:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": request_body, "more_body": False}
            # After body is sent, wait for disconnect (simplified)
            return {"type": "http.disconnect"}

        response_status = 500
        response_headers: list[tuple[bytes, bytes]] = []
        response_body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal response_status, response_headers
            if message["type"] == "http.response.start":
                response_status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                response_body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        return Response(
            body=b"".join(response_body_parts),
            status=response_status,
            headers=Headers(response_headers),
        )
