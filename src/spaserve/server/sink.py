"""Response sinks — where the bridge writes status, headers and body.

A sink takes a head (status plus flat headers), then body chunks, then a
single end. ``ASGISink`` maps that onto ASGI ``send`` messages.
"""

from collections.abc import Mapping
from typing import Protocol, TypeAlias

from spaserve._internal.asgi import Send
from spaserve.errors import StreamWriteError

FlatHeaders: TypeAlias = dict[str, str | list[str]]


class ResponseSink(Protocol):
    """Protocol for response sinks.

    Calls arrive in a fixed order: ``write_head`` once, ``write`` zero
    or more times, ``end`` once.
    """

    async def write_head(self, status: int, headers: FlatHeaders) -> None: ...

    async def write(self, chunk: bytes) -> None: ...

    async def end(self) -> None: ...


def parse_flat_headers(headers: Mapping[str, str | list[str]]) -> list[tuple[bytes, bytes]]:
    """Expand flat headers back into raw pairs, one per value."""
    raw: list[tuple[bytes, bytes]] = []
    for name, value in headers.items():
        name_bytes = name.lower().encode("latin-1")
        values = [value] if isinstance(value, str) else value
        raw.extend((name_bytes, item.encode("latin-1")) for item in values)
    return raw


class ASGISink:
    """Sink over an ASGI ``send`` callable.

    Enforces head-then-body ordering. A failing ``send`` (usually an
    aborted connection) surfaces as ``StreamWriteError``.
    """

    __slots__ = ("_ended", "_send", "_started")

    def __init__(self, send: Send) -> None:
        self._send = send
        self._started = False
        self._ended = False

    async def _emit(self, message: dict[str, object]) -> None:
        try:
            await self._send(message)
        except Exception as exc:
            msg = f"Failed to write {message['type']}: {exc}"
            raise StreamWriteError(msg) from exc

    async def write_head(self, status: int, headers: FlatHeaders) -> None:
        if self._started:
            msg = "Response head already written"
            raise StreamWriteError(msg)
        self._started = True
        await self._emit(
            {
                "type": "http.response.start",
                "status": status,
                "headers": parse_flat_headers(headers),
            }
        )

    async def write(self, chunk: bytes) -> None:
        if not self._started or self._ended:
            msg = "Body chunk written outside of an open response"
            raise StreamWriteError(msg)
        await self._emit({"type": "http.response.body", "body": chunk, "more_body": True})

    async def end(self) -> None:
        if not self._started or self._ended:
            msg = "Response ended twice or before its head"
            raise StreamWriteError(msg)
        self._ended = True
        await self._emit({"type": "http.response.body", "body": b"", "more_body": False})
