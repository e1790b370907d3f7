"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. The body is either absent,
buffered (``bytes`` or ``str``), or a lazy single-pass iterable of
chunks that the bridge drains exactly once.
"""

from collections.abc import AsyncGenerator, AsyncIterable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import TypeAlias

from spaserve.http.headers import Headers

# Name of the fallthrough marker header (see spaserve.server.fallback)
FALLBACK_HEADER = "spa-server"

Chunk: TypeAlias = bytes | str
Body: TypeAlias = bytes | str | Iterable[Chunk] | AsyncIterable[Chunk] | None


def _encode_chunk(chunk: Chunk) -> bytes:
    return chunk.encode("utf-8") if isinstance(chunk, str) else bytes(chunk)


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set status
    and headers::

        Response("<h1>hi</h1>").with_header("content-type", "text/html")
    """

    body: Body = None
    status: int = 200
    headers: Headers = field(default_factory=Headers)

    # -- Constructors --

    @classmethod
    def redirect(cls, location: str, status: int = 302) -> "Response":
        """A redirect to *location* with an empty body."""
        return cls(status=status, headers=Headers.from_pairs([("location", location)]))

    @classmethod
    def not_found(cls, *, authoritative: bool = False) -> "Response":
        """A 404 response.

        By default this is the fallthrough sentinel: the surrounding
        chain is given a chance to handle the request. With
        ``authoritative=True`` the marker header is set to ``"false"``
        and the 404 is sent as is.
        """
        response = cls(
            body="Not Found",
            status=404,
            headers=Headers.from_pairs([("content-type", "text/plain; charset=utf-8")]),
        )
        if authoritative:
            return response.with_header(FALLBACK_HEADER, "false")
        return response

    # -- Chainable transformations --

    def with_status(self, status: int) -> "Response":
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=self.headers.with_header(name, value))

    def with_headers(self, headers: Mapping[str, str]) -> "Response":
        """Return a new Response with additional headers."""
        merged = self.headers
        for name, value in headers.items():
            merged = merged.with_header(name, value)
        return replace(self, headers=merged)

    def with_body(self, body: Body) -> "Response":
        """Return a new Response with a different body."""
        return replace(self, body=body)

    # -- Body access --

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    @property
    def is_buffered(self) -> bool:
        """True when the body is absent or held in memory."""
        return self.body is None or isinstance(self.body, (bytes, str))

    @property
    def body_bytes(self) -> bytes:
        """Buffered body as bytes.

        Raises:
            TypeError: If the body is a lazy iterable.
        """
        if self.body is None:
            return b""
        if isinstance(self.body, (bytes, str)):
            return _encode_chunk(self.body)
        msg = "Streaming body cannot be read as bytes; use iter_body()"
        raise TypeError(msg)

    @property
    def text(self) -> str:
        """Buffered body as string."""
        return self.body_bytes.decode("utf-8")

    async def iter_body(self) -> AsyncGenerator[bytes]:
        """Yield the body chunks in order (nothing when absent).

        A lazy body is single-pass: it can be iterated once.
        """
        body = self.body
        if body is None:
            return
        if isinstance(body, (bytes, str)):
            yield _encode_chunk(body)
        elif isinstance(body, AsyncIterable):
            async for chunk in body:
                yield _encode_chunk(chunk)
        else:
            for chunk in body:
                yield _encode_chunk(chunk)
