"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with typed
dataclasses for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI 3.0 types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict.

    Internal only -- users interact with Request, not this.
    """

    method: str
    path: str
    raw_path: bytes
    query_string: bytes
    headers: tuple[tuple[bytes, bytes], ...]

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        return cls(
            method=scope.get("method") or "GET",
            path=scope.get("path") or "/",
            raw_path=scope.get("raw_path") or b"",
            query_string=scope.get("query_string") or b"",
            headers=tuple(scope.get("headers") or ()),
        )

    @property
    def target(self) -> str:
        """Request target: path plus ``?query`` when a query is present."""
        path = self.raw_path.decode("latin-1") if self.raw_path else self.path
        if "?" in path:
            # Some servers leave the query on raw_path
            return path
        if self.query_string:
            return f"{path}?{self.query_string.decode('latin-1')}"
        return path or "/"
