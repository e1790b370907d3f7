"""Immutable HTTP request.

Frozen value produced by the request adapter. Unlike a streaming
request, the body is already materialized: ``None`` for GET and HEAD,
the complete byte sequence otherwise.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import SplitResult, unquote, urlsplit

from spaserve.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``url`` is absolute (scheme, host, path and query). Path and query
    are derived from it on access.
    """

    method: str
    url: str
    headers: Headers = field(default_factory=Headers)
    body: bytes | None = None

    @property
    def _split(self) -> SplitResult:
        return urlsplit(self.url)

    @property
    def scheme(self) -> str:
        return self._split.scheme

    @property
    def host(self) -> str:
        return self._split.netloc

    @property
    def raw_path(self) -> str:
        """Path component of the URL as sent, still percent-encoded."""
        return self._split.path or "/"

    @property
    def path(self) -> str:
        """Percent-decoded path, ``/`` when empty. Areas and assets are matched on this."""
        return unquote(self.raw_path)

    @property
    def query_string(self) -> str:
        return self._split.query

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    def text(self) -> str:
        """The body decoded as UTF-8 (empty when there is no body)."""
        return (self.body or b"").decode("utf-8")

    def json(self) -> Any:
        """The body parsed as JSON."""
        return json_module.loads(self.body or b"null")
