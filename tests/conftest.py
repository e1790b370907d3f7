"""Shared fixtures: a built client directory and raw ASGI transactions."""

from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def client_dir(tmp_path: Path) -> Path:
    """A client build with a main document, two areas and some assets."""
    client = tmp_path / "client"
    client.mkdir()
    (client / "index.html").write_text("<h1>Main</h1>")
    (client / "about.html").write_text("<h1>About</h1>")

    admin = client / "admin"
    admin.mkdir()
    (admin / "index.html").write_text("<h1>Admin</h1>")

    blog = client / "blog"
    blog.mkdir()
    (blog / "index.html").write_text("<h1>Blog</h1>")
    (blog / "post.html").write_text("<h1>Post</h1>")

    assets = client / "assets"
    assets.mkdir()
    (assets / "app.js").write_text("console.log('app');")
    (assets / "style.css").write_text("body { margin: 0; }")
    return client


def make_scope(**overrides: Any) -> dict[str, Any]:
    """Build a minimal valid ASGI HTTP scope dict."""
    base: dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [],
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class Messages:
    """Receive channel that replays body messages and counts reads."""

    def __init__(self, *messages: dict[str, Any]) -> None:
        self._messages = list(messages)
        self.reads = 0

    async def __call__(self) -> dict[str, Any]:
        self.reads += 1
        if self._messages:
            return self._messages.pop(0)
        return {"type": "http.disconnect"}


class Collector:
    """ASGI send callable that records every message."""

    def __init__(self) -> None:
        self.messages: list[dict[str, Any]] = []

    async def __call__(self, message: dict[str, Any]) -> None:
        self.messages.append(message)

    @property
    def start(self) -> dict[str, Any]:
        return next(m for m in self.messages if m["type"] == "http.response.start")

    @property
    def body(self) -> bytes:
        return b"".join(m.get("body", b"") for m in self.messages if m["type"] == "http.response.body")


@pytest.fixture
def collector() -> Collector:
    return Collector()
