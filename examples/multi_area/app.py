"""Multi-area SPA — a JSON API in front of two client builds.

The handler owns ``/api``. Everything it declines falls through to the
areas: the main app at ``/`` (history routing, so deep links work) and
the admin console under ``/admin``. A missing todo is an authoritative
404 and never becomes a page.

Run:
    python app.py
"""

import json
from pathlib import Path

from spaserve import Response, SPAServer, SPAServerConfig
from spaserve.http.response import FALLBACK_HEADER

TODOS = {1: "Write docs", 2: "Ship it"}


def _json(data: object, status: int = 200) -> Response:
    return Response(json.dumps(data), status=status).with_header("content-type", "application/json")


async def api(request):
    path = request.path
    if path == "/api/todos":
        return _json([{"id": key, "title": title} for key, title in TODOS.items()])
    if path.startswith("/api/todos/"):
        key = path.rsplit("/", 1)[-1]
        if key.isdigit() and int(key) in TODOS:
            return _json({"id": int(key), "title": TODOS[int(key)]})
        return _json({"error": "no such todo"}, status=404).with_header(FALLBACK_HEADER, "false")
    return Response.not_found()


app = SPAServer(
    api,
    config=SPAServerConfig(
        client_dir=Path(__file__).parent / "client",
        areas={"/": "index.html", "/admin": "admin/index.html"},
    ),
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=3000)
