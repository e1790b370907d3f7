"""Tests for the area document middleware."""

from pathlib import Path

from spaserve.http.headers import Headers
from spaserve.http.request import Request
from spaserve.middleware.documents import AreaDocuments
from spaserve.middleware.protocol import build_chain
from spaserve.routing import build_area_table
from spaserve.server.fallback import should_fall_through


def _request(path: str, method: str = "GET") -> Request:
    return Request(method=method, url=f"http://testserver{path}", headers=Headers())


class TestAreaDocuments:
    async def test_serves_matched_document(self, client_dir: Path) -> None:
        table = build_area_table({"/": "index.html", "/about": "about.html"}, client_dir=client_dir)
        handler = build_chain((AreaDocuments(table),))

        response = await handler(_request("/about/"))

        assert response.status == 200
        assert response.text == "<h1>About</h1>"
        assert response.headers["content-type"] == "text/html; charset=utf-8"
        assert response.headers["cache-control"] == "no-cache"

    async def test_wildcard_area_serves_sub_paths(self, client_dir: Path) -> None:
        table = build_area_table(
            {"/": "index.html", "/admin/*": "admin/index.html"}, client_dir=client_dir, history=False
        )
        handler = build_chain((AreaDocuments(table),))

        response = await handler(_request("/admin/users/7"))
        assert response.text == "<h1>Admin</h1>"

    async def test_history_routing_serves_root_for_deep_links(self, client_dir: Path) -> None:
        table = build_area_table(None, client_dir=client_dir, history=True)
        handler = build_chain((AreaDocuments(table),))

        response = await handler(_request("/settings/profile"))
        assert response.text == "<h1>Main</h1>"

    async def test_unmatched_path_falls_through(self, client_dir: Path) -> None:
        table = build_area_table(None, client_dir=client_dir, history=False)
        handler = build_chain((AreaDocuments(table),))

        response = await handler(_request("/settings"))
        assert should_fall_through(response)

    async def test_assets_fall_through(self, client_dir: Path) -> None:
        table = build_area_table(None, client_dir=client_dir, history=True)
        handler = build_chain((AreaDocuments(table),))

        response = await handler(_request("/missing.js"))
        assert should_fall_through(response)

    async def test_bare_root_redirects_to_main(self, client_dir: Path) -> None:
        table = build_area_table(
            {"/app": "index.html", "/admin": "admin/index.html"}, client_dir=client_dir, base="/app"
        )
        handler = build_chain((AreaDocuments(table),))

        response = await handler(_request("/"))
        assert response.status == 302
        assert response.headers["location"] == "/app"

    async def test_head_omits_body(self, client_dir: Path) -> None:
        table = build_area_table(None, client_dir=client_dir)
        handler = build_chain((AreaDocuments(table),))

        response = await handler(_request("/", method="HEAD"))
        assert response.status == 200
        assert response.body is None
        assert response.headers["content-length"] == str(len("<h1>Main</h1>"))

    async def test_post_falls_through(self, client_dir: Path) -> None:
        table = build_area_table(None, client_dir=client_dir)
        handler = build_chain((AreaDocuments(table),))

        response = await handler(_request("/", method="POST"))
        assert should_fall_through(response)

    async def test_table_source_is_read_per_request(self, client_dir: Path) -> None:
        tables = [build_area_table(None, client_dir=client_dir, history=False)]
        handler = build_chain((AreaDocuments(lambda: tables[0]),))

        assert (await handler(_request("/about"))).status == 404

        tables[0] = build_area_table({"/": "index.html", "/about": "about.html"}, client_dir=client_dir)
        assert (await handler(_request("/about"))).text == "<h1>About</h1>"
