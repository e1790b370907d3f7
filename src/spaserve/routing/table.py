"""Area table — immutable route table built once from configuration.

The table is shared read-only state: request handling only calls
``resolve`` and ``redirect_for``. Reconfiguration builds a new table
and swaps the reference, it never edits one in place.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from spaserve.errors import RouteConfigurationError
from spaserve.routing.area import AreaRoute, is_asset_path, normalize_path, parse_pattern

logger = logging.getLogger("spaserve.routing")

DEFAULT_INDEX = "index.html"


@dataclass(frozen=True, slots=True)
class AreaTable:
    """Compiled area routes in precedence order.

    Usage::

        table = build_area_table({"/": "index.html", "/admin/*": "admin/index.html"},
                                 client_dir="dist/client")
        route = table.resolve("/admin/users/42")
    """

    routes: tuple[AreaRoute, ...]
    main: AreaRoute

    def __iter__(self) -> Iterator[AreaRoute]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    def resolve(self, path: str) -> AreaRoute | None:
        """Return the area that serves *path*, or ``None``.

        Asset-like paths never resolve. Otherwise the first route in
        precedence order that matches wins, so ``/blog/post`` is tried
        before ``/blog``.
        """
        normalized = normalize_path(path)
        if is_asset_path(normalized):
            return None
        for route in self.routes:
            if route.matches(normalized):
                logger.debug("Resolved %s to area %s", path, route.path)
                return route
        return None

    def history_fallback(self, path: str) -> AreaRoute | None:
        """Root area for a document path no other area claims.

        ``resolve`` never lets ``/`` act as a prefix. Under history
        routing the root document still answers deep links such as
        ``/settings/profile``, so the document server asks here after
        ``resolve`` comes back empty.
        """
        if is_asset_path(path):
            return None
        for route in self.routes:
            if route.path == "/" and route.wildcard:
                return route
        return None

    def redirect_for(self, path: str) -> str | None:
        """Redirect target for bare ``/`` when the main area is not at root."""
        if self.main.path != "/" and normalize_path(path) == "/":
            return self.main.path
        return None


def _locate_document(client_dir: Path, document: str, pattern: str) -> Path:
    source = (client_dir / document.lstrip("/")).resolve()
    if not source.is_relative_to(client_dir):
        msg = f"Area {pattern!r}: document {document!r} is outside {client_dir}"
        raise RouteConfigurationError(msg)
    if not source.is_file():
        msg = f"Area {pattern!r}: document {source} does not exist"
        raise RouteConfigurationError(msg)
    return source


def _directory_of(source: Path, client_dir: Path) -> str:
    parent = source.parent.relative_to(client_dir).as_posix()
    return "" if parent == "." else "/" + parent


def build_area_table(
    areas: Mapping[str, str] | None,
    *,
    client_dir: str | Path,
    base: str = "/",
    history: bool = True,
) -> AreaTable:
    """Build an ``AreaTable`` from an area mapping.

    Args:
        areas: Route pattern -> document path relative to *client_dir*.
            A trailing ``*`` marks a wildcard area. Empty or ``None``
            means a single ``{base: "index.html"}`` area.
        client_dir: Directory the documents live in.
        base: Application base path; its area becomes the main area.
        history: History-mode routing, which makes every area wildcard.

    Raises:
        RouteConfigurationError: For a missing or escaping document, a
            duplicate area path, or a base path with no area.
    """
    root = Path(client_dir).resolve()
    main_path = normalize_path(base)
    if not areas:
        areas = {main_path: DEFAULT_INDEX}

    routes: dict[str, AreaRoute] = {}
    for pattern, document in areas.items():
        path, explicit_wildcard = parse_pattern(pattern)
        if path in routes:
            msg = f"Duplicate area path {path!r} (from pattern {pattern!r})"
            raise RouteConfigurationError(msg)
        source = _locate_document(root, document, pattern)
        routes[path] = AreaRoute(
            path=path,
            source_document=source,
            index=source.name,
            directory=_directory_of(source, root),
            is_main=path == main_path,
            wildcard=explicit_wildcard or history,
        )

    if main_path not in routes:
        msg = f"Base path {main_path!r} has no area; configured: {sorted(routes)}"
        raise RouteConfigurationError(msg)

    ordered = tuple(sorted(routes.values(), key=lambda route: route.precedence))
    logger.info("Built area table with %d area(s), main %s", len(ordered), main_path)
    return AreaTable(routes=ordered, main=routes[main_path])
