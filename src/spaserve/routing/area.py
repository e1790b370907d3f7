"""AreaRoute frozen dataclass and path helpers."""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

WILDCARD_MARKER = "*"


@dataclass(frozen=True, slots=True)
class AreaRoute:
    """One SPA area: a route prefix bound to an index document.

    Created once when the area table is built, immutable thereafter.
    """

    path: str
    source_document: Path
    index: str
    directory: str
    is_main: bool = False
    wildcard: bool = False

    @property
    def segment_count(self) -> int:
        return len(segments(self.path))

    @property
    def precedence(self) -> tuple[int, int]:
        """Sort key: deeper, then longer, prefixes first."""
        return (-self.segment_count, -len(self.path))

    def matches(self, normalized: str) -> bool:
        """Whether an already-normalized path belongs to this area.

        Exact match always counts. Wildcard areas other than the root
        also take every path that starts with their prefix, so a
        wildcard ``/blog`` serves ``/blog/2024`` and ``/blogger`` alike.
        """
        if normalized == self.path:
            return True
        if self.path == "/" or not self.wildcard:
            return False
        return normalized.startswith(self.path)


def segments(path: str) -> list[str]:
    """Non-empty segments of *path*."""
    return [part for part in path.split("/") if part]


def normalize_path(path: str) -> str:
    """Canonical form of a request path or area pattern.

    Drops the query string, guarantees a leading slash and strips
    trailing slashes except for the root::

        "/about/?tab=1" -> "/about"
        "" -> "/"

    Normalizing a normalized path returns it unchanged.
    """
    path = path.split("?", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    stripped = path.rstrip("/")
    return stripped or "/"


def parse_pattern(pattern: str) -> tuple[str, bool]:
    """Split an area pattern into its normalized path and wildcard flag.

    ``"/blog/*"`` and ``"/blog*"`` are both the wildcard area ``/blog``.
    """
    wildcard = pattern.endswith(WILDCARD_MARKER)
    if wildcard:
        pattern = pattern.rstrip(WILDCARD_MARKER)
    return normalize_path(pattern), wildcard


def is_asset_path(path: str) -> bool:
    """Whether *path* names an asset rather than an SPA document.

    Asset-like paths contain an ``@`` segment (``/@vite/client``,
    ``/@fs/...``) or end in a file extension. They are left to static
    file serving.
    """
    parts = segments(normalize_path(path))
    if any(part.startswith("@") for part in parts):
        return True
    if not parts:
        return False
    return PurePosixPath(parts[-1]).suffix != ""
