"""Server configuration.

SPAServerConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from spaserve.errors import ConfigurationError

ROUTER_TYPES = frozenset({"browser", "hash", "none"})


@dataclass(frozen=True, slots=True)
class SPAServerConfig:
    """Server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SPAServerConfig(
            client_dir="dist/client",
            base="/app",
            areas={"/app": "index.html", "/admin/*": "admin/index.html"},
        )
    """

    # Application handler, as an import string
    entry: str = "app:app"
    server_type: str = "fetch"

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    production_port: int | None = None  # Falls back to port
    start_server: bool = True
    log_level: str = "info"

    # Client build
    client_dir: str | Path = "dist/client"
    base: str = "/"
    areas: Mapping[str, str] | None = None  # pattern -> document, relative to client_dir

    # "browser" = history routing (every area is wildcard)
    router_type: str = "browser"

    # Static assets
    static_cache_control: str = "public, max-age=3600"

    def __post_init__(self) -> None:
        if self.router_type not in ROUTER_TYPES:
            msg = f"router_type must be one of {sorted(ROUTER_TYPES)}, got {self.router_type!r}"
            raise ConfigurationError(msg)

    @property
    def history(self) -> bool:
        """Whether history-mode routing makes every area wildcard."""
        return self.router_type == "browser"

    @property
    def serve_port(self) -> int:
        """Port for production launch scripts."""
        return self.production_port if self.production_port is not None else self.port

    def with_overrides(self, **changes: Any) -> "SPAServerConfig":
        """Return a new config with *changes* applied; ``None`` values are ignored."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})
