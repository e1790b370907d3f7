"""Launch script generation — plain Python strings, ``str.format()`` substitution.

Produces a standalone module that builds an ``SPAServer`` for a client
build and, optionally, starts it under uvicorn. Consumes the area
configuration as plain data; the router is not involved.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from spaserve.config import SPAServerConfig

LAUNCHER_PY = '''\
"""Launcher generated by spaserve."""

from pathlib import Path

from spaserve import SPAServer, SPAServerConfig
{import_line}

config = SPAServerConfig(
    entry={entry!r},
    server_type={server_type!r},
    host={host!r},
    port={port!r},
    client_dir=Path(__file__).parent / {client_dir!r},
    base={base!r},
    areas={areas!r},
    router_type={router_type!r},
)
server = SPAServer(handler, config=config)
'''

RUN_BLOCK = """
if __name__ == "__main__":
    import uvicorn

    print("Running on port {port}")
    uvicorn.run(server, host=config.host, port=config.port, log_level={log_level!r})
"""

EXPORT_BLOCK = """
app = server
"""


@dataclass(frozen=True, slots=True)
class ScriptOptions:
    """Plain data a launch script is rendered from."""

    entry: str = "app:app"
    host: str = "127.0.0.1"
    port: int = 3000
    client_dir: str = "client"
    base: str = "/"
    areas: Mapping[str, str] = field(default_factory=dict)
    router_type: str = "browser"
    start_server: bool = True
    log_level: str = "info"

    @classmethod
    def from_config(cls, config: SPAServerConfig, *, client_dir: str | None = None) -> "ScriptOptions":
        """Options for *config*, using its production port."""
        return cls(
            entry=config.entry,
            host=config.host,
            port=config.serve_port,
            client_dir=client_dir or Path(config.client_dir).name,
            base=config.base,
            areas=dict(config.areas or {}),
            router_type=config.router_type,
            start_server=config.start_server,
            log_level=config.log_level,
        )


def render_script(options: ScriptOptions, *, server_type: str) -> str:
    """Render a launcher module for *options* and the named server type."""
    module, _, attr = options.entry.partition(":")

    text = LAUNCHER_PY.format(
        import_line=f"from {module} import {attr or 'app'} as handler",
        entry=options.entry,
        server_type=server_type,
        host=options.host,
        port=options.port,
        client_dir=options.client_dir,
        base=options.base,
        areas=dict(options.areas) or None,
        router_type=options.router_type,
    )
    if options.start_server:
        return text + RUN_BLOCK.format(port=options.port, log_level=options.log_level)
    return text + EXPORT_BLOCK
