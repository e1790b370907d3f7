"""``spaserve run`` — development server command.

Resolves an import string to an application, wraps it in an
``SPAServer`` and serves it with uvicorn.
"""

import argparse
import logging
import sys

from spaserve.cli._options import config_from_args
from spaserve.cli._resolve import resolve_app
from spaserve.errors import ConfigurationError

logger = logging.getLogger("spaserve.cli")


def run_server(args: argparse.Namespace) -> None:
    """Start the development server.

    Configuration errors (missing documents, unknown server types) exit
    with status 1 before the server binds.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from spaserve.app import SPAServer

    try:
        config = config_from_args(args)
        server = SPAServer(app, config=config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    run_dev_server(server, config.host, config.port, log_level=config.log_level)


def run_dev_server(app: object, host: str, port: int, *, log_level: str = "info") -> None:
    """Serve an ASGI application with uvicorn."""
    import uvicorn

    logger.info("Running on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=log_level)
