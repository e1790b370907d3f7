"""spaserve CLI — dev server, area table listing, and launch scripts.

Entry point registered as ``spaserve`` in ``pyproject.toml``::

    [project.scripts]
    spaserve = "spaserve.cli:main"
"""

import argparse
import sys


def _add_area_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that builds an area table."""
    parser.add_argument("--client-dir", default=None, help="Directory holding the client build")
    parser.add_argument("--base", default=None, help="Base path of the main area (default /)")
    parser.add_argument(
        "--area",
        action="append",
        default=None,
        metavar="PATTERN=DOCUMENT",
        help="Area route, e.g. '/admin/*=admin/index.html' (repeatable)",
    )
    parser.add_argument(
        "--router-type",
        choices=("browser", "hash", "none"),
        default=None,
        help="Client routing mode; 'browser' makes every area wildcard",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``spaserve`` command."""
    parser = argparse.ArgumentParser(
        prog="spaserve",
        description="spaserve — serve single-page application areas next to your handlers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- spaserve run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start a development server")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument(
        "--server-type",
        default=None,
        help="Application binding: 'fetch' (Request -> Response) or 'asgi'",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    _add_area_options(run_parser)

    # -- spaserve routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the area table")
    _add_area_options(routes_parser)

    # -- spaserve script --------------------------------------------------
    script_parser = subparsers.add_parser("script", help="Write a launch script")
    script_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    script_parser.add_argument("--server-type", default=None, help="Application binding")
    script_parser.add_argument("--host", default=None, help="Bind host address")
    script_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    script_parser.add_argument(
        "--no-start",
        action="store_true",
        help="Export the server as 'app' instead of starting uvicorn",
    )
    script_parser.add_argument("-o", "--output", default=None, help="Output file (default stdout)")
    _add_area_options(script_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from spaserve.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from spaserve.cli._routes import run_routes

        run_routes(args)
    elif args.command == "script":
        from spaserve.cli._script import write_script

        write_script(args)
