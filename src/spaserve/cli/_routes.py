"""``spaserve routes`` — list the area table.

Builds the table from the command line options and prints it in
precedence order, the order requests are matched in.
"""

import argparse
import sys

from spaserve.cli._options import config_from_args
from spaserve.errors import ConfigurationError
from spaserve.routing.table import build_area_table


def run_routes(args: argparse.Namespace) -> None:
    """Print PATH, MATCH, and DOCUMENT for every area."""
    try:
        config = config_from_args(args)
        table = build_area_table(
            config.areas,
            client_dir=config.client_dir,
            base=config.base,
            history=config.history,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    # Build rows: (path, match, document)
    rows: list[tuple[str, str, str]] = []
    for route in table:
        match = "prefix" if route.wildcard and route.path != "/" else "exact"
        if route.is_main:
            match = f"{match} (main)"
        document = f"{route.directory}/{route.index}".lstrip("/")
        rows.append((route.path, match, document))

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_match = max(max(len(r[1]) for r in rows), 5)  # "MATCH" header

    fmt = f"{{:<{max_path}}}  {{:<{max_match}}}  {{}}"
    print(fmt.format("PATH", "MATCH", "DOCUMENT"))
    sep_len = max_path + max_match + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, match, document in rows:
        print(fmt.format(path, match, document))
