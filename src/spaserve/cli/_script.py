"""``spaserve script`` — write a launch script for a client build."""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from spaserve.bindings import get_server_type
from spaserve.cli._options import config_from_args
from spaserve.errors import ConfigurationError
from spaserve.scripts import ScriptOptions


def write_script(args: argparse.Namespace) -> None:
    """Render the launcher for the selected binding to a file or stdout."""
    try:
        config = config_from_args(args)
        server_type = get_server_type(config.server_type)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    options = ScriptOptions.from_config(config)
    if args.no_start:
        options = replace(options, start_server=False)
    text = server_type.script(options)

    if args.output is None:
        sys.stdout.write(text)
        return

    Path(args.output).write_text(text, encoding="utf-8")
    print(f"Server script written to {args.output}")
