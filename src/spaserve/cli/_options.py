"""Turn parsed CLI arguments into an ``SPAServerConfig``."""

import argparse

from spaserve.config import SPAServerConfig
from spaserve.errors import ConfigurationError


def parse_areas(values: list[str] | None) -> dict[str, str] | None:
    """Parse repeated ``PATTERN=DOCUMENT`` options.

    Raises:
        ConfigurationError: If an option has no ``=`` or an empty side.
    """
    if not values:
        return None
    areas: dict[str, str] = {}
    for value in values:
        pattern, sep, document = value.partition("=")
        if not sep or not pattern or not document:
            msg = f"Invalid --area {value!r}; expected PATTERN=DOCUMENT"
            raise ConfigurationError(msg)
        areas[pattern] = document
    return areas


def config_from_args(args: argparse.Namespace) -> SPAServerConfig:
    """Build a config from CLI arguments; unset options keep defaults."""
    return SPAServerConfig().with_overrides(
        entry=getattr(args, "app", None),
        server_type=getattr(args, "server_type", None),
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
        client_dir=args.client_dir,
        base=args.base,
        areas=parse_areas(args.area),
        router_type=args.router_type,
    )
