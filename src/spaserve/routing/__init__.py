"""Routing — immutable area table with precedence-ordered prefix matching.

Areas are declared as ``pattern -> document`` and compiled into an
``AreaTable`` once, before the first request.
"""

from spaserve.routing.area import AreaRoute, is_asset_path, normalize_path, parse_pattern
from spaserve.routing.table import AreaTable, build_area_table

__all__ = [
    "AreaRoute",
    "AreaTable",
    "build_area_table",
    "is_asset_path",
    "normalize_path",
    "parse_pattern",
]
