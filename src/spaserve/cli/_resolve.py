"""App import resolution — resolves ``"module:attribute"`` strings to handlers.

Shared utility used by ``spaserve run`` to locate the application the
server should bind to.
"""

import importlib
import sys
from pathlib import Path
from typing import Any


def resolve_app(import_string: str) -> Any:
    """Resolve an import string to an application object.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).  The current directory is importable, matching how
    ASGI servers locate applications.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not callable and has no
            ``fetch`` method.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if not (callable(obj) or callable(getattr(obj, "fetch", None))):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, which is not a handler"
        raise TypeError(msg)

    return obj
