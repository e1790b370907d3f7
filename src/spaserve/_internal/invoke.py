"""Invoke helpers — call sync or async handlers uniformly.

Application handlers handed to the ``fetch`` binding can be ``def`` or
``async def``. This module keeps the sync/async check in one place.

Usage::

    from spaserve._internal.invoke import invoke

    response = await invoke(handler, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        def hello(request):
            return Response("hi")

        async def hello(request):
            data = await load()
            return Response(data)
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
