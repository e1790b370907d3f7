"""``fetch`` binding — applications that map a Request to a Response.

The application is a callable ``(Request) -> Response`` (sync or async),
or an object exposing such a ``fetch`` method. Each transaction is
adapted, handed to the application, and its response is either
streamed back or, for an unmarked 404, passed on.
"""

from functools import partial
from typing import Any

from spaserve._internal.asgi import Receive, Scope, Send
from spaserve._internal.invoke import invoke
from spaserve.bindings.protocol import Continue
from spaserve.http.response import Response
from spaserve.scripts import ScriptOptions, render_script
from spaserve.server.adapter import adapt
from spaserve.server.fallback import forward
from spaserve.server.sink import ASGISink


class FetchServer:
    """Binding for request/response handlers."""

    name = "fetch"

    async def handle(self, app: Any, scope: Scope, receive: Receive, send: Send, next: Continue) -> None:
        request = await adapt(scope, receive)
        handler = getattr(app, "fetch", app)
        response = await invoke(handler, request)
        if not isinstance(response, Response):
            msg = f"Handler returned {type(response).__name__}, expected spaserve.Response"
            raise TypeError(msg)
        await forward(response, ASGISink(send), partial(next, request))

    def script(self, options: ScriptOptions) -> str:
        return render_script(options, server_type=self.name)


fetch_server = FetchServer()
