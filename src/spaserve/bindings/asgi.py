"""``asgi`` binding — plain ASGI applications.

The application talks ASGI directly. Its ``http.response.start`` is
inspected as it passes: a 404 without ``spa-server: false`` is dropped,
along with the body that follows it, and the transaction moves on to
the next handler once the application returns.
"""

from collections.abc import MutableMapping
from typing import Any

from spaserve._internal.asgi import ASGIApp, Receive, Scope, Send
from spaserve.bindings.protocol import Continue
from spaserve.http.headers import Headers
from spaserve.http.response import Response
from spaserve.scripts import ScriptOptions, render_script
from spaserve.server.fallback import should_fall_through


class ASGIServer:
    """Binding for ASGI applications."""

    name = "asgi"

    async def handle(self, app: ASGIApp, scope: Scope, receive: Receive, send: Send, next: Continue) -> None:
        declined = False

        async def intercept(message: MutableMapping[str, Any]) -> None:
            nonlocal declined
            if message["type"] == "http.response.start":
                head = Response(
                    status=message["status"],
                    headers=Headers(message.get("headers", ())),
                )
                declined = should_fall_through(head)
            if not declined:
                await send(message)

        await app(scope, receive, intercept)
        if declined:
            await next(None)

    def script(self, options: ScriptOptions) -> str:
        return render_script(options, server_type=self.name)


asgi_server = ASGIServer()
