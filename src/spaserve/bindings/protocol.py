"""ServerType protocol — the seam between spaserve and an application framework.

A binding knows two things about its kind of application: how to run
one transaction through it (falling through on an unmatched 404), and
how to write a launch script for it.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

from spaserve._internal.asgi import Receive, Scope, Send
from spaserve.http.request import Request
from spaserve.scripts import ScriptOptions

# Called when the application declines a request. Receives the adapted
# request when the binding built one, else None.
type Continue = Callable[[Request | None], Awaitable[None]]


@runtime_checkable
class ServerType(Protocol):
    """Protocol for server bindings.

    Implementations are plain objects; no base class required::

        class MyServer:
            name = "mine"

            async def handle(self, app, scope, receive, send, next):
                ...

            def script(self, options):
                return render_script(options, server_type=self.name)
    """

    name: str

    async def handle(self, app: Any, scope: Scope, receive: Receive, send: Send, next: Continue) -> None: ...

    def script(self, options: ScriptOptions) -> str: ...
