"""Response bridge — streams an immutable Response into a sink.

Headers go out first, then each body chunk in arrival order, then a
single end. Nothing is rolled back if the body fails half way.
"""

import logging

from spaserve._internal.multimap import HeaderMultimap
from spaserve.http.response import Response
from spaserve.server.sink import FlatHeaders, ResponseSink

logger = logging.getLogger("spaserve.server")


def flatten_headers(headers: HeaderMultimap) -> FlatHeaders:
    """Collapse a header multimap into the sink representation.

    A name seen once maps to its value; a name seen more than once maps
    to the list of all its values in order::

        set-cookie: a=1, set-cookie: b=2  ->  {"set-cookie": ["a=1", "b=2"]}
    """
    flat: FlatHeaders = {}
    for name, value in headers.items_all():
        if name not in flat:
            flat[name] = value
            continue
        existing = flat[name]
        if isinstance(existing, list):
            existing.append(value)
        else:
            flat[name] = [existing, value]
    return flat


async def send_response(response: Response, sink: ResponseSink) -> None:
    """Write *response* to *sink*: head, body chunks, end."""
    await sink.write_head(response.status, flatten_headers(response.headers))

    if response.body is not None:
        async for chunk in response.iter_body():
            if chunk:
                await sink.write(chunk)

    await sink.end()
    logger.debug("Sent %d response", response.status)
