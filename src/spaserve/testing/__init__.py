"""Test utilities for spaserve servers.

Provides an ASGI test client and a recording response sink::

    from spaserve.testing import RecordingSink, TestClient
"""

from spaserve.testing.client import TestClient
from spaserve.testing.sink import RecordingSink

__all__ = [
    "RecordingSink",
    "TestClient",
]
