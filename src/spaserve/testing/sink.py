"""Recording sink — captures bridge output for assertions."""

from dataclasses import dataclass, field

from spaserve.server.sink import FlatHeaders


@dataclass(slots=True)
class RecordingSink:
    """A ``ResponseSink`` that records every call in order.

    ``calls`` holds ``("write_head", status, headers)``,
    ``("write", chunk)`` and ``("end",)`` tuples.
    """

    calls: list[tuple[object, ...]] = field(default_factory=list)

    async def write_head(self, status: int, headers: FlatHeaders) -> None:
        self.calls.append(("write_head", status, headers))

    async def write(self, chunk: bytes) -> None:
        self.calls.append(("write", chunk))

    async def end(self) -> None:
        self.calls.append(("end",))

    @property
    def status(self) -> int | None:
        for call in self.calls:
            if call[0] == "write_head":
                return call[1]  # type: ignore[return-value]
        return None

    @property
    def headers(self) -> FlatHeaders | None:
        for call in self.calls:
            if call[0] == "write_head":
                return call[2]  # type: ignore[return-value]
        return None

    @property
    def chunks(self) -> list[bytes]:
        return [call[1] for call in self.calls if call[0] == "write"]  # type: ignore[misc]

    @property
    def body(self) -> bytes:
        return b"".join(self.chunks)

    @property
    def ended(self) -> int:
        """How many times ``end`` was called."""
        return sum(1 for call in self.calls if call[0] == "end")
