"""HeaderMultimap protocol — what the response bridge needs from a header set.

``flatten_headers`` only reads; any object that keeps every pair in
order satisfies it, not just ``spaserve.http.headers.Headers``.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class HeaderMultimap(Protocol):
    """Read-only, case-insensitive header names with repeatable values.

    ``__getitem__`` is the first value; ``get_list`` every value for one
    name; ``items_all`` every pair in arrival order with lower-case names.
    Spelled out with dunder methods since a Protocol cannot inherit from
    ``Mapping``.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def get_list(self, key: str) -> list[str]: ...
    def items_all(self) -> list[tuple[str, str]]: ...
