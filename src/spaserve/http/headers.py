"""Immutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]`` and the ``HeaderMultimap`` protocol.
Stores raw byte pairs the way ASGI does; decodes on access. Repeated
names are kept as separate pairs in arrival order, never joined.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence


def _encode(text: str) -> bytes:
    return text.encode("latin-1")


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        object.__setattr__(self, "_raw", tuple(raw))

    # -- Constructors --

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "Headers":
        """Build headers from ``(name, value)`` string pairs."""
        return cls((_encode(name.lower()), _encode(value)) for name, value in pairs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str | Sequence[str] | None]) -> "Headers":
        """Build headers from a mapping whose values may be lists.

        A list value contributes one pair per element, so
        ``{"set-cookie": ["a=1", "b=2"]}`` keeps both cookies.
        ``None`` values are skipped.
        """
        pairs: list[tuple[str, str]] = []
        for name, value in mapping.items():
            if value is None:
                continue
            if isinstance(value, str):
                pairs.append((name, value))
            else:
                pairs.extend((name, item) for item in value)
        return cls.from_pairs(pairs)

    # -- Mapping interface --

    def __getitem__(self, key: str) -> str:
        key_lower = _encode(key.lower())
        for name, value in self._raw:
            if name.lower() == key_lower:
                return value.decode("latin-1")
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = _encode(key.lower())
        return any(name.lower() == key_lower for name, _ in self._raw)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._raw:
            key = name.decode("latin-1").lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self.items_all() == other.items_all()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items_all())
        return f"Headers([{items}])"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (e.g. multiple ``Set-Cookie``)."""
        key_lower = _encode(key.lower())
        return [value.decode("latin-1") for name, value in self._raw if name.lower() == key_lower]

    def items_all(self) -> list[tuple[str, str]]:
        """Every ``(name, value)`` pair in order, names lower-cased."""
        return [
            (name.decode("latin-1").lower(), value.decode("latin-1")) for name, value in self._raw
        ]

    # -- Transformations --

    def with_header(self, name: str, value: str) -> "Headers":
        """Return new headers with one more ``name: value`` pair."""
        return Headers((*self._raw, (_encode(name.lower()), _encode(value))))

    def without(self, name: str) -> "Headers":
        """Return new headers with every pair for *name* removed."""
        key_lower = _encode(name.lower())
        return Headers(pair for pair in self._raw if pair[0].lower() != key_lower)

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Access raw header byte pairs for ASGI compatibility."""
        return self._raw
