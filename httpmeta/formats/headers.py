"""Header collection types consumed by the parsers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol

from pydantic import BaseModel


class Header(BaseModel):
    name: str
    value: str


class HeaderLookup(Protocol):
    """Anything that can answer a case-insensitive header lookup."""

    def get(self, name: str, /) -> bytes | None: ...


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


class HeaderMap(Mapping[str, bytes]):
    """Immutable, case-insensitive mapping from header name to raw value.

    The first occurrence of a repeated name wins. ``str`` values are
    stored UTF-8 encoded, ``bytes`` values verbatim, so invalid byte
    sequences survive until a parser looks at them.
    """

    __slots__ = ("_items",)

    def __init__(
        self,
        headers: Mapping[str, str | bytes]
        | Iterable[tuple[str, str | bytes]]
        | None = None,
    ) -> None:
        pairs = headers.items() if isinstance(headers, Mapping) else headers or ()
        items: dict[str, tuple[str, bytes]] = {}
        for name, value in pairs:
            key = name.lower()
            if key not in items:
                items[key] = (name, _to_bytes(value))
        self._items = items

    @classmethod
    def from_headers(cls, headers: Iterable[Header]) -> HeaderMap:
        """Build from a list of ``Header`` models (e.g. read from a HAR file)."""
        return cls((h.name, h.value) for h in headers)

    @classmethod
    def from_raw(cls, raw: bytes) -> HeaderMap:
        """Build from a raw HTTP header block."""
        from httpmeta.helpers.http import parse_header_block

        return cls(parse_header_block(raw))

    def __getitem__(self, name: str) -> bytes:
        return self._items[name.lower()][1]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.lower() in self._items

    def __iter__(self) -> Iterator[str]:
        for original, _ in self._items.values():
            yield original

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._items.values())
        return f"HeaderMap({{{items}}})"
