"""HTTP header utilities."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def parse_header_block(raw: bytes) -> list[tuple[str, bytes]]:
    """Split a raw HTTP header block into (name, value) pairs.

    Accepts an optional leading status line, CRLF or LF line endings and
    obsolete line folding. Stops at the first blank line after headers
    have started, since anything after it is the body. Values keep their
    raw bytes; only surrounding whitespace is stripped.
    """
    pairs: list[tuple[str, bytes]] = []
    for line in raw.splitlines():
        if not line.strip():
            if pairs:
                break
            continue
        if line[:1] in (b" ", b"\t"):
            if pairs:
                name, value = pairs[-1]
                pairs[-1] = (name, value + b" " + line.strip(b" \t"))
            continue
        if not pairs and line.startswith(b"HTTP/"):
            continue
        name, sep, value = line.partition(b":")
        if not sep or not name.strip():
            logger.debug("skipping malformed header line: %r", line)
            continue
        pairs.append((name.strip().decode("latin-1"), value.strip(b" \t")))
    return pairs
