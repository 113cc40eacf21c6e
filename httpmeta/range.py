"""Parser for the ``Content-Range`` response header (byte units only).

Accepted forms::

    bytes <first>-<last>/<total>
    bytes <first>-<last>/*
    bytes */<total>
    bytes */*
"""

from __future__ import annotations

import logging
import re

from httpmeta.errors import ErrorKind, HeaderError
from httpmeta.formats.metadata import ContentRange, ExactRange, UnsatisfiedRange

logger = logging.getLogger(__name__)

_CONTENT_RANGE_RE = re.compile(
    r"bytes (?:(?P<first>[0-9]+)-(?P<last>[0-9]+)|(?P<wildcard>\*))/(?P<total>[0-9]+|\*)"
)


def _invalid(value: str, source: BaseException | None = None) -> HeaderError:
    return HeaderError(
        ErrorKind.MALFORMED_RANGE,
        "header content range is invalid",
        operation="parse_content_range_value",
        context={"value": value},
        source=source,
    )


def parse_content_range_value(value: str) -> ContentRange:
    """Parse a ``Content-Range`` value into an exact or unsatisfied range.

    Raises:
        HeaderError: ``MALFORMED_RANGE`` for a wrong unit, missing
            separators, non-numeric positions, inverted bounds, a range
            ending past the total size, or trailing garbage.
    """
    m = _CONTENT_RANGE_RE.fullmatch(value)
    if m is None:
        logger.debug("content range %r does not match grammar", value)
        raise _invalid(value)

    try:
        total = None if m["total"] == "*" else int(m["total"])
        if m["wildcard"]:
            return UnsatisfiedRange(total=total)
        return ExactRange(start=int(m["first"]), end=int(m["last"]), total=total)
    except ValueError as e:
        # ValidationError is a ValueError; so is int()'s digit-limit error.
        logger.debug("content range %r out of bounds: %s", value, e)
        raise _invalid(value, e) from e
