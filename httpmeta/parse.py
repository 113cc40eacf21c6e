"""Typed extraction of standard HTTP response headers.

Each ``parse_*`` function looks up one header. A missing header yields
``None``; a present but invalid one raises ``HeaderError`` tagged with
the function's name. ``parse_into_metadata`` folds all of them into a
single ``Metadata`` record.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from httpmeta.errors import ErrorKind, HeaderError
from httpmeta.formats.headers import HeaderLookup
from httpmeta.formats.metadata import U64_MAX, ContentRange, EntryMode, Metadata
from httpmeta.range import parse_content_range_value

logger = logging.getLogger(__name__)

LOCATION = "Location"
CONTENT_LENGTH = "Content-Length"
CONTENT_MD5 = "Content-MD5"
CONTENT_TYPE = "Content-Type"
CONTENT_RANGE = "Content-Range"
LAST_MODIFIED = "Last-Modified"
ETAG = "ETag"
CONTENT_DISPOSITION = "Content-Disposition"

_DECIMAL_RE = re.compile(r"\+?[0-9]+")

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_RFC2822_RE = re.compile(
    r"(?:(?P<weekday>Mon|Tue|Wed|Thu|Fri|Sat|Sun), ?)?"
    r"[0-9]{1,2} (?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) [0-9]{4} "
    r"[0-9]{2}:[0-9]{2}(?::[0-9]{2})? "
    r"(?:[+-][0-9]{4}|GMT|UT|EST|EDT|CST|CDT|MST|MDT|PST|PDT)"
)


def _header_str(headers: HeaderLookup, name: str, operation: str) -> str | None:
    """Look up *name* and decode it as UTF-8."""
    raw = headers.get(name)
    if raw is None:
        return None
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("%s: %s is not valid utf-8", operation, name)
        raise HeaderError(
            ErrorKind.INVALID_ENCODING,
            "header value is not valid utf-8 string",
            operation=operation,
            source=e,
        ) from e


def parse_location(headers: HeaderLookup) -> str | None:
    """Parse the redirect target.

    The value may be a relative path such as ``/index.html``.
    """
    return _header_str(headers, LOCATION, "parse_location")


def parse_content_length(headers: HeaderLookup) -> int | None:
    v = _header_str(headers, CONTENT_LENGTH, "parse_content_length")
    if v is None:
        return None
    digits = v.lstrip("+").lstrip("0")
    if _DECIMAL_RE.fullmatch(v) is None or len(digits) > 20 or int(digits or "0") > U64_MAX:
        logger.debug("parse_content_length: %r is not an unsigned 64-bit integer", v)
        raise HeaderError(
            ErrorKind.INVALID_INTEGER,
            "header value is not valid integer",
            operation="parse_content_length",
            context={"value": v},
        )
    return int(digits or "0")


def parse_content_md5(headers: HeaderLookup) -> str | None:
    return _header_str(headers, CONTENT_MD5, "parse_content_md5")


def parse_content_type(headers: HeaderLookup) -> str | None:
    return _header_str(headers, CONTENT_TYPE, "parse_content_type")


def parse_content_range(headers: HeaderLookup) -> ContentRange | None:
    """Parse ``Content-Range``; grammar errors propagate from the range parser."""
    v = _header_str(headers, CONTENT_RANGE, "parse_content_range")
    if v is None:
        return None
    return parse_content_range_value(v)


def _invalid_timestamp(v: str, source: BaseException | None = None) -> HeaderError:
    logger.debug("parse_last_modified: %r is not an rfc2822 time", v)
    return HeaderError(
        ErrorKind.INVALID_TIMESTAMP,
        "header value is not valid rfc2822 time",
        operation="parse_last_modified",
        context={"value": v},
        source=source,
    )


def parse_last_modified(headers: HeaderLookup) -> datetime | None:
    """Parse ``Last-Modified`` (e.g. ``Tue, 29 Oct 2019 08:00:00 GMT``).

    A zone is required. The offset on the wire is preserved; ``-0000``
    (offset unknown) maps to UTC. A weekday that doesn't match the date
    is rejected.
    """
    v = _header_str(headers, LAST_MODIFIED, "parse_last_modified")
    if v is None:
        return None
    m = _RFC2822_RE.fullmatch(v)
    if m is None:
        raise _invalid_timestamp(v)
    try:
        t = parsedate_to_datetime(v)
    except (TypeError, ValueError) as e:
        raise _invalid_timestamp(v, e) from e
    if m["weekday"] and _WEEKDAYS.index(m["weekday"]) != t.weekday():
        raise _invalid_timestamp(v)
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    return t


def parse_etag(headers: HeaderLookup) -> str | None:
    """Parse ``ETag``, keeping quotes and any ``W/`` prefix."""
    return _header_str(headers, ETAG, "parse_etag")


def parse_content_disposition(headers: HeaderLookup) -> str | None:
    return _header_str(headers, CONTENT_DISPOSITION, "parse_content_disposition")


def parse_into_metadata(path: str, headers: HeaderLookup) -> Metadata:
    """Parse standard HTTP headers into ``Metadata``.

    A path ending with ``/`` is a directory, anything else a file. Only
    the standard headers are handled here; services with their own
    headers should layer them on with ``Metadata.with_updates``. The
    first invalid header aborts parsing and its error is raised as is.
    """
    mode = EntryMode.DIR if path.endswith("/") else EntryMode.FILE

    fields = {
        "content_length": parse_content_length(headers),
        "content_type": parse_content_type(headers),
        "content_range": parse_content_range(headers),
        "etag": parse_etag(headers),
        "content_md5": parse_content_md5(headers),
        "last_modified": parse_last_modified(headers),
        "content_disposition": parse_content_disposition(headers),
    }

    return Metadata(mode=mode, **{k: v for k, v in fields.items() if v is not None})
