"""Outbound header values: content digest, authorization, HTTP dates."""

from __future__ import annotations

import base64
import hashlib
from datetime import datetime, timezone
from email.utils import format_datetime

from httpmeta.errors import ErrorKind, HeaderError


def format_content_md5(body: bytes) -> str:
    """Base64 of the MD5 digest of *body*, as sent in ``Content-MD5``.

    MD5 is what storage services expect here; it is an integrity check,
    not a security measure.
    """
    digest = hashlib.md5(body, usedforsecurity=False).digest()
    return base64.b64encode(digest).decode("ascii")


def format_authorization_by_basic(username: str, password: str) -> str:
    """Build a ``Basic`` authorization value.

    An empty password is allowed.

    Raises:
        HeaderError: ``INVALID_CREDENTIAL`` if *username* is empty.
    """
    if not username:
        raise HeaderError(
            ErrorKind.INVALID_CREDENTIAL,
            "can't build authorization header with empty username",
            operation="format_authorization_by_basic",
        )
    value = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {value}"


def format_authorization_by_bearer(token: str) -> str:
    """Build a ``Bearer`` authorization value; the token is used verbatim.

    Raises:
        HeaderError: ``INVALID_CREDENTIAL`` if *token* is empty.
    """
    if not token:
        raise HeaderError(
            ErrorKind.INVALID_CREDENTIAL,
            "can't build authorization header with empty token",
            operation="format_authorization_by_bearer",
        )
    return f"Bearer {token}"


def format_http_date(dt: datetime) -> str:
    """Format an aware datetime as ``Tue, 29 Oct 2019 08:00:00 GMT``."""
    if dt.tzinfo is None:
        raise ValueError("format_http_date requires a timezone-aware datetime")
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)
