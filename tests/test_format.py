"""Tests for httpmeta/format.py."""

from datetime import datetime, timedelta, timezone

import pytest

from httpmeta.errors import ErrorKind, HeaderError
from httpmeta.format import (
    format_authorization_by_basic,
    format_authorization_by_bearer,
    format_content_md5,
    format_http_date,
)
from httpmeta.formats.headers import HeaderMap
from httpmeta.parse import parse_last_modified
from tests.conftest import DELETE_OBJECTS_BODY, DELETE_OBJECTS_MD5


class TestFormatContentMd5:
    def test_delete_objects_vector(self) -> None:
        assert format_content_md5(DELETE_OBJECTS_BODY) == DELETE_OBJECTS_MD5

    def test_empty_body(self) -> None:
        assert format_content_md5(b"") == "1B2M2Y8AsgTpgAmY7PhCfg=="

    def test_stable(self) -> None:
        assert format_content_md5(b"hello world") == "XrY7u+Ae7tCTyyK7j1rNww=="
        assert format_content_md5(b"hello world") == format_content_md5(b"hello world")


class TestFormatAuthorizationByBasic:
    def test_rfc_and_mdn_cases(self) -> None:
        """Cases from RFC 2617 section 2 and the MDN Authorization page."""
        cases = [
            ("aladdin", "opensesame", "Basic YWxhZGRpbjpvcGVuc2VzYW1l"),
            ("aladdin", "", "Basic YWxhZGRpbjo="),
            ("Aladdin", "open sesame", "Basic QWxhZGRpbjpvcGVuIHNlc2FtZQ=="),
            ("Aladdin", "", "Basic QWxhZGRpbjo="),
        ]
        for username, password, expected in cases:
            assert format_authorization_by_basic(username, password) == expected

    def test_empty_username(self) -> None:
        with pytest.raises(HeaderError) as exc_info:
            format_authorization_by_basic("", "x")
        err = exc_info.value
        assert err.kind is ErrorKind.INVALID_CREDENTIAL
        assert err.operation == "format_authorization_by_basic"

    def test_whitespace_username_allowed(self) -> None:
        assert format_authorization_by_basic(" ", "") == "Basic IDo="


class TestFormatAuthorizationByBearer:
    def test_rfc6750_token(self) -> None:
        assert format_authorization_by_bearer("mF_9.B5f-4.1JqM") == "Bearer mF_9.B5f-4.1JqM"

    def test_token_not_escaped(self) -> None:
        assert format_authorization_by_bearer("a b=c") == "Bearer a b=c"

    def test_empty_token(self) -> None:
        with pytest.raises(HeaderError) as exc_info:
            format_authorization_by_bearer("")
        assert exc_info.value.kind is ErrorKind.INVALID_CREDENTIAL


class TestFormatHttpDate:
    def test_utc(self) -> None:
        dt = datetime(2019, 10, 29, 8, 0, 0, tzinfo=timezone.utc)
        assert format_http_date(dt) == "Tue, 29 Oct 2019 08:00:00 GMT"

    def test_converts_offset_to_gmt(self) -> None:
        dt = datetime(2019, 10, 29, 16, 0, 0, tzinfo=timezone(timedelta(hours=8)))
        assert format_http_date(dt) == "Tue, 29 Oct 2019 08:00:00 GMT"

    def test_naive_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_http_date(datetime(2019, 10, 29, 8, 0, 0))

    def test_parses_back(self) -> None:
        dt = datetime(2024, 6, 15, 10, 0, 0, tzinfo=timezone.utc)
        headers = HeaderMap({"Last-Modified": format_http_date(dt)})
        assert parse_last_modified(headers) == dt
