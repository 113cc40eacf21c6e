"""Typed parsing of storage response headers and outbound header formatting."""

from __future__ import annotations

from httpmeta.errors import ErrorKind as ErrorKind
from httpmeta.errors import HeaderError as HeaderError
from httpmeta.format import format_authorization_by_basic as format_authorization_by_basic
from httpmeta.format import format_authorization_by_bearer as format_authorization_by_bearer
from httpmeta.format import format_content_md5 as format_content_md5
from httpmeta.format import format_http_date as format_http_date
from httpmeta.formats.headers import Header as Header
from httpmeta.formats.headers import HeaderLookup as HeaderLookup
from httpmeta.formats.headers import HeaderMap as HeaderMap
from httpmeta.formats.metadata import ContentRange as ContentRange
from httpmeta.formats.metadata import EntryMode as EntryMode
from httpmeta.formats.metadata import ExactRange as ExactRange
from httpmeta.formats.metadata import Metadata as Metadata
from httpmeta.formats.metadata import UnsatisfiedRange as UnsatisfiedRange
from httpmeta.parse import parse_content_disposition as parse_content_disposition
from httpmeta.parse import parse_content_length as parse_content_length
from httpmeta.parse import parse_content_md5 as parse_content_md5
from httpmeta.parse import parse_content_range as parse_content_range
from httpmeta.parse import parse_content_type as parse_content_type
from httpmeta.parse import parse_etag as parse_etag
from httpmeta.parse import parse_into_metadata as parse_into_metadata
from httpmeta.parse import parse_last_modified as parse_last_modified
from httpmeta.parse import parse_location as parse_location
from httpmeta.range import parse_content_range_value as parse_content_range_value

__all__ = [
    "ContentRange",
    "EntryMode",
    "ErrorKind",
    "ExactRange",
    "Header",
    "HeaderError",
    "HeaderLookup",
    "HeaderMap",
    "Metadata",
    "UnsatisfiedRange",
    "format_authorization_by_basic",
    "format_authorization_by_bearer",
    "format_content_md5",
    "format_http_date",
    "parse_content_disposition",
    "parse_content_length",
    "parse_content_md5",
    "parse_content_range",
    "parse_content_range_value",
    "parse_content_type",
    "parse_etag",
    "parse_into_metadata",
    "parse_last_modified",
    "parse_location",
]
