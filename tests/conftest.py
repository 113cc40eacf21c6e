"""Shared test fixtures for httpmeta tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from httpmeta.formats.headers import HeaderMap

# Test vector from the S3 DeleteObjects API documentation.
DELETE_OBJECTS_BODY = b"""<Delete>
<Object>
 <Key>sample1.txt</Key>
 </Object>
 <Object>
   <Key>sample2.txt</Key>
 </Object>
 </Delete>"""
DELETE_OBJECTS_MD5 = "WOctCY1SS662e7ziElh4cw=="


@pytest.fixture
def full_headers() -> HeaderMap:
    """A response carrying every header the assembler understands."""
    return HeaderMap(
        {
            "Content-Length": "500",
            "Content-Type": "text/plain; charset=utf-8",
            "Content-Range": "bytes 0-499/1234",
            "ETag": '"5d8c72a5edda8d6a"',
            "Content-MD5": "1B2M2Y8AsgTpgAmY7PhCfg==",
            "Last-Modified": "Tue, 29 Oct 2019 08:00:00 GMT",
            "Content-Disposition": 'attachment; filename="report.txt"',
            "X-Amz-Request-Id": "4442587FB7D0A2F9",
        }
    )


@pytest.fixture
def invalid_utf8() -> bytes:
    return b"\xff\xfe\xfa"


def make_har_entry(
    url: str,
    status: int = 200,
    headers: dict[str, str] | None = None,
    method: str = "GET",
) -> dict:
    """Helper to create one HAR entry with minimal boilerplate."""
    return {
        "startedDateTime": "2026-02-13T15:30:00.000Z",
        "time": 150,
        "request": {
            "method": method,
            "url": url,
            "httpVersion": "HTTP/1.1",
            "headers": [],
            "queryString": [],
            "cookies": [],
            "headersSize": -1,
            "bodySize": 0,
        },
        "response": {
            "status": status,
            "statusText": "OK" if status < 400 else "Error",
            "httpVersion": "HTTP/1.1",
            "headers": [{"name": k, "value": v} for k, v in (headers or {}).items()],
            "cookies": [],
            "content": {"size": 0, "mimeType": ""},
            "redirectURL": "",
            "headersSize": -1,
            "bodySize": 0,
        },
        "cache": {},
        "timings": {"send": 1, "wait": 120, "receive": 12},
    }


@pytest.fixture
def sample_har(tmp_path: Path) -> Path:
    """A HAR file with a file, a directory listing and one bad response."""
    har = {
        "log": {
            "version": "1.2",
            "creator": {"name": "Chrome", "version": "133.0"},
            "entries": [
                make_har_entry(
                    "https://storage.example.com/bucket/data/report.csv",
                    headers={
                        "Content-Length": "2048",
                        "Content-Type": "text/csv",
                        "ETag": '"abc123"',
                        "Last-Modified": "Wed, 15 Jan 2025 10:00:00 GMT",
                    },
                ),
                make_har_entry(
                    "https://storage.example.com/bucket/data/",
                    headers={"Content-Type": "application/xml"},
                ),
                make_har_entry(
                    "https://storage.example.com/bucket/broken.bin",
                    headers={"Content-Length": "-1"},
                ),
            ],
        }
    }
    path = tmp_path / "capture.har"
    path.write_text(json.dumps(har))
    return path
