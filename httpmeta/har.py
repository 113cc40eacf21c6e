"""Read response headers out of HAR (HTTP Archive) recordings."""

from __future__ import annotations

import json
from pathlib import Path
from urllib.parse import urlparse

from pydantic import BaseModel, Field

from httpmeta.formats.headers import Header, HeaderMap


class HarResponse(BaseModel):
    """The parts of one HAR entry needed to assemble metadata."""

    entry_id: str
    method: str = "GET"
    url: str = ""
    status: int = 0
    headers: list[Header] = Field(default_factory=list)

    @property
    def path(self) -> str:
        return urlparse(self.url).path

    def header_map(self) -> HeaderMap:
        return HeaderMap.from_headers(self.headers)


def load_har_responses(har_path: Path) -> list[HarResponse]:
    """Load every entry's response headers from a HAR file."""
    with open(har_path) as f:
        har = json.load(f)

    log = har.get("log", har)
    responses: list[HarResponse] = []
    for i, entry in enumerate(log.get("entries", [])):
        req = entry.get("request", {})
        resp = entry.get("response", {})
        responses.append(
            HarResponse(
                entry_id=f"t_{i + 1:04d}",
                method=req.get("method", "GET"),
                url=req.get("url", ""),
                status=resp.get("status", 0),
                headers=[
                    Header(name=h["name"], value=h["value"])
                    for h in resp.get("headers", [])
                ],
            )
        )
    return responses
