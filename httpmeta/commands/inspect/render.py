"""Rich rendering of assembled metadata."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from httpmeta.format import format_http_date
from httpmeta.formats.metadata import Metadata
from httpmeta.helpers.console import truncate


def metadata_rows(meta: Metadata) -> list[tuple[str, str]]:
    """Field/value pairs for the fields that are set, in header order."""
    rows = [("Mode", meta.mode.value)]
    if meta.content_length is not None:
        rows.append(("Content-Length", str(meta.content_length)))
    if meta.content_type is not None:
        rows.append(("Content-Type", meta.content_type))
    if meta.content_range is not None:
        rows.append(("Content-Range", meta.content_range.to_header()))
    if meta.etag is not None:
        rows.append(("ETag", meta.etag))
    if meta.content_md5 is not None:
        rows.append(("Content-MD5", meta.content_md5))
    if meta.last_modified is not None:
        rows.append(("Last-Modified", format_http_date(meta.last_modified)))
    if meta.content_disposition is not None:
        rows.append(("Content-Disposition", meta.content_disposition))
    return rows


def metadata_table(meta: Metadata, title: str = "Metadata") -> Table:
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in metadata_rows(meta):
        table.add_row(name, Text(value))
    return table


def summary_table(rows: list[tuple[str, str, int, Metadata | str]]) -> Table:
    """One row per HAR entry; failed entries show their error instead."""
    table = Table(title="Responses")
    table.add_column("ID", style="cyan")
    table.add_column("Path")
    table.add_column("Status", justify="right")
    table.add_column("Mode")
    table.add_column("Length", justify="right")
    table.add_column("Type")
    table.add_column("ETag")

    for entry_id, path, status, result in rows:
        if isinstance(result, str):
            table.add_row(
                entry_id, truncate(path, 50), str(status), Text(result, style="red"), "", "", ""
            )
            continue
        table.add_row(
            entry_id,
            truncate(path, 50),
            str(status),
            result.mode.value,
            "" if result.content_length is None else str(result.content_length),
            result.content_type or "",
            result.etag or "",
        )
    return table
