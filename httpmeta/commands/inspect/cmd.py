"""CLI commands for inspecting response headers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import BinaryIO

import click
from rich.markup import escape

from httpmeta.errors import HeaderError
from httpmeta.formats.headers import HeaderMap
from httpmeta.formats.metadata import Metadata
from httpmeta.helpers.console import console


@click.group()
def inspect() -> None:
    """Assemble storage metadata from response headers."""


@inspect.command()
@click.argument("headers_file", type=click.File("rb"))
@click.option("--path", default="", help="Resource path; a trailing '/' marks a directory")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table")
def headers(headers_file: BinaryIO, path: str, as_json: bool) -> None:
    """Parse a raw header block (use '-' for stdin).

    \b
    Examples:
      curl -sI https://host/bucket/key | httpmeta inspect headers - --path key
      httpmeta inspect headers response.txt --path dir/ --json
    """
    from httpmeta.commands.inspect.render import metadata_table
    from httpmeta.parse import parse_into_metadata

    header_map = HeaderMap.from_raw(headers_file.read())
    try:
        meta = parse_into_metadata(path, header_map)
    except HeaderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(meta.model_dump_json(indent=2))
    else:
        console.print(metadata_table(meta, title=path or "Metadata"))


@inspect.command()
@click.argument("har_path", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table")
def har(har_path: str, as_json: bool) -> None:
    """Assemble metadata for every response in a HAR file."""
    from httpmeta.commands.inspect.render import summary_table
    from httpmeta.har import load_har_responses
    from httpmeta.parse import parse_into_metadata

    responses = load_har_responses(Path(har_path))

    rows: list[tuple[str, str, int, Metadata | str]] = []
    failures = 0
    for resp in responses:
        try:
            result: Metadata | str = parse_into_metadata(resp.path, resp.header_map())
        except HeaderError as e:
            result = str(e)
            failures += 1
        rows.append((resp.entry_id, resp.path, resp.status, result))

    if as_json:
        out = [
            {
                "id": entry_id,
                "path": path,
                "status": status,
                **(
                    {"error": result}
                    if isinstance(result, str)
                    else {"metadata": result.model_dump(mode="json", exclude_none=True)}
                ),
            }
            for entry_id, path, status, result in rows
        ]
        click.echo(json.dumps(out, indent=2))
    else:
        console.print(summary_table(rows))
        console.print(f"  {len(rows)} responses, {failures} with invalid headers")
