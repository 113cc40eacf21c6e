"""CLI commands for building outbound header values."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import BinaryIO

import click
from rich.markup import escape

from httpmeta.errors import HeaderError
from httpmeta.format import (
    format_authorization_by_basic,
    format_authorization_by_bearer,
    format_content_md5,
)
from httpmeta.helpers.console import console


@click.group("format")
def format_group() -> None:
    """Build Content-MD5 and Authorization header values."""


@format_group.command()
@click.argument("body_file", type=click.File("rb"))
def md5(body_file: BinaryIO) -> None:
    """Print the Content-MD5 value of a file (use '-' for stdin)."""
    click.echo(format_content_md5(body_file.read()))


@format_group.command()
@click.option("--username", envvar="HTTPMETA_USERNAME", default="", help="Username (env: HTTPMETA_USERNAME)")
@click.option("--password", envvar="HTTPMETA_PASSWORD", default="", help="Password (env: HTTPMETA_PASSWORD)")
def basic(username: str, password: str) -> None:
    """Print a Basic Authorization value."""
    _emit(lambda: format_authorization_by_basic(username, password))


@format_group.command()
@click.option("--token", envvar="HTTPMETA_TOKEN", default="", help="Bearer token (env: HTTPMETA_TOKEN)")
def bearer(token: str) -> None:
    """Print a Bearer Authorization value."""
    _emit(lambda: format_authorization_by_bearer(token))


def _emit(build: Callable[[], str]) -> None:
    try:
        value = build()
    except HeaderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    click.echo(value)
