"""CLI entry point for httpmeta."""

from __future__ import annotations

import click
from dotenv import load_dotenv

from httpmeta.commands.format.cmd import format_group
from httpmeta.commands.inspect.cmd import inspect
from httpmeta.helpers.console import setup_logging

load_dotenv()


@click.group()
@click.version_option(version="0.1.0", prog_name="httpmeta")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log header validation details")
def cli(verbose: bool) -> None:
    """Parse storage response headers and build request header values."""
    setup_logging(verbose)


cli.add_command(inspect)
cli.add_command(format_group)


if __name__ == "__main__":
    cli()
