"""Shared console and utilities for CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def truncate(s: str, max_len: int) -> str:
    """Truncate a string to max_len, adding '...' if needed."""
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def setup_logging(verbose: bool = False) -> None:
    """Route library log records through rich on the shared console."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
