"""
LINEQ CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform

import typer
from rich.console import Console
from rich.markup import escape

from lineq._version import get_version
from lineq.core.errors import LineqError

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"LINEQ {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or the LOG_LEVEL environment variable."""
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def print_error(error: LineqError) -> None:
    """Print an error, with its source marker, to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
