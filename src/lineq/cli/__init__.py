"""
LINEQ CLI Package.

- equations.py: compile, eval, tokens, check, demo commands
- utils.py: Shared utilities (version, logging, error output)
"""

import sys

import typer

from lineq.cli.equations import (
    check_command,
    compile_command,
    demo_command,
    eval_command,
    tokens_command,
)
from lineq.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""LINEQ – linear equation compiler

Compiles "CALC<k> = <expr>" into a coefficient vector over IN slots
plus a constant.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """LINEQ CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="compile")(compile_command)
app.command(name="eval")(eval_command)
app.command(name="tokens")(tokens_command)
app.command(name="check")(check_command)
app.command(name="demo")(demo_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
