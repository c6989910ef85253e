"""
Equation commands for LINEQ CLI.

Commands for compiling and evaluating linear equations:
- compile: Reduce one equation to canonical affine form
- eval: Compile and evaluate against input values
- tokens: Dump the token stream of an equation
- check: Compile every equation listed in lineq.toml
- demo: Compile the built-in reference equations
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from lineq.cli.utils import console, print_error
from lineq.core.config import DEFAULT_CONFIG_NAME, CompilerConfig, LineqConfig, load_config
from lineq.core.equation_lang import (
    DivisionPolicy,
    compile_all,
    compile_equation,
    evaluate,
    format_equation,
    tokenize,
)
from lineq.core.equation_lang.renderer import format_number
from lineq.core.errors import LineqError
from lineq.core.ir import Equation, is_real_zero

DEMO_EQUATIONS: list[str] = [
    "CALC4 = 3.15",
    "CALC4 = 2 * 3.15",
    "CALC4 = 10 / 5 + 3",
    "CALC4 = 30 / 5 / 3",
    "CALC4 = 30 / (1 + 1)",
    "CALC4 = 30 / 5 / (1 + 1)",
    "CALC4 = -IN2",
    "CALC4 = --IN2",
    "CALC4 = --(IN2)",
    "CALC4 = -(IN2 + 5)",
    "CALC4 = IN2 + 1 - 3",
    "CALC4 = 3.15 * IN3",
    "CALC4 = IN3 * 3.15",
    "CALC4 = 2 * IN3 * 3",
    "CALC4 = (24 * IN3 * 2) / 3",
    "CALC4 = 2 * (24 * IN3 * 2) / 3",
    "CALC4 = (IN2 + IN3 + IN4) / 3",
    "CALC4 = (IN2 + IN3 + IN4 + 2 * IN5) / 4",
    "CALC4 = 3 + (IN2 + IN3 + IN4 + IN5) / 4",
    "CALC4 = (IN2 + IN3 + 8) / 2",
    "CALC4 = (IN2 + 3 + IN3 + 5) / 2",
    "CALC4 = ((IN2 + 3) + (IN3 + 5)) / 2",
    "CALC4 = 4.68 + ((IN2 + 3) + (IN3 + 5)) / 2",
    "CALC4 = ((IN2 + 3) + (IN3 + 5)) / 2 + 4.68",
]


# =============================================================================
# Helper Functions
# =============================================================================


def _load_or_exit(config_path: Path) -> LineqConfig:
    try:
        return load_config(config_path)
    except LineqError as e:
        print_error(e)
        raise typer.Exit(1)


def _resolve_settings(
    loaded: LineqConfig, slots: int | None, strict_division: bool
) -> CompilerConfig:
    """Merge lineq.toml compiler settings with command-line overrides."""
    settings = loaded.compiler

    if slots is not None:
        if slots < 1:
            raise typer.BadParameter("must be a positive integer", param_hint="--slots")
        settings.slots = slots
    if strict_division:
        settings.division_by_zero = DivisionPolicy.ERROR
    return settings


def _compile_or_exit(text: str, settings: CompilerConfig) -> Equation:
    try:
        return compile_equation(text, settings.slots, settings.division_by_zero)
    except LineqError as e:
        print_error(e)
        raise typer.Exit(1)


def _coefficient_table(equation: Equation) -> Table:
    table = Table(title=equation.target_name)
    table.add_column("Term", style="cyan")
    table.add_column("Value", justify="right")
    for i, a in enumerate(equation.coefficients):
        if not is_real_zero(a):
            table.add_row(f"IN{i + 1}", format_number(a))
    table.add_row("constant", format_number(equation.constant))
    return table


def _parse_assignment(assignment: str) -> tuple[str, float]:
    """Parse ``IN2=3.5``."""
    name, sep, value = assignment.partition("=")
    if not sep:
        raise typer.BadParameter(f"expected IN<d>=VALUE, got {assignment!r}")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise typer.BadParameter(f"not a number: {value!r}") from None


# =============================================================================
# Commands
# =============================================================================

_SLOTS_OPTION = typer.Option(
    None, "--slots", "-n", help="Number of IN slots (default: from lineq.toml or 8)"
)
_STRICT_OPTION = typer.Option(
    False, "--strict-division", help="Fail on division by zero instead of zeroing"
)
_CONFIG_OPTION = typer.Option(
    Path(DEFAULT_CONFIG_NAME), "--config", "-c", help="Path to lineq.toml"
)


def compile_command(
    equation: str = typer.Argument(..., help='Equation, e.g. "CALC4 = (IN2 + IN3) / 2"'),
    slots: int | None = _SLOTS_OPTION,
    strict_division: bool = _STRICT_OPTION,
    config: Path = _CONFIG_OPTION,
) -> None:
    """Reduce an equation to canonical affine form."""
    settings = _resolve_settings(_load_or_exit(config), slots, strict_division)
    compiled = _compile_or_exit(equation, settings)

    console.print(escape(format_equation(compiled)))
    console.print(_coefficient_table(compiled))


def eval_command(
    equation: str = typer.Argument(..., help="Equation to compile"),
    assignments: list[str] = typer.Argument(None, help="Input values as IN<d>=VALUE"),
    slots: int | None = _SLOTS_OPTION,
    strict_division: bool = _STRICT_OPTION,
    config: Path = _CONFIG_OPTION,
) -> None:
    """Compile an equation and evaluate it for the given inputs."""
    settings = _resolve_settings(_load_or_exit(config), slots, strict_division)
    compiled = _compile_or_exit(equation, settings)

    inputs = dict(_parse_assignment(a) for a in assignments or [])
    try:
        result = evaluate(compiled, inputs)
    except LineqError as e:
        print_error(e)
        raise typer.Exit(1)

    console.print(f"{compiled.target_name} = {format_number(result)}")


def tokens_command(
    text: str = typer.Argument(..., help="Text to tokenize"),
) -> None:
    """Dump the token stream of an equation."""
    try:
        tokens = tokenize(text)
    except LineqError as e:
        print_error(e)
        raise typer.Exit(1)

    table = Table(title="Tokens")
    table.add_column("Pos", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Text")
    for tok in tokens:
        table.add_row(str(tok.pos), tok.kind.value, escape(str(tok)))
    console.print(table)


def check_command(
    config: Path = _CONFIG_OPTION,
    slots: int | None = _SLOTS_OPTION,
    strict_division: bool = _STRICT_OPTION,
) -> None:
    """Compile every equation listed under [equations] in lineq.toml."""
    if not config.exists():
        console.print(f"[red]Error: {escape(str(config))} not found[/red]")
        raise typer.Exit(1)

    loaded = _load_or_exit(config)
    settings = _resolve_settings(loaded, slots, strict_division)
    lines = loaded.equations
    if not lines:
        console.print("[yellow]No equations configured[/yellow]")
        return

    try:
        equations = compile_all(lines, settings.slots, settings.division_by_zero)
    except LineqError as e:
        print_error(e)
        raise typer.Exit(1)

    for compiled in equations:
        console.print(escape(format_equation(compiled)))
    console.print(f"[green]✓[/green] {len(equations)} equations compiled")


def demo_command(
    slots: int = typer.Option(8, "--slots", "-n", help="Number of IN slots"),
) -> None:
    """Compile the built-in reference equations."""
    table = Table(title="Reference equations")
    table.add_column("#", justify="right")
    table.add_column("Source")
    table.add_column("Canonical form", style="cyan")

    for i, text in enumerate(DEMO_EQUATIONS):
        try:
            compiled = compile_equation(text, slots)
        except LineqError as e:
            print_error(e)
            raise typer.Exit(1)
        table.add_row(str(i), escape(text), escape(format_equation(compiled)))

    console.print(table)
