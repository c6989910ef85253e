import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from lineq.core.equation_lang.reducer import DivisionPolicy
from lineq.core.errors import ConfigError

DEFAULT_CONFIG_NAME = "lineq.toml"
DEFAULT_SLOTS = 8


@dataclass
class CompilerConfig:
    """Settings passed to every compile call."""

    slots: int = DEFAULT_SLOTS  # n, number of addressable IN slots
    division_by_zero: DivisionPolicy = DivisionPolicy.ZERO


@dataclass
class LineqConfig:
    """Contents of lineq.toml."""

    compiler: CompilerConfig = field(default_factory=CompilerConfig)
    equations: list[str] = field(default_factory=list)
    path: Path | None = None


def load_config(path: Path) -> LineqConfig:
    """
    Load lineq.toml.

    A missing file yields the defaults.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid settings
    """
    if not path.exists():
        return LineqConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    compiler_data = data.get("compiler", {})
    if not isinstance(compiler_data, dict):
        raise ConfigError("compiler must be a table")

    equations_data = data.get("equations", {})
    if not isinstance(equations_data, dict):
        raise ConfigError("equations must be a table")

    slots = compiler_data.get("slots", DEFAULT_SLOTS)
    if not isinstance(slots, int) or isinstance(slots, bool) or slots < 1:
        raise ConfigError(f"compiler.slots must be a positive integer, got {slots!r}")

    policy_name = compiler_data.get("division_by_zero", DivisionPolicy.ZERO.value)
    try:
        policy = DivisionPolicy(policy_name)
    except ValueError:
        choices = ", ".join(p.value for p in DivisionPolicy)
        raise ConfigError(
            f"compiler.division_by_zero must be one of: {choices}; got {policy_name!r}"
        ) from None

    lines = equations_data.get("lines", [])
    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        raise ConfigError("equations.lines must be a list of strings")

    return LineqConfig(
        compiler=CompilerConfig(slots=slots, division_by_zero=policy),
        equations=lines,
        path=path,
    )
