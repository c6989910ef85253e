"""Core LINEQ functionality: IR, equation language, configuration, errors."""

from . import ir
from .config import CompilerConfig, LineqConfig, load_config
from .errors import (
    ConfigError,
    DivisionByZeroError,
    DuplicateTargetError,
    ErrorContext,
    EvaluationError,
    InputIndexOutOfRange,
    LineqError,
    NonLinearTerm,
    ParseError,
    TokenizeError,
    UnexpectedToken,
)

__all__ = [
    "ir",
    "CompilerConfig",
    "LineqConfig",
    "load_config",
    "LineqError",
    "ParseError",
    "TokenizeError",
    "UnexpectedToken",
    "InputIndexOutOfRange",
    "NonLinearTerm",
    "DivisionByZeroError",
    "DuplicateTargetError",
    "EvaluationError",
    "ConfigError",
    "ErrorContext",
]
