"""
Error types for LINEQ equation tokenizing, reduction, and compilation.
"""

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Source location for an error inside a single equation string.

    Attributes:
        source: The full equation text being compiled
        pos: Zero-based character offset of the failure
        index: Optional position of the equation inside a batch
    """

    source: str
    pos: int
    index: int | None = None

    @property
    def column(self) -> int:
        """1-indexed column of the failure."""
        return self.pos + 1

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "equation #2, column 9" followed by the
            source line and a marker under the failing column
        """
        location = f"column {self.column}"
        if self.index is not None:
            location = f"equation #{self.index + 1}, {location}"
        return f"{location}\n{self._format_snippet()}"

    def _format_snippet(self) -> str:
        """Format the source line with an error marker underneath."""
        prefix = "  | "
        marker = " " * (len(prefix) + self.pos) + "^"
        return f"{prefix}{self.source}\n{marker}"


class LineqError(Exception):
    """Base exception for all LINEQ errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    @property
    def pos(self) -> int | None:
        return self.context.pos if self.context else None

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message

    def with_context(self, context: ErrorContext) -> "LineqError":
        """Attach (or replace) context and refresh the formatted message."""
        self.context = context
        self.args = (self._format_message(),)
        return self


class ParseError(LineqError):
    """
    Raised when an equation string cannot be compiled.

    All parse errors are terminal: no partial equation is produced.
    """

    pass


class TokenizeError(ParseError):
    """
    Raised when the input cannot be split into tokens.

    Examples:
    - Unrecognized character sequence
    - Numeric literal longer than the scan buffer
    - Malformed IN/CALC identifier
    """

    pass


class UnexpectedToken(ParseError):
    """
    Raised on a grammar violation.

    Examples:
    - Missing CALC target or '='
    - Missing closing ')'
    - Operator where a term was expected
    - Trailing tokens after the right-hand side
    """

    pass


class InputIndexOutOfRange(ParseError):
    """Raised when IN<d> addresses a slot beyond the configured slot count."""

    pass


class NonLinearTerm(ParseError):
    """Raised when both operands of '*' or '/' carry input coefficients."""

    pass


class DivisionByZeroError(ParseError):
    """Raised on division by a zero constant under the strict division policy."""

    pass


class DuplicateTargetError(LineqError):
    """Raised when a batch assigns the same CALC target twice."""

    pass


class EvaluationError(LineqError):
    """Raised when a compiled equation cannot be evaluated against inputs."""

    pass


class ConfigError(LineqError):
    """Raised when lineq.toml holds invalid settings."""

    pass


def make_parse_error(
    cls: type[ParseError],
    message: str,
    source: str,
    pos: int,
) -> ParseError:
    """
    Helper to create a ParseError subclass with context.

    Args:
        cls: Concrete ParseError subclass to raise
        message: Error description
        source: Equation text
        pos: Zero-based offset of the failure

    Returns:
        Error instance with context attached
    """
    return cls(message, ErrorContext(source=source, pos=pos))
