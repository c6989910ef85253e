"""
Tokenizer for LINEQ equation strings.

Tokens are produced one at a time from a ``Cursor`` so that the reducer can
save and restore its position for one-token lookahead.
"""

from __future__ import annotations

from enum import StrEnum, auto

from lineq.core.errors import TokenizeError, make_parse_error


class TokenKind(StrEnum):
    """Token types for the equation language."""

    # Operators
    EQUALS = auto()
    STAR = auto()
    SLASH = auto()
    PLUS = auto()
    MINUS = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Literals and references
    REAL = auto()
    IN = auto()
    CALC = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the equation tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: float | int | None, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"

    def __str__(self) -> str:
        if self.kind == TokenKind.REAL:
            return repr(self.value)
        if self.kind == TokenKind.IN:
            return f"IN{self.value + 1}"
        if self.kind == TokenKind.CALC:
            return f"CALC{self.value + 1}"
        if self.kind == TokenKind.EOF:
            return "end of input"
        return _PUNCTUATION_TEXT[self.kind]


class Cursor:
    """Forward-only position over an equation string."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def remaining(self) -> int:
        return len(self.text) - self.pos

    def save(self) -> int:
        return self.pos

    def restore(self, mark: int) -> None:
        self.pos = mark

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, remaining={self.remaining})"


_WHITESPACE = " \t"

_SINGLE_MAP: dict[str, TokenKind] = {
    "=": TokenKind.EQUALS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_PUNCTUATION_TEXT: dict[TokenKind, str] = {kind: c for c, kind in _SINGLE_MAP.items()}

# Characters accepted by the numeric scan; signs are only reached mid-literal
# because single-character operators are matched first.
_REAL_CHARS = frozenset("0123456789.+-")

# Longest numeric literal accepted, in characters.
MAX_LITERAL_LENGTH = 31

# Identifier prefixes in resolution order.
_IDENT_PREFIXES: tuple[tuple[str, TokenKind], ...] = (
    ("IN", TokenKind.IN),
    ("CALC", TokenKind.CALC),
)


def next_token(cursor: Cursor) -> Token:
    """Scan the next token and advance the cursor past it.

    Returns an EOF token once only whitespace remains.

    Raises:
        TokenizeError: If no token can be recognized at the cursor.
    """
    cursor.skip_whitespace()
    text = cursor.text
    start = cursor.pos

    if start >= len(text):
        return Token(TokenKind.EOF, None, start)

    c = text[start]
    if c in _SINGLE_MAP:
        cursor.pos += 1
        return Token(_SINGLE_MAP[c], None, start)

    if c in _REAL_CHARS:
        return _scan_real(cursor)

    for prefix, kind in _IDENT_PREFIXES:
        if text.startswith(prefix, start):
            return _scan_ref(cursor, prefix, kind)

    raise make_parse_error(TokenizeError, f"Unexpected character: {c!r}", text, start)


def _scan_real(cursor: Cursor) -> Token:
    """Greedily consume a numeric literal."""
    text = cursor.text
    start = cursor.pos
    end = start
    limit = min(len(text), start + MAX_LITERAL_LENGTH + 1)
    while end < limit and text[end] in _REAL_CHARS:
        end += 1

    literal = text[start:end]
    if len(literal) > MAX_LITERAL_LENGTH:
        raise make_parse_error(
            TokenizeError,
            f"Numeric literal exceeds {MAX_LITERAL_LENGTH} characters",
            text,
            start,
        )
    try:
        value = float(literal)
    except ValueError:
        raise make_parse_error(
            TokenizeError, f"Malformed numeric literal: {literal!r}", text, start
        ) from None

    cursor.pos = end
    return Token(TokenKind.REAL, value, start)


def _scan_ref(cursor: Cursor, prefix: str, kind: TokenKind) -> Token:
    """Consume ``<prefix><digit>``; the digit is the one-based slot number."""
    text = cursor.text
    start = cursor.pos
    digit_pos = start + len(prefix)
    if digit_pos >= len(text) or text[digit_pos] not in "123456789":
        raise make_parse_error(
            TokenizeError,
            f"Malformed identifier: {prefix} must be followed by a digit 1-9",
            text,
            start,
        )
    cursor.pos = digit_pos + 1
    return Token(kind, int(text[digit_pos]) - 1, start)


def tokenize(source: str) -> list[Token]:
    """Tokenize an equation string into a list of tokens ending with EOF."""
    cursor = Cursor(source)
    tokens: list[Token] = []
    while True:
        tok = next_token(cursor)
        tokens.append(tok)
        if tok.kind == TokenKind.EOF:
            return tokens
