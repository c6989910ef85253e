"""
Recursive descent reducer for LINEQ expressions.

Instead of building an AST, every grammar rule folds what it parses straight
into an ``AffineForm`` (coefficient vector + constant).

Grammar (precedence low to high):
    expr     → term ((("+" | "-") expr) | (("*" | "/") term))*
    term     → ("+" | "-")* atom
    atom     → "(" expr ")" | IN | REAL

The right-hand side of "+"/"-" is a full expression, parsed with the
operator's sign folded into its leading term, so chains still group left
to right. The right-hand side of "*"/"/" is a single term.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from lineq.core.equation_lang.tokenizer import Cursor, Token, TokenKind, next_token
from lineq.core.errors import (
    DivisionByZeroError,
    InputIndexOutOfRange,
    NonLinearTerm,
    ParseError,
    UnexpectedToken,
    make_parse_error,
)
from lineq.core.ir.affine import AffineForm, is_real_zero

logger = logging.getLogger(__name__)


class DivisionPolicy(StrEnum):
    """What to do when an expression is divided by a zero constant."""

    ZERO = "zero"  # Replace the whole accumulated form with zeros
    ERROR = "error"  # Raise DivisionByZeroError


class _Reducer:
    """Recursive descent reducer over a shared cursor."""

    def __init__(self, cursor: Cursor, slots: int, policy: DivisionPolicy) -> None:
        self.cursor = cursor
        self.slots = slots
        self.policy = policy

    def advance(self) -> Token:
        return next_token(self.cursor)

    # -- Grammar rules --

    def reduce_term(self, sign: float = 1.0) -> AffineForm:
        """Signed atom: literal, input reference, or parenthesized expression."""
        tok = self.advance()
        while tok.kind in (TokenKind.PLUS, TokenKind.MINUS):
            if tok.kind == TokenKind.MINUS:
                sign *= -1.0
            tok = self.advance()

        if tok.kind == TokenKind.LPAREN:
            form = self.reduce_expr()
            close = self.advance()
            if close.kind != TokenKind.RPAREN:
                raise self._error(
                    UnexpectedToken, f"Expected ')', got {close}", close.pos
                )
        elif tok.kind == TokenKind.IN:
            if tok.value >= self.slots:
                raise self._error(
                    InputIndexOutOfRange,
                    f"{tok} is out of range: only {self.slots} input slots",
                    tok.pos,
                )
            form = AffineForm.unit(self.slots, tok.value)
        elif tok.kind == TokenKind.REAL:
            form = AffineForm.scalar(self.slots, tok.value)
        else:
            raise self._error(UnexpectedToken, f"Expected a term, got {tok}", tok.pos)

        form.scale(sign)
        return form

    def reduce_expr(self, sign: float = 1.0) -> AffineForm:
        """Additive/multiplicative expression up to ')' or end of input."""
        form = self.reduce_term(sign)

        while True:
            mark = self.cursor.save()
            tok = self.advance()

            if tok.kind == TokenKind.EOF:
                break
            if tok.kind == TokenKind.RPAREN:
                # Left for the enclosing "(" to consume
                self.cursor.restore(mark)
                break

            if tok.kind in (TokenKind.PLUS, TokenKind.MINUS):
                op_sign = 1.0 if tok.kind == TokenKind.PLUS else -1.0
                right = self.reduce_expr(op_sign)
                form.accumulate(right)
            elif tok.kind in (TokenKind.STAR, TokenKind.SLASH):
                right = self.reduce_term()
                self._fold_product(form, right, tok)
            else:
                raise self._error(
                    UnexpectedToken, f"Expected an operator, got {tok}", tok.pos
                )

        return form

    def _fold_product(self, left: AffineForm, right: AffineForm, op: Token) -> None:
        """Fold ``left op right`` into left, where one side must be constant."""
        if right.is_constant():
            konst = right.constant
        elif left.is_constant():
            # konst * term: swap sides
            konst = left.constant
            left.coefficients = list(right.coefficients)
            left.constant = right.constant
        else:
            raise self._error(
                NonLinearTerm,
                f"Non-linear term: both operands of '{op}' reference inputs",
                op.pos,
            )

        if op.kind == TokenKind.STAR:
            left.scale(konst)
            return

        if not is_real_zero(konst):
            left.divide(konst)
        elif self.policy == DivisionPolicy.ERROR:
            raise self._error(DivisionByZeroError, "Division by zero", op.pos)
        else:
            logger.debug("Division by zero at column %d: form zeroed", op.pos + 1)
            left.clear()

    def _error(self, cls: type[ParseError], message: str, pos: int) -> ParseError:
        return make_parse_error(cls, message, self.cursor.text, pos)


def parse_term(
    cursor: Cursor, slots: int, policy: DivisionPolicy = DivisionPolicy.ZERO
) -> AffineForm:
    """Reduce exactly one signed term at the cursor.

    Args:
        cursor: Position in the equation text; advanced past the term.
        slots: Number of addressable IN slots (n).
        policy: Division-by-zero policy for parenthesized sub-expressions.

    Returns:
        The term's affine form, with ``slots`` coefficients.

    Raises:
        ParseError: If the term is malformed.
    """
    return _Reducer(cursor, slots, policy).reduce_term()


def parse_expr(
    cursor: Cursor, slots: int, policy: DivisionPolicy = DivisionPolicy.ZERO
) -> AffineForm:
    """Reduce a full expression at the cursor.

    Stops at end of input or before an unmatched ')', which is left
    unconsumed.

    Args:
        cursor: Position in the equation text.
        slots: Number of addressable IN slots (n).
        policy: Division-by-zero policy.

    Returns:
        The expression's affine form, with ``slots`` coefficients.

    Raises:
        ParseError: If the expression is malformed or non-linear.
    """
    return _Reducer(cursor, slots, policy).reduce_expr()
