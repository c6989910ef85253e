"""
Equation compiler: ``CALC<k> = <expr>`` → ``Equation``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lineq.core.equation_lang.reducer import DivisionPolicy, parse_expr
from lineq.core.equation_lang.tokenizer import Cursor, TokenKind, next_token
from lineq.core.errors import (
    DuplicateTargetError,
    ErrorContext,
    LineqError,
    UnexpectedToken,
    make_parse_error,
)
from lineq.core.ir.affine import Equation

logger = logging.getLogger(__name__)


def compile_equation(
    text: str,
    slots: int,
    policy: DivisionPolicy = DivisionPolicy.ZERO,
) -> Equation:
    """Compile one linear equation string.

    Args:
        text: Equation such as "CALC4 = (IN2 + IN3) / 2".
        slots: Number of addressable IN slots (n).
        policy: Division-by-zero policy.

    Returns:
        The compiled equation with ``slots`` coefficients.

    Raises:
        ParseError: If the equation is invalid. No partial result is returned.
    """
    if slots < 0:
        raise ValueError(f"slots must be non-negative, got {slots}")

    cursor = Cursor(text)

    target = next_token(cursor)
    if target.kind != TokenKind.CALC:
        raise make_parse_error(
            UnexpectedToken, f"Expected CALC target, got {target}", text, target.pos
        )

    equals = next_token(cursor)
    if equals.kind != TokenKind.EQUALS:
        raise make_parse_error(
            UnexpectedToken, f"Expected '=', got {equals}", text, equals.pos
        )

    form = parse_expr(cursor, slots, policy)

    trailing = next_token(cursor)
    if trailing.kind != TokenKind.EOF:
        raise make_parse_error(
            UnexpectedToken,
            f"Unexpected token after expression: {trailing}",
            text,
            trailing.pos,
        )

    equation = Equation.from_form(target.value, form)
    logger.debug("Compiled %r -> %s", text, equation)
    return equation


def compile_all(
    texts: Iterable[str],
    slots: int,
    policy: DivisionPolicy = DivisionPolicy.ZERO,
) -> list[Equation]:
    """Compile a batch of equations in order.

    Raises:
        ParseError: From the first invalid equation, with its batch index attached.
        DuplicateTargetError: If two equations assign the same CALC target.
    """
    equations: list[Equation] = []
    seen: dict[int, int] = {}

    for index, text in enumerate(texts):
        try:
            equation = compile_equation(text, slots, policy)
        except LineqError as e:
            pos = e.pos if e.pos is not None else 0
            e.with_context(ErrorContext(source=text, pos=pos, index=index))
            raise

        if equation.target_index in seen:
            raise DuplicateTargetError(
                f"{equation.target_name} already assigned by "
                f"equation #{seen[equation.target_index] + 1}",
                ErrorContext(source=text, pos=0, index=index),
            )
        seen[equation.target_index] = index
        equations.append(equation)

    logger.debug("Compiled %d equations", len(equations))
    return equations
