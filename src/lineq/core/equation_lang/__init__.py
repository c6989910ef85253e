"""
LINEQ linear equation language.

Tokenizer, reducer, compiler, evaluator, and renderer for equations of the
form ``CALC<k> = <linear expression over IN<d> and literals>``.

Usage:
    from lineq.core.equation_lang import compile_equation, evaluate

    eq = compile_equation("CALC4 = (IN2 + IN3 + 8) / 2", slots=8)
    # eq.coefficients[1] == 0.5, eq.coefficients[2] == 0.5, eq.constant == 4.0
    evaluate(eq, {"IN2": 2.0, "IN3": 4.0})
    # == 7.0
"""

from lineq.core.equation_lang.compiler import compile_all, compile_equation
from lineq.core.equation_lang.evaluator import evaluate
from lineq.core.equation_lang.reducer import DivisionPolicy, parse_expr, parse_term
from lineq.core.equation_lang.renderer import format_equation, format_form
from lineq.core.equation_lang.tokenizer import Cursor, Token, TokenKind, next_token, tokenize

__all__ = [
    "Cursor",
    "DivisionPolicy",
    "Token",
    "TokenKind",
    "compile_all",
    "compile_equation",
    "evaluate",
    "format_equation",
    "format_form",
    "next_token",
    "parse_expr",
    "parse_term",
    "tokenize",
]
