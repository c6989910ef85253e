"""
LINEQ - compile textual linear equations into affine coefficient form.

``CALC4 = (IN2 + IN3 + 8) / 2`` becomes a coefficient vector over the IN
slots plus a constant, ready for fast repeated ``y = a·x + b`` evaluation.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.equation_lang import (
    DivisionPolicy,
    compile_all,
    compile_equation,
    evaluate,
    format_equation,
)
from .core.errors import LineqError, ParseError
from .core.ir import AffineForm, Equation

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "AffineForm",
    "Equation",
    "DivisionPolicy",
    "compile_equation",
    "compile_all",
    "evaluate",
    "format_equation",
    "LineqError",
    "ParseError",
]
