"""
Canonical text rendering of affine forms and equations.
"""

from __future__ import annotations

from lineq.core.ir.affine import AffineForm, Equation, is_real_zero


def format_number(value: float) -> str:
    """Shortest text for value; integral values drop the trailing '.0'."""
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def format_form(form: AffineForm) -> str:
    """Render as ``a1 * IN1 + a2 * IN2 + ... + b``.

    Near-zero coefficients and constant are omitted; an all-zero form is "0".
    """
    parts: list[tuple[float, str]] = [
        (a, f"IN{i + 1}")
        for i, a in enumerate(form.coefficients)
        if not is_real_zero(a)
    ]
    if not is_real_zero(form.constant):
        parts.append((form.constant, ""))

    if not parts:
        return "0"

    out: list[str] = []
    for value, name in parts:
        magnitude = abs(value) if out else value
        term = format_number(magnitude)
        if name:
            term = f"{term} * {name}"
        if out:
            out.append("-" if value < 0 else "+")
        out.append(term)
    return " ".join(out)


def format_equation(equation: Equation) -> str:
    """Render as ``CALC<k> = <canonical form>``."""
    return f"{equation.target_name} = {format_form(equation.form)}"
