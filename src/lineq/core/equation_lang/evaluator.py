"""
Evaluator for compiled LINEQ equations.

Computes ``sum(a[i] * inputs[i]) + b``. Pure arithmetic: no parsing happens
here, which is the point of compiling once and evaluating many times.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from lineq.core.errors import EvaluationError
from lineq.core.ir.affine import Equation

_INPUT_NAME_RE = re.compile(r"IN([1-9][0-9]*)")


def evaluate(
    equation: Equation,
    inputs: Sequence[float] | Mapping[str | int, float],
) -> float:
    """Evaluate an equation against input slot values.

    Args:
        equation: Compiled equation.
        inputs: Either one value per slot, or a mapping from "IN<d>" names
            or zero-based indices to values. Slots absent from a mapping
            read as 0.0.

    Returns:
        The equation's value.

    Raises:
        EvaluationError: On a wrong-length sequence or an unknown slot.
    """
    values = _slot_values(equation.slot_count, inputs)
    total = equation.constant
    for a, x in zip(equation.coefficients, values):
        total += a * x
    return total


def _slot_values(
    slots: int, inputs: Sequence[float] | Mapping[str | int, float]
) -> list[float]:
    if isinstance(inputs, Mapping):
        values = [0.0] * slots
        for key, value in inputs.items():
            values[_slot_index(key, slots)] = float(value)
        return values

    if len(inputs) != slots:
        raise EvaluationError(f"Expected {slots} input values, got {len(inputs)}")
    return [float(v) for v in inputs]


def _slot_index(key: str | int, slots: int) -> int:
    if isinstance(key, str):
        m = _INPUT_NAME_RE.fullmatch(key.strip())
        if not m:
            raise EvaluationError(f"Invalid input name: {key!r}")
        index = int(m.group(1)) - 1
    else:
        index = key

    if not 0 <= index < slots:
        raise EvaluationError(f"Input {key!r} is out of range: only {slots} slots")
    return index
