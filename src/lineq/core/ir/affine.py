"""
Affine form types for LINEQ IR.

An affine form is a fixed-length coefficient vector over the IN slots plus
one scalar constant, representing ``sum(a[i] * IN(i+1)) + b``.

``AffineForm`` is the mutable accumulator the reducer folds sub-expressions
into. ``Equation`` is the finished, immutable compile result.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

# Tolerance for every "is this effectively zero" comparison.
EPSILON = 1e-9


def is_real_zero(value: float) -> bool:
    """True when value lies within EPSILON of zero."""
    return -EPSILON <= value <= EPSILON


@dataclass
class AffineForm:
    """Mutable coefficient vector plus constant."""

    coefficients: list[float] = field(default_factory=list)
    constant: float = 0.0

    @classmethod
    def zeros(cls, n: int) -> AffineForm:
        return cls([0.0] * n, 0.0)

    @classmethod
    def unit(cls, n: int, index: int) -> AffineForm:
        """Form for a bare input reference: coefficient 1.0 at index."""
        form = cls.zeros(n)
        form.coefficients[index] = 1.0
        return form

    @classmethod
    def scalar(cls, n: int, value: float) -> AffineForm:
        return cls([0.0] * n, value)

    @property
    def slot_count(self) -> int:
        return len(self.coefficients)

    def is_constant(self) -> bool:
        """True when every coefficient is within EPSILON of zero."""
        return all(is_real_zero(a) for a in self.coefficients)

    def scale(self, factor: float) -> None:
        self.coefficients = [a * factor for a in self.coefficients]
        self.constant *= factor

    def divide(self, divisor: float) -> None:
        self.coefficients = [a / divisor for a in self.coefficients]
        self.constant /= divisor

    def accumulate(self, other: AffineForm, sign: float = 1.0) -> None:
        """Elementwise ``self += sign * other``."""
        if other.slot_count != self.slot_count:
            raise ValueError(
                f"Slot count mismatch: {self.slot_count} != {other.slot_count}"
            )
        self.coefficients = [
            a + sign * b for a, b in zip(self.coefficients, other.coefficients)
        ]
        self.constant += sign * other.constant

    def clear(self) -> None:
        self.coefficients = [0.0] * self.slot_count
        self.constant = 0.0


class Equation(BaseModel):
    """
    A compiled linear equation: ``CALC<target_index+1> = form``.

    Examples:
        - "CALC4 = (IN2 + IN3 + 8) / 2"
          → Equation(target_index=3, coefficients=(0, 0.5, 0.5, 0, ...), constant=4.0)
    """

    target_index: int = Field(ge=0, description="Zero-based CALC target index")
    coefficients: tuple[float, ...] = Field(description="One coefficient per IN slot")
    constant: float = Field(default=0.0, description="Additive constant")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_form(cls, target_index: int, form: AffineForm) -> Equation:
        return cls(
            target_index=target_index,
            coefficients=tuple(form.coefficients),
            constant=form.constant,
        )

    @property
    def slot_count(self) -> int:
        return len(self.coefficients)

    @property
    def target_name(self) -> str:
        return f"CALC{self.target_index + 1}"

    @property
    def form(self) -> AffineForm:
        """A fresh mutable copy of the affine form."""
        return AffineForm(list(self.coefficients), self.constant)

    def evaluate(self, inputs: Sequence[float] | Mapping[str | int, float]) -> float:
        """Shortcut for ``lineq.core.equation_lang.evaluator.evaluate``."""
        from lineq.core.equation_lang.evaluator import evaluate

        return evaluate(self, inputs)

    def __str__(self) -> str:
        from lineq.core.equation_lang.renderer import format_equation

        return format_equation(self)
