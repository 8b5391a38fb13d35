"""
Differentiable Functions
========================

Capability protocol for functions combined with a distribution by
``Normal.cdf_product`` and ``Normal.pdf_product``, and a polynomial that
implements it.

Notes
-----
- ``describe_shape`` returns the non-constant terms of the function; an empty
  shape marks a constant (fully differentiated) function.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_decimal.arithmetic.decimal_math import (
    ZERO,
    integer_digits,
    to_decimal,
    working_context,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from decimal import Decimal

    from pysatl_decimal.types import DecimalLike


@runtime_checkable
class DifferentiableFunction(Protocol):
    """Protocol for functions that can be evaluated and differentiated."""

    def describe_shape(self) -> Sequence[object]: ...

    def evaluate_at(self, x: DecimalLike) -> Decimal: ...

    def derivative_expression(self) -> DifferentiableFunction: ...


class Polynomial:
    """
    Polynomial with decimal coefficients.

    Parameters
    ----------
    coefficients : Iterable[DecimalLike]
        Coefficients in increasing power order: ``coefficients[i]`` multiplies
        ``x**i``.

    Examples
    --------
    >>> Polynomial([1, 0, 3]).evaluate_at(2)
    Decimal('13')
    """

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Iterable[DecimalLike]) -> None:
        coefficients = [to_decimal(c) for c in coefficients]
        while coefficients and coefficients[-1].is_zero():
            coefficients.pop()
        self._coefficients: tuple[Decimal, ...] = tuple(coefficients)

    @property
    def coefficients(self) -> tuple[Decimal, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        """Degree of the polynomial; ``0`` for constants (including zero)."""
        return max(len(self._coefficients) - 1, 0)

    def describe_shape(self) -> tuple[tuple[int, Decimal], ...]:
        """Return ``(power, coefficient)`` pairs of the non-constant terms."""
        return tuple(
            (power, c) for power, c in enumerate(self._coefficients) if power > 0 and not c.is_zero()
        )

    def evaluate_at(self, x: DecimalLike) -> Decimal:
        """Evaluate with Horner's scheme."""
        x = to_decimal(x)
        result = ZERO
        with working_context(20 + self.degree * integer_digits(x), *self._coefficients):
            for c in reversed(self._coefficients):
                result = result * x + c
        return result

    def derivative_expression(self) -> Polynomial:
        return Polynomial(power * c for power, c in enumerate(self._coefficients) if power > 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(c) for c in self._coefficients]})"


__all__ = [
    "DifferentiableFunction",
    "Polynomial",
]
