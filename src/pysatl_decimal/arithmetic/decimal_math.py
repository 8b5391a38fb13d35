"""
Decimal Arithmetic
==================

Scale-aware helpers over :class:`decimal.Decimal`.

A *scale* is the number of fractional digits kept in a result. Every public
function takes the scale explicitly, does its work in a private
:func:`decimal.localcontext` wide enough for that scale, and returns a value
quantized to it.

Notes
-----
- ``Decimal`` precision counts significant digits, so the working contexts
  are sized from the integer digits of the operands plus the scale.
- Results are rounded half-up unless the function name says otherwise.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import numbers
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import TYPE_CHECKING

from pysatl_decimal.arithmetic.constants import make_2pi, make_pi

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from pysatl_decimal.types import DecimalLike

_MARGIN = 10
_STIRLING_THRESHOLD = 256
_STIRLING_MAX_SCALE = 30

# Bernoulli terms B_2k / (2k (2k - 1)) of the Stirling series for ln(n!).
_STIRLING_TERMS = (
    (1, 12),
    (-1, 360),
    (1, 1260),
    (-1, 1680),
    (1, 1188),
    (-691, 360360),
    (1, 156),
)

ZERO = Decimal(0)
ONE = Decimal(1)
TWO = Decimal(2)
HALF = Decimal("0.5")


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Coerce ``value`` to :class:`~decimal.Decimal`, passing decimals through.

    Parameters
    ----------
    value : Decimal, int, float or str
        Value to convert. Floats are converted through their shortest
        ``repr`` so that ``0.1`` becomes ``Decimal("0.1")``.

    Returns
    -------
    Decimal

    Raises
    ------
    TypeError
        If ``value`` is not a number or a numeric string.
    ValueError
        If ``value`` is a non-finite float or a malformed string.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Booleans are not valid decimal values")
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    if isinstance(value, numbers.Real):
        as_float = float(value)
        if not math.isfinite(as_float):
            raise ValueError(f"Cannot convert non-finite value {value!r} to Decimal")
        return Decimal(repr(as_float))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid decimal literal: {value!r}") from exc
    raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")


def is_natural(value: DecimalLike) -> bool:
    """Return ``True`` if ``value`` is a finite whole number."""
    number = to_decimal(value)
    return number.is_finite() and number == number.to_integral_value()


def integer_digits(value: Decimal) -> int:
    """Number of digits left of the decimal point (at least one)."""
    if not value.is_finite() or value.is_zero():
        return 1
    return max(value.adjusted() + 1, 1)


def make_context(precision: int) -> Context:
    """Build a trapping context with ``precision`` significant digits."""
    return Context(
        prec=max(precision, 1),
        rounding=ROUND_HALF_EVEN,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )


def working_context(scale: int, *operands: Decimal) -> AbstractContextManager[Context]:
    """
    Local context holding ``scale`` fractional digits of the given operands.

    Parameters
    ----------
    scale : int
        Fractional digits the computation must keep.
    *operands : Decimal
        Values whose integer part must also fit in the precision.

    Returns
    -------
    contextlib.AbstractContextManager
        A :func:`decimal.localcontext` manager.
    """
    magnitude = max((integer_digits(op) for op in operands), default=1)
    return localcontext(make_context(scale + magnitude + _MARGIN))


def _quantize(value: Decimal, scale: int, rounding: str) -> Decimal:
    if not value.is_finite():
        return value
    with localcontext(make_context(integer_digits(value) + scale + 2)):
        result = value.quantize(ONE.scaleb(-scale), rounding=rounding)
    if result.is_zero():
        result = result.copy_abs()
    return result


def truncate_to_scale(value: Decimal, scale: int) -> Decimal:
    """Drop every digit past ``scale`` fractional digits (round toward zero)."""
    return _quantize(value, scale, ROUND_DOWN)


def round_to_scale(value: Decimal, scale: int) -> Decimal:
    """Round ``value`` half-up to ``scale`` fractional digits."""
    return _quantize(value, scale, ROUND_HALF_UP)


def floor(value: Decimal) -> Decimal:
    """Largest whole number not greater than ``value``."""
    return value.to_integral_value(rounding=ROUND_FLOOR)


def exp(x: DecimalLike, scale: int) -> Decimal:
    """``e**x`` at ``scale`` fractional digits."""
    x = to_decimal(x)
    magnitude = int(x * Decimal("0.4343")) + 1 if x > 0 else 0
    with localcontext(make_context(scale + magnitude + _MARGIN)):
        value = x.exp()
    return round_to_scale(value, scale)


def ln(x: DecimalLike, scale: int) -> Decimal:
    """
    Natural logarithm at ``scale`` fractional digits.

    Raises
    ------
    ValueError
        If ``x <= 0``.
    """
    x = to_decimal(x)
    if x <= ZERO:
        raise ValueError(f"ln requires x > 0, got {x}")
    magnitude = len(str(abs(x.adjusted()))) + 1
    with localcontext(make_context(scale + magnitude + _MARGIN)):
        value = x.ln()
    return round_to_scale(value, scale)


def sqrt(x: DecimalLike, scale: int) -> Decimal:
    """
    Square root at ``scale`` fractional digits.

    Raises
    ------
    ValueError
        If ``x < 0``.
    """
    x = to_decimal(x)
    if x < ZERO:
        raise ValueError(f"sqrt requires x >= 0, got {x}")
    with localcontext(make_context(scale + integer_digits(x) // 2 + 1 + _MARGIN)):
        value = x.sqrt()
    return round_to_scale(value, scale)


def cos(x: DecimalLike, scale: int) -> Decimal:
    """
    Cosine of ``x`` (radians) at ``scale`` fractional digits.

    The argument is reduced into ``[-pi, pi]`` before the Taylor series is
    summed, so the series never starts from a large argument.
    """
    x = to_decimal(x)
    work = scale + integer_digits(x) + _MARGIN
    with localcontext(make_context(work + _MARGIN)):
        pi = make_pi(work)
        reduced = x % make_2pi(work)
        if reduced > pi:
            reduced -= 2 * pi
        elif reduced < -pi:
            reduced += 2 * pi

        square = reduced * reduced
        i, last, total, fact, num, sign = 0, ZERO, ONE, ONE, ONE, 1
        while total != last:
            last = total
            i += 2
            fact *= i * (i - 1)
            num *= square
            sign = -sign
            total += num / fact * sign
    return round_to_scale(total, scale)


def factorial(n: DecimalLike) -> Decimal:
    """
    Exact factorial of a non-negative whole number.

    Raises
    ------
    ValueError
        If ``n`` is negative or not whole.
    """
    number = to_decimal(n)
    if not is_natural(number) or number < ZERO:
        raise ValueError(f"factorial requires a non-negative integer, got {n}")
    return Decimal(math.factorial(int(number)))


def ln_factorial(n: DecimalLike, scale: int) -> Decimal:
    """
    ``ln(n!)`` at ``scale`` fractional digits.

    Small arguments (and very fine scales) go through the exact factorial;
    large ones use the Stirling series, whose truncation error is below
    ``1e-36`` from ``n = 256`` on.
    """
    number = to_decimal(n)
    if not is_natural(number) or number < ZERO:
        raise ValueError(f"ln_factorial requires a non-negative integer, got {n}")
    if number < _STIRLING_THRESHOLD or scale > _STIRLING_MAX_SCALE:
        return ln(factorial(number), scale)

    with working_context(scale, number * number):
        value = number * number.ln() - number + HALF * (make_2pi(scale + _MARGIN) * number).ln()
        power = number
        for numerator, denominator in _STIRLING_TERMS:
            value += Decimal(numerator) / (Decimal(denominator) * power)
            power *= number * number
    return round_to_scale(value, scale)


__all__ = [
    "ZERO",
    "ONE",
    "TWO",
    "HALF",
    "to_decimal",
    "is_natural",
    "integer_digits",
    "make_context",
    "working_context",
    "truncate_to_scale",
    "round_to_scale",
    "floor",
    "exp",
    "ln",
    "sqrt",
    "cos",
    "factorial",
    "ln_factorial",
]
