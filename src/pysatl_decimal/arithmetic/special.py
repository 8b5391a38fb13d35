"""
Special Functions
=================

Arbitrary-precision Gauss error function and standard normal quantiles.

- :func:`gauss_error_function` — ``erf(x)``.
- :func:`normal_ppf` — lower-tail standard normal quantile ``Phi^-1(p)``.
- :func:`inverse_normal_cdf` — upper-tail quantile, the ``z`` with
  ``P(Z > z) = q``.

Notes
-----
- ``erf`` is summed from the all-positive series
  ``erf(x) = 2/sqrt(pi) * exp(-x^2) * sum_n 2^n x^(2n+1) / (2n+1)!!``, which
  has no cancellation, and saturates to ``+-1`` once ``erfc(|x|)`` is below
  the working precision.
- Quantiles start from SciPy's double precision ``ndtri`` and are refined by
  Newton steps on the decimal CDF.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from decimal import Decimal

from scipy.special import ndtri

from pysatl_decimal.arithmetic.constants import make_2pi, make_pi
from pysatl_decimal.arithmetic.decimal_math import (
    HALF,
    ONE,
    ZERO,
    round_to_scale,
    to_decimal,
    working_context,
)
from pysatl_decimal.settings import get_settings
from pysatl_decimal.types import NEGATIVE_INFINITY, POSITIVE_INFINITY, DecimalLike

logger = logging.getLogger(__name__)

_GUARD = 5
_NEWTON_MAX_STEPS = 50
_LN_10 = Decimal("2.302585092994045684")

# Abramowitz and Stegun 26.2.23
_TAIL_NUMERATOR = (Decimal("2.515517"), Decimal("0.802853"), Decimal("0.010328"))
_TAIL_DENOMINATOR = (Decimal("1.432788"), Decimal("0.189269"), Decimal("0.001308"))


def _resolve(scale: int | None) -> int:
    return get_settings().default_scale if scale is None else scale


def _erf(x: Decimal, work: int) -> Decimal:
    """Unrounded ``erf(x)`` good to ``work`` fractional digits."""
    if x.is_zero():
        return ZERO

    with working_context(work, x):
        square = x * x
        if square > (work + 1) * _LN_10:
            return ONE if x > 0 else -ONE
        # the partial sums grow like exp(x^2) before the exp(-x^2) factor
        extra = int(square / _LN_10) + 1
    with working_context(work + extra, x):
        two_square = 2 * square
        term = x
        total = x
        n = 0
        while True:
            n += 1
            term = term * two_square / (2 * n + 1)
            previous = total
            total += term
            if total == previous:
                break
        coefficient = 2 / make_pi(work + extra).sqrt()
        return coefficient * (-square).exp() * total


def gauss_error_function(x: DecimalLike, scale: int | None = None) -> Decimal:
    """
    Gauss error function.

    Parameters
    ----------
    x : DecimalLike
        Argument.
    scale : int, optional
        Fractional digits of the result. Defaults to ``Settings.default_scale``.

    Returns
    -------
    Decimal
        ``erf(x)`` rounded half-up to ``scale`` digits.
    """
    scale = _resolve(scale)
    return round_to_scale(_erf(to_decimal(x), scale + _GUARD), scale)


def _standard_normal_cdf(z: Decimal, work: int) -> Decimal:
    with working_context(work, z):
        return HALF * (ONE + _erf(z / Decimal(2).sqrt(), work))


def _seed(q: Decimal) -> Decimal:
    """Double precision starting point for the lower-tail quantile of ``q <= 0.5``."""
    q_float = float(q)
    if q_float > 0.0:
        return Decimal(repr(float(ndtri(q_float))))
    # below double range
    t = (-2 * q.ln()).sqrt()
    c0, c1, c2 = _TAIL_NUMERATOR
    d1, d2, d3 = _TAIL_DENOMINATOR
    return -(t - (c0 + c1 * t + c2 * t * t) / (1 + d1 * t + d2 * t * t + d3 * t * t * t))


def normal_ppf(p: DecimalLike, scale: int | None = None) -> Decimal:
    """
    Percent point function (inverse CDF) of the standard normal distribution.

    Parameters
    ----------
    p : DecimalLike
        Probability from ``[0, 1]``.
    scale : int, optional
        Fractional digits of the result. Defaults to ``Settings.default_scale``.

    Returns
    -------
    Decimal
        ``z`` with ``P(Z <= z) = p``. ``0`` and ``1`` map to ``-Infinity``
        and ``Infinity``.

    Raises
    ------
    ValueError
        If ``p`` is outside ``[0, 1]``.
    """
    scale = _resolve(scale)
    p = to_decimal(p)
    if p < ZERO or p > ONE:
        raise ValueError("Probability must be in [0, 1]")
    if p == ZERO:
        return NEGATIVE_INFINITY
    if p == ONE:
        return POSITIVE_INFINITY

    upper = p > HALF
    with working_context(scale + _GUARD):
        q = ONE - p if upper else p
    if q == HALF:
        return round_to_scale(ZERO, scale)

    # deep tails need digits below the probability itself
    work = scale + _GUARD + max(-q.adjusted(), 0)
    tolerance = ONE.scaleb(-(scale + 2))

    z = _seed(q)
    with working_context(work, z):
        sqrt_two_pi = make_2pi(work).sqrt()
        for step_count in range(1, _NEWTON_MAX_STEPS + 1):
            density = (-(z * z) / 2).exp() / sqrt_two_pi
            step = (_standard_normal_cdf(z, work) - q) / density
            z -= step
            if abs(step) < tolerance:
                break
        else:
            raise ArithmeticError(f"normal_ppf({p}) did not converge in {_NEWTON_MAX_STEPS} steps")

    logger.debug("normal_ppf(%s) converged after %d Newton steps", p, step_count)
    return round_to_scale(-z if upper else z, scale)


def inverse_normal_cdf(q: DecimalLike, scale: int | None = None) -> Decimal:
    """
    Upper-tail inverse of the standard normal CDF.

    Returns the ``z`` for which a standard normal variable exceeds ``z`` with
    probability ``q``; equivalently ``normal_ppf(1 - q)``.

    Raises
    ------
    ValueError
        If ``q`` is outside ``[0, 1]``.
    """
    scale = _resolve(scale)
    q = to_decimal(q)
    with working_context(scale + _GUARD, q):
        complement = ONE - q
    return normal_ppf(complement, scale)


__all__ = [
    "gauss_error_function",
    "normal_ppf",
    "inverse_normal_cdf",
]
