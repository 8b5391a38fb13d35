"""
Poisson distribution.

Probability mass, cumulative and range probabilities of a Poisson law on
arbitrary-precision decimals, with two variate generators:

- Knuth's product of uniforms for ``lambda <= 30``;
- Atkinson's (1979) rejection Method PA for larger rates.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from pysatl_decimal.arithmetic.constants import make_pi
from pysatl_decimal.arithmetic.decimal_math import (
    HALF,
    ONE,
    ZERO,
    factorial,
    floor,
    is_natural,
    ln_factorial,
    to_decimal,
    truncate_to_scale,
    working_context,
)
from pysatl_decimal.arithmetic.random import uniform
from pysatl_decimal.distributions.distribution import Distribution
from pysatl_decimal.distributions.support import IntegerSupport
from pysatl_decimal.errors import IterationBudgetExceededError, NonIntegerInputError
from pysatl_decimal.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_decimal.settings import get_settings
from pysatl_decimal.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_decimal.arithmetic.random import RandomSource
    from pysatl_decimal.types import DecimalLike, EuclideanDistributionType

logger = logging.getLogger(__name__)

KNUTH_MAX_LAMBDA = Decimal(30)
"""Largest rate sampled with Knuth's algorithm."""

# Working digits kept past the requested scale by pmf and cdf
_PMF_PADDING = 2


@parametrization(family=FamilyName.POISSON, name="rate")
class _Rate(Parametrization):
    """
    Rate parametrization of Poisson distribution.

    Parameters
    ----------
    lambda_ : Decimal
        Expected number of events
    """

    lambda_: Decimal

    @constraint(description="lambda > 0")
    def check_lambda_positive(self) -> bool:
        """Check that the rate is positive."""
        return self.lambda_ > 0


class Poisson(Distribution):
    """
    Poisson distribution.

    Probability mass function:
        P(X = k) = λ^k e^(-λ) / k!

    Parameters
    ----------
    lambda_ : DecimalLike
        Rate λ, strictly positive.
    random_source : RandomSource, optional
        Source used by sampling methods when none is passed per call.

    Raises
    ------
    InvalidParameterError
        If ``lambda_ <= 0``.

    Notes
    -----
    Results are truncated (not rounded) to the requested scale. With the
    default scale of 10, ``e^(-λ)`` vanishes for ``λ`` above about 28, and so
    does every mass computed from it; pass a larger ``scale`` for such rates.
    """

    def __init__(self, lambda_: DecimalLike, random_source: RandomSource | None = None) -> None:
        parameters = _Rate(lambda_=to_decimal(lambda_))
        parameters.validate()
        self._parameters = parameters
        self._random_source = random_source

    @property
    def lambda_(self) -> Decimal:
        return self._parameters.lambda_

    @property
    def parameters(self) -> dict[str, Decimal]:
        return self._parameters.parameters

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerSupport:
        return IntegerSupport()

    @property
    def random_source(self) -> RandomSource | None:
        return self._random_source

    def pmf(self, k: DecimalLike, scale: int | None = None) -> Decimal:
        """
        Probability mass ``λ^k · e^(-λ) / k!``.

        ``e^(-λ)`` is held at ``scale + 2`` digits; the mass is truncated to
        ``scale`` digits.

        Parameters
        ----------
        k : DecimalLike
            Number of events, a whole number.
        scale : int, optional
            Fractional digits of the result.

        Raises
        ------
        NonIntegerInputError
            If ``k`` is not a whole number.
        """
        scale = _resolve(scale)
        if not is_natural(k):
            raise NonIntegerInputError(k, "pmf")
        k = to_decimal(k)
        if k < ZERO:
            return truncate_to_scale(ZERO, scale)

        work = scale + _PMF_PADDING
        with working_context(work, self.lambda_):
            e_neg = truncate_to_scale((-self.lambda_).exp(), work)
        if e_neg.is_zero():
            return truncate_to_scale(ZERO, scale)

        with working_context(work):
            value = self.lambda_ ** int(k) * e_neg / factorial(k)
        return truncate_to_scale(value, scale)

    def probability_of_k_events(self, k: DecimalLike, scale: int | None = None) -> Decimal:
        return self.pmf(k, scale)

    def cdf(self, x: DecimalLike, scale: int | None = None) -> Decimal:
        """
        Cumulative probability ``P(X <= x)``.

        Masses are taken at ``scale + 2`` digits and the running total is
        truncated to ``scale`` digits after every addition.

        Raises
        ------
        NonIntegerInputError
            If ``x`` is not a whole number.
        """
        scale = _resolve(scale)
        if not is_natural(x):
            raise NonIntegerInputError(x, "cdf")

        total = truncate_to_scale(ZERO, scale)
        for i in self.support.iter_leq(x):
            mass = self.pmf(i, scale + _PMF_PADDING)
            with working_context(scale + _PMF_PADDING):
                total = truncate_to_scale(total + mass, scale)
        return total

    def range_pmf(self, x1: DecimalLike, x2: DecimalLike, scale: int | None = None) -> Decimal:
        """
        Probability of the closed integer range between ``x1`` and ``x2``.

        Equal endpoints give zero. The endpoints may come in either order.

        Raises
        ------
        NonIntegerInputError
            If an endpoint is not a whole number.
        """
        scale = _resolve(scale)
        if to_decimal(x1) == to_decimal(x2):
            return truncate_to_scale(ZERO, scale)
        for endpoint in (x1, x2):
            if not is_natural(endpoint):
                raise NonIntegerInputError(endpoint, "range pmf")

        total = truncate_to_scale(ZERO, scale)
        for i in self.support.iter_between(x1, x2):
            mass = self.pmf(i, scale)
            with working_context(scale):
                total += mass
        return total

    def random(self, random_source: RandomSource | None = None) -> Decimal:
        """
        Draw a number of events.

        Uses Knuth's algorithm for ``λ <= 30`` and Method PA otherwise.
        """
        source = self.resolve_random_source(random_source)
        if self.lambda_ <= KNUTH_MAX_LAMBDA:
            return self._knuth_random(source)
        return self._method_pa_random(source)

    def _knuth_random(self, source: RandomSource) -> Decimal:
        settings = get_settings()
        random_scale = settings.random_scale
        work = random_scale + settings.evaluation_guard_digits

        with working_context(work, self.lambda_):
            limit = (-self.lambda_).exp()

        k = 0
        p = ONE
        while True:
            k += 1
            u = uniform(source, random_scale)
            with working_context(work):
                p *= u
            if p <= limit:
                return Decimal(k - 1)

    def _method_pa_random(self, source: RandomSource) -> Decimal:
        """
        Atkinson's Method PA (Applied Statistics 28, 1979).

        Candidates come from a logistic envelope with the Poisson mean and
        variance; a candidate ``n`` is accepted when
        ``y + ln(v / (1 + e^y)^2) <= k + n ln(lambda) - ln(n!)``.
        """
        settings = get_settings()
        random_scale = settings.random_scale
        work = random_scale + settings.evaluation_guard_digits
        budget = settings.rejection_max_iterations
        lam = self.lambda_

        with working_context(work, lam * lam):
            c = Decimal("0.767") - Decimal("3.36") / lam
            beta = make_pi(work) / (3 * lam).sqrt()
            alpha = lam * beta
            k = c.ln() - lam - beta.ln()
            ln_lambda = lam.ln()

        attempts = 0
        while True:
            if budget is not None and attempts >= budget:
                raise IterationBudgetExceededError("Poisson Method PA", budget)
            attempts += 1

            u = uniform(source, random_scale)
            with working_context(work, lam * lam):
                x = (alpha - ((ONE - u) / u).ln()) / beta
                n = floor(x + HALF)
            if n < ZERO:
                continue

            v = uniform(source, random_scale)
            with working_context(work, lam * lam):
                y = alpha - beta * x
                lhs = y + (v / (ONE + y.exp()) ** 2).ln()
                rhs = k + n * ln_lambda - ln_factorial(n, work)
            if lhs <= rhs:
                logger.debug("Method PA accepted %s after %d attempts", n, attempts)
                return Decimal(int(n))


def _resolve(scale: int | None) -> int:
    return get_settings().default_scale if scale is None else scale


__all__ = [
    "KNUTH_MAX_LAMBDA",
    "Poisson",
]
