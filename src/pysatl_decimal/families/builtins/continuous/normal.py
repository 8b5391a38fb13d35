"""
Normal distribution.

Contains the Normal distribution on arbitrary-precision decimals: density
kernel, CDF, interval probabilities, z-scores, parameter fits from a
quantile and Box-Muller sampling.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING

from pysatl_decimal.arithmetic.constants import make_2pi
from pysatl_decimal.arithmetic.decimal_math import (
    HALF,
    ONE,
    TWO,
    ZERO,
    cos,
    integer_digits,
    ln,
    round_to_scale,
    sqrt,
    to_decimal,
    working_context,
)
from pysatl_decimal.arithmetic.random import uniform
from pysatl_decimal.arithmetic.special import (
    gauss_error_function,
    inverse_normal_cdf,
    normal_ppf,
)
from pysatl_decimal.distributions.distribution import Distribution
from pysatl_decimal.distributions.support import ContinuousSupport
from pysatl_decimal.errors import IterationBudgetExceededError
from pysatl_decimal.families.parametrizations import Parametrization, parametrization
from pysatl_decimal.settings import get_settings
from pysatl_decimal.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from decimal import Decimal

    from pysatl_decimal.arithmetic.random import RandomSource
    from pysatl_decimal.distributions.functions import DifferentiableFunction
    from pysatl_decimal.types import DecimalLike, EuclideanDistributionType


@parametrization(family=FamilyName.NORMAL, name="meanStd")
class _MeanStd(Parametrization):
    """
    Standard parametrization of normal distribution.

    Parameters
    ----------
    mu : Decimal
        Mean of the distribution
    sigma : Decimal
        Standard deviation of the distribution
    """

    mu: Decimal
    sigma: Decimal


class Normal(Distribution):
    """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mean : DecimalLike
        Mean μ, any sign.
    sd : DecimalLike
        Standard deviation σ. It is not validated; a zero value emits a
        :class:`UserWarning` because every evaluation then divides by zero.
    random_source : RandomSource, optional
        Source used by sampling methods when none is passed per call.

    Notes
    -----
    Evaluation methods take ``scale`` (fractional digits of the result,
    ``Settings.default_scale`` by default). They compute with
    ``Settings.evaluation_guard_digits`` extra digits and round half-up.
    """

    def __init__(
        self,
        mean: DecimalLike,
        sd: DecimalLike,
        random_source: RandomSource | None = None,
    ) -> None:
        parameters = _MeanStd(mu=to_decimal(mean), sigma=to_decimal(sd))
        parameters.validate()
        if parameters.sigma.is_zero():
            warnings.warn(
                "Normal distribution with zero standard deviation; evaluations will fail",
                UserWarning,
                stacklevel=2,
            )
        self._parameters = parameters
        self._random_source = random_source

    @classmethod
    def make_from_mean(
        cls,
        p: DecimalLike,
        x: DecimalLike,
        mean: DecimalLike,
        scale: int | None = None,
    ) -> Normal:
        """
        Build the distribution with the given ``mean`` that has ``x`` at ``p``.

        Solves ``sd = (x - mean) / inverse_normal_cdf(1 - p)``.

        The fitted ``sd`` is rounded half-up to ``scale`` digits; earlier
        releases truncated it, so the last digit can be one higher than they
        reported.

        Parameters
        ----------
        p : DecimalLike
            Probability from ``(0, 1)``, ``p != 0.5``.
        x : DecimalLike
            Observation.
        mean : DecimalLike
            Known mean.
        scale : int, optional
            Fractional digits of the fitted standard deviation.

        Examples
        --------
        >>> Normal.make_from_mean("0.1", 6, 10).sd
        Decimal('3.1212165843')
        """
        scale, work = _scales(scale)
        p, x, mean = to_decimal(p), to_decimal(x), to_decimal(mean)
        z = inverse_normal_cdf(ONE - p, work)
        with working_context(work, x, mean):
            sd = (x - mean) / z
        return cls(mean, round_to_scale(sd, scale))

    @classmethod
    def make_from_sd(
        cls,
        p: DecimalLike,
        x: DecimalLike,
        sd: DecimalLike,
        scale: int | None = None,
    ) -> Normal:
        """
        Build the distribution with the given ``sd`` that has ``x`` at ``p``.

        Solves ``mean = x - inverse_normal_cdf(1 - p) * sd``.
        """
        scale, work = _scales(scale)
        p, x, sd = to_decimal(p), to_decimal(x), to_decimal(sd)
        z = inverse_normal_cdf(ONE - p, work)
        with working_context(work, x, sd):
            mean = x - z * sd
        return cls(round_to_scale(mean, scale), sd)

    @property
    def mean(self) -> Decimal:
        return self._parameters.mu

    @property
    def sd(self) -> Decimal:
        return self._parameters.sigma

    @property
    def parameters(self) -> dict[str, Decimal]:
        return self._parameters.parameters

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    @property
    def random_source(self) -> RandomSource | None:
        return self._random_source

    def _cdf(self, x: Decimal, work: int) -> Decimal:
        """Unrounded CDF good to ``work`` digits."""
        with working_context(work, x, self.mean, self.sd):
            z = (x - self.mean) / (self.sd * TWO.sqrt())
        erf = gauss_error_function(z, work)
        with working_context(work):
            return HALF * (ONE + erf)

    def evaluate_at(self, x: DecimalLike, scale: int | None = None) -> Decimal:
        """
        Density kernel ``1/sqrt(2π·sd²) · e^(-(x - sd)²/(2·sd²))``.

        The exponent is centred on ``sd``, not on the mean, so the kernel
        differs from the density behind :meth:`cdf` unless ``mean == sd``.
        """
        scale, work = _scales(scale)
        x = to_decimal(x)
        with working_context(work, x, self.sd):
            variance = self.sd * self.sd
            coefficient = ONE / (make_2pi(work) * variance).sqrt()
            exponent = -((x - self.sd) ** 2) / (TWO * variance)
            value = coefficient * exponent.exp()
        return round_to_scale(value, scale)

    def cdf(self, x: DecimalLike, scale: int | None = None) -> Decimal:
        """
        Cumulative distribution function ``0.5 · (1 + erf((x - μ)/(σ√2)))``.
        """
        scale, work = _scales(scale)
        return round_to_scale(self._cdf(to_decimal(x), work), scale)

    def pdf(
        self,
        x1: DecimalLike,
        x2: DecimalLike | None = None,
        scale: int | None = None,
    ) -> Decimal:
        """
        Probability of the interval between two points.

        Parameters
        ----------
        x1 : DecimalLike
            First endpoint.
        x2 : DecimalLike, optional
            Second endpoint. Defaults to the mirror image of ``x1`` about the
            mean, giving the symmetric interval through ``x1``.
        scale : int, optional
            Fractional digits of the result.

        Returns
        -------
        Decimal
            ``|cdf(x1) - cdf(x2)|``; endpoint order does not matter.
        """
        scale, work = _scales(scale)
        x1 = to_decimal(x1)
        if x2 is None:
            with working_context(work, x1, self.mean):
                distance = TWO * abs(x1 - self.mean)
                x2 = x1 - distance if self.mean < x1 else x1 + distance
        else:
            x2 = to_decimal(x2)

        first = self._cdf(x1, work)
        second = self._cdf(x2, work)
        with working_context(work):
            return round_to_scale(abs(first - second), scale)

    def percent_below_x(self, x: DecimalLike, scale: int | None = None) -> Decimal:
        return self.cdf(x, scale)

    def percent_above_x(self, x: DecimalLike, scale: int | None = None) -> Decimal:
        scale, work = _scales(scale)
        below = self._cdf(to_decimal(x), work)
        with working_context(work):
            return round_to_scale(ONE - below, scale)

    def z_score_of_x(self, x: DecimalLike, scale: int | None = None) -> Decimal:
        scale, work = _scales(scale)
        x = to_decimal(x)
        with working_context(work, x, self.mean, self.sd):
            z = (x - self.mean) / self.sd
        return round_to_scale(z, scale)

    def x_from_z_score(self, z: DecimalLike, scale: int | None = None) -> Decimal:
        scale, work = _scales(scale)
        z = to_decimal(z)
        with working_context(work, z, self.mean, self.sd):
            x = z * self.sd + self.mean
        return round_to_scale(x, scale)

    def ppf(self, p: DecimalLike, scale: int | None = None) -> Decimal:
        """
        Percent point function (inverse CDF).

        Returns
        -------
        Decimal
            ``μ + σ·Φ⁻¹(p)``. ``p`` of 0 and 1 give ``-Infinity`` and
            ``Infinity`` for a positive ``σ``.

        Raises
        ------
        ValueError
            If ``p`` is outside ``[0, 1]``.
        """
        scale, work = _scales(scale)
        z = normal_ppf(p, work)
        if not z.is_finite():
            return z if self.sd > ZERO else -z
        with working_context(work, z, self.mean, self.sd):
            x = self.mean + self.sd * z
        return round_to_scale(x, scale)

    def cdf_product(
        self,
        function: DifferentiableFunction,
        x: DecimalLike,
        scale: int | None = None,
    ) -> Decimal:
        """
        Alternating derivative series of ``function`` times ``cdf(x)``.

        Sums ``(-1)^i · f_i(x)`` over ``f_0 = function`` and its successive
        derivatives while ``describe_shape()`` is non-empty, then multiplies
        by the CDF at ``x``.

        Raises
        ------
        IterationBudgetExceededError
            If ``Settings.cdf_product_max_terms`` is set and the series has
            not ended after that many terms.
        """
        scale, work = _scales(scale)
        return round_to_scale(self._cdf_product(function, to_decimal(x), work), scale)

    def _cdf_product(self, function: DifferentiableFunction, x: Decimal, work: int) -> Decimal:
        budget = get_settings().cdf_product_max_terms

        total = ZERO
        sign = 1
        terms = 0
        while function.describe_shape():
            if budget is not None and terms >= budget:
                raise IterationBudgetExceededError("Normal.cdf_product", budget)
            value = function.evaluate_at(x)
            with working_context(work, value, total):
                total += sign * value
            function = function.derivative_expression()
            sign = -sign
            terms += 1

        probability = self._cdf(x, work)
        with working_context(work, total):
            return total * probability

    def pdf_product(
        self,
        function: DifferentiableFunction,
        x1: DecimalLike,
        x2: DecimalLike,
        scale: int | None = None,
    ) -> Decimal:
        """``cdf_product(function, x2) - cdf_product(function, x1)``, rounded once."""
        scale, work = _scales(scale)
        upper = self._cdf_product(function, to_decimal(x2), work)
        lower = self._cdf_product(function, to_decimal(x1), work)
        with working_context(work, upper, lower):
            return round_to_scale(upper - lower, scale)

    def random(self, random_source: RandomSource | None = None) -> Decimal:
        """
        Draw a variate with the Box-Muller transform.

        ``sqrt(-2·ln u1) · cos(2π·u2) · σ + μ`` for independent uniforms
        ``u1, u2`` from ``(0, 1)``, rounded to ``Settings.random_scale``.
        """
        source = self.resolve_random_source(random_source)
        settings = get_settings()
        random_scale = settings.random_scale
        # digits of sd scale the standard variate up
        work = random_scale + settings.evaluation_guard_digits + integer_digits(self.sd)

        u1 = uniform(source, random_scale)
        u2 = uniform(source, random_scale)
        with working_context(work):
            radius = sqrt(-TWO * ln(u1, work), work)
            angle = make_2pi(work) * u2
            standard = radius * cos(angle, work)
        with working_context(work, standard, self.mean, self.sd):
            value = standard * self.sd + self.mean
        return round_to_scale(value, random_scale)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mean={self.mean}, sd={self.sd})"


def _scales(scale: int | None) -> tuple[int, int]:
    """Resolve the result scale and the working scale of an evaluation."""
    settings = get_settings()
    if scale is None:
        scale = settings.default_scale
    return scale, scale + settings.evaluation_guard_digits


__all__ = [
    "Normal",
]
