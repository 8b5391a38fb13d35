"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol shared by all
concrete distributions:

- ``random`` — one variate (abstract);
- ``random_sample`` — a :class:`~pysatl_decimal.distributions.sampling.DecimalSample`
  of variates;
- ``range_random`` — a variate restricted to a closed range, by bounded retry.

Notes
-----
- ``random_sample(n)`` draws ``n - 1`` values. This matches the historical
  behaviour callers depend on.
- Random sources resolve in this order: the ``random_source`` argument, the
  source given to the distribution at construction, the process default.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_decimal.arithmetic.decimal_math import to_decimal
from pysatl_decimal.arithmetic.random import MAX_RANDOM_INT, default_random_source
from pysatl_decimal.distributions.sampling import DecimalSample
from pysatl_decimal.errors import RangeExhaustedError
from pysatl_decimal.settings import get_settings
from pysatl_decimal.types import Interval1D

if TYPE_CHECKING:
    from decimal import Decimal

    from pysatl_decimal.arithmetic.random import RandomSource
    from pysatl_decimal.distributions.support import Support
    from pysatl_decimal.types import DecimalLike, DistributionType

logger = logging.getLogger(__name__)


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface with shared sampling behaviour."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> Support: ...

    @property
    def random_source(self) -> RandomSource | None: ...

    def random(self, random_source: RandomSource | None = None) -> Decimal: ...

    def resolve_random_source(self, random_source: RandomSource | None = None) -> RandomSource:
        """
        Pick the random source for a sampling call.

        Parameters
        ----------
        random_source : RandomSource, optional
            Per-call override.

        Returns
        -------
        RandomSource
            The override, else the instance source, else the process default.
        """
        if random_source is not None:
            return random_source
        if self.random_source is not None:
            return self.random_source
        return default_random_source()

    def random_sample(
        self, sample_size: int = 10, random_source: RandomSource | None = None
    ) -> DecimalSample:
        """
        Draw a sample of variates.

        Parameters
        ----------
        sample_size : int, default 10
            Requested size. ``sample_size - 1`` values are drawn.
        random_source : RandomSource, optional
            Per-call random source.

        Returns
        -------
        DecimalSample
            Values in draw order.
        """
        source = self.resolve_random_source(random_source)
        sample = DecimalSample()
        for _ in range(1, sample_size):
            sample.push(self.random(source))
        return sample

    def range_random(
        self,
        min_value: DecimalLike = 0,
        max_value: DecimalLike = MAX_RANDOM_INT,
        max_iterations: int | None = None,
        random_source: RandomSource | None = None,
    ) -> Decimal:
        """
        Draw a variate restricted to ``[min_value, max_value]``.

        Draws are repeated until one lands in the closed range or
        ``max_iterations`` draws have been made. At least one draw is made.

        Parameters
        ----------
        min_value, max_value : DecimalLike
            Closed range the result must fall in.
        max_iterations : int, optional
            Draw budget. Defaults to ``Settings.range_random_max_iterations``.
        random_source : RandomSource, optional
            Per-call random source.

        Returns
        -------
        Decimal
            The first in-range draw.

        Raises
        ------
        RangeExhaustedError
            If no draw fell in the range within the budget.
        """
        if max_iterations is None:
            max_iterations = get_settings().range_random_max_iterations
        bounds = Interval1D(left=to_decimal(min_value), right=to_decimal(max_value))
        source = self.resolve_random_source(random_source)

        attempts = 0
        while True:
            value = self.random(source)
            attempts += 1
            if value in bounds:
                logger.debug("range_random accepted %s after %d draws", value, attempts)
                return value
            if attempts >= max_iterations:
                break

        raise RangeExhaustedError(min_value, max_value, attempts, value)
