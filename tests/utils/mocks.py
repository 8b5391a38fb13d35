from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pysatl_decimal.arithmetic.decimal_math import to_decimal
from pysatl_decimal.arithmetic.random import MAX_RANDOM_INT
from pysatl_decimal.distributions import ContinuousSupport, Distribution
from pysatl_decimal.types import UnivariateContinuous

if TYPE_CHECKING:
    from decimal import Decimal

    from pysatl_decimal.arithmetic.random import RandomSource
    from pysatl_decimal.types import DecimalLike, EuclideanDistributionType


class ScriptedRandomSource:
    """
    Random source replaying a fixed list of integers.

    Values outside the requested range raise ``AssertionError`` so tests
    notice scripts that do not fit the caller.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    @classmethod
    def from_uniforms(cls, uniforms: Iterable[DecimalLike]) -> ScriptedRandomSource:
        """Script integers that ``uniform`` maps back to the given fractions."""
        return cls(int(to_decimal(u) * MAX_RANDOM_INT) for u in uniforms)

    @property
    def remaining(self) -> int:
        return len(self._values)

    def random_int(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self._values:
            raise AssertionError("ScriptedRandomSource ran out of values")
        value = self._values.pop(0)
        assert low <= value <= high, f"{value} outside [{low}, {high}]"
        return value


class SequenceDistribution(Distribution):
    """
    Distribution returning a fixed sequence of values from ``random``.

    The sequence repeats once exhausted; ``draws`` counts calls.
    """

    def __init__(
        self,
        values: Iterable[DecimalLike],
        random_source: RandomSource | None = None,
    ) -> None:
        self._values = [to_decimal(v) for v in values]
        self._random_source = random_source
        self.draws = 0
        self.sources: list[RandomSource] = []

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    @property
    def random_source(self) -> RandomSource | None:
        return self._random_source

    def random(self, random_source: RandomSource | None = None) -> Decimal:
        self.sources.append(self.resolve_random_source(random_source))
        value = self._values[self.draws % len(self._values)]
        self.draws += 1
        return value
