from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from decimal import Decimal

import numpy as np
import pytest

from pysatl_decimal.arithmetic.random import (
    MAX_RANDOM_INT,
    NumpyRandomSource,
    RandomSource,
    default_random_source,
    reset_default_random_source,
    set_default_random_source,
    uniform,
)
from pysatl_decimal.settings import override_settings
from tests.utils.mocks import ScriptedRandomSource


class TestNumpyRandomSource:
    def test_implements_protocol(self):
        assert isinstance(NumpyRandomSource(), RandomSource)
        assert isinstance(ScriptedRandomSource([]), RandomSource)

    def test_seed_is_reproducible(self):
        first = NumpyRandomSource(seed=7)
        second = NumpyRandomSource(seed=7)
        assert [first.random_int(0, 1000) for _ in range(10)] == [
            second.random_int(0, 1000) for _ in range(10)
        ]

    def test_wraps_existing_generator(self):
        rng = np.random.default_rng(3)
        source = NumpyRandomSource(rng=rng)
        assert source.generator is rng

    def test_bounds_are_inclusive(self):
        source = NumpyRandomSource(seed=11)
        draws = {source.random_int(3, 5) for _ in range(200)}
        assert draws == {3, 4, 5}

    def test_single_point_range(self):
        assert NumpyRandomSource(seed=1).random_int(4, 4) == 4

    def test_full_range(self):
        value = NumpyRandomSource(seed=1).random_int(0, MAX_RANDOM_INT)
        assert 0 <= value <= MAX_RANDOM_INT
        assert isinstance(value, int)

    def test_empty_range(self):
        with pytest.raises(ValueError, match="Empty range"):
            NumpyRandomSource().random_int(5, 4)


class TestDefaultRandomSource:
    def test_set_returns_previous(self):
        original = default_random_source()
        replacement = ScriptedRandomSource([1])
        assert set_default_random_source(replacement) is original
        assert default_random_source() is replacement

    def test_set_rejects_non_sources(self):
        with pytest.raises(TypeError):
            set_default_random_source(object())  # type: ignore[arg-type]

    def test_reset_with_seed(self):
        reset_default_random_source(seed=5)
        expected = NumpyRandomSource(seed=5).random_int(0, 10**6)
        assert default_random_source().random_int(0, 10**6) == expected


class TestUniform:
    def test_requests_open_interval(self):
        source = ScriptedRandomSource([12345])
        uniform(source)
        assert source.calls == [(1, MAX_RANDOM_INT - 1)]

    def test_midpoint(self):
        source = ScriptedRandomSource([MAX_RANDOM_INT // 2 + 1])
        assert uniform(source, 10) == Decimal("0.5000000000")

    def test_default_scale(self):
        value = uniform(NumpyRandomSource(seed=2))
        assert value.as_tuple().exponent == -20
        with override_settings(random_scale=6):
            assert uniform(NumpyRandomSource(seed=2)).as_tuple().exponent == -6

    def test_stays_off_endpoints(self):
        low = uniform(ScriptedRandomSource([1]), 5)
        high = uniform(ScriptedRandomSource([MAX_RANDOM_INT - 1]), 5)
        assert low == Decimal("0.00001")
        assert high == Decimal("0.99999")

    def test_values_inside_unit_interval(self):
        source = NumpyRandomSource(seed=4)
        values = [uniform(source) for _ in range(500)]
        assert all(Decimal(0) < v < Decimal(1) for v in values)
        assert abs(sum(values) / len(values) - Decimal("0.5")) < Decimal("0.05")
