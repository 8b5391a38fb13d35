from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from decimal import Decimal

import numpy as np

from pysatl_decimal.distributions.sampling import DecimalSample


class TestDecimalSample:
    def setup_method(self):
        self.sample = DecimalSample([1, "2.5", Decimal("-0.25")])

    def test_values_are_coerced(self):
        assert self.sample.values == (Decimal(1), Decimal("2.5"), Decimal("-0.25"))
        assert all(isinstance(v, Decimal) for v in self.sample)

    def test_push_appends_in_order(self):
        result = self.sample.push(7)
        assert result is self.sample
        assert len(self.sample) == 4
        assert self.sample[-1] == Decimal(7)

    def test_empty(self):
        sample = DecimalSample()
        assert len(sample) == 0
        assert sample.shape == (0, 1)
        assert sample.array.shape == (0, 1)

    def test_indexing_and_slicing(self):
        assert self.sample[1] == Decimal("2.5")
        head = self.sample[:2]
        assert isinstance(head, DecimalSample)
        assert head == DecimalSample([1, "2.5"])

    def test_array_view(self):
        arr = self.sample.array
        assert arr.dtype == np.float64
        assert arr.shape == (3, 1)
        assert np.allclose(arr[:, 0], [1.0, 2.5, -0.25])
        assert self.sample.shape == (3, 1)

    def test_equality(self):
        assert self.sample == DecimalSample(["1", 2.5, "-0.25"])
        assert self.sample != DecimalSample([1])
        assert self.sample.__eq__([1]) is NotImplemented

    def test_repr(self):
        assert repr(DecimalSample([1, "0.5"])) == "DecimalSample(['1', '0.5'])"
