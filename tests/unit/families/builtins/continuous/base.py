"""
Common fixtures and utilities for distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from decimal import Decimal

from pysatl_decimal.arithmetic.decimal_math import to_decimal
from pysatl_decimal.types import DecimalLike


class BaseDistributionTest:
    """Base class for all distribution tests"""

    # Tolerance for comparisons against double precision references
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def assert_decimal_almost_equal(
        actual: Decimal, expected: DecimalLike, tolerance: DecimalLike = "1e-10"
    ) -> None:
        """Helper method to assert decimals agree within ``tolerance``."""
        difference = abs(actual - to_decimal(expected))
        assert difference <= to_decimal(tolerance), f"{actual} != {expected} (+- {tolerance})"
