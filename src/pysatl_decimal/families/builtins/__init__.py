"""
Built-in distributions of PySATL Decimal.

This package contains the distributions that are available by default:
the continuous Normal and the discrete Poisson.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_decimal.families.builtins.continuous import Normal
from pysatl_decimal.families.builtins.discrete import KNUTH_MAX_LAMBDA, Poisson

__all__ = [
    "KNUTH_MAX_LAMBDA",
    "Normal",
    "Poisson",
]
