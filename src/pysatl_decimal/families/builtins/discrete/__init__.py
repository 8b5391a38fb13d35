"""
Built-in discrete distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_decimal.families.builtins.discrete.poisson import KNUTH_MAX_LAMBDA, Poisson

__all__ = [
    "KNUTH_MAX_LAMBDA",
    "Poisson",
]
