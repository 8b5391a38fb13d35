"""
Families module with the parametrizations and built-in distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import KNUTH_MAX_LAMBDA, Normal, Poisson
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)

__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
    "KNUTH_MAX_LAMBDA",
    "Normal",
    "Poisson",
]
