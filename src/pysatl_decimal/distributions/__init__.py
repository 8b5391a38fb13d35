"""
Distributions subpackage

Interfaces shared by the distributions of PySATL Decimal:

- distribution protocol (:mod:`.distribution`);
- sample containers (:mod:`.sampling`);
- supports (:mod:`.support`);
- differentiable functions for product series (:mod:`.functions`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import Distribution
from .functions import DifferentiableFunction, Polynomial
from .sampling import DecimalSample, Sample
from .support import ContinuousSupport, DiscreteSupport, IntegerSupport, Support

__all__ = [
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "DecimalSample",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerSupport",
    # functions
    "DifferentiableFunction",
    "Polynomial",
]
