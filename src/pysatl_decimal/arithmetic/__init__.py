"""
Arithmetic subpackage

Arbitrary-precision building blocks over :class:`decimal.Decimal`:

- scale-aware elementary functions (:mod:`.decimal_math`);
- mathematical constants (:mod:`.constants`);
- error function and normal quantiles (:mod:`.special`);
- uniform random sources (:mod:`.random`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .constants import TAU, make_2pi, make_e, make_one, make_pi, make_zero
from .decimal_math import round_to_scale, to_decimal, truncate_to_scale
from .random import (
    MAX_RANDOM_INT,
    NumpyRandomSource,
    RandomSource,
    default_random_source,
    reset_default_random_source,
    set_default_random_source,
)
from .special import gauss_error_function, inverse_normal_cdf, normal_ppf

__all__ = [
    # constants
    "TAU",
    "make_zero",
    "make_one",
    "make_pi",
    "make_2pi",
    "make_e",
    # decimal helpers
    "to_decimal",
    "round_to_scale",
    "truncate_to_scale",
    # random sources
    "MAX_RANDOM_INT",
    "RandomSource",
    "NumpyRandomSource",
    "default_random_source",
    "set_default_random_source",
    "reset_default_random_source",
    # special functions
    "gauss_error_function",
    "normal_ppf",
    "inverse_normal_cdf",
]
