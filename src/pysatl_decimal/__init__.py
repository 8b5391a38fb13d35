"""
PySATL Decimal
==============

Normal and Poisson distributions evaluated on arbitrary-precision decimals:
densities, cumulative probabilities, quantile fits, z-scores and random
variates at a caller-chosen decimal scale.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .arithmetic import *
from .arithmetic import __all__ as _arithmetic_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .settings import *
from .settings import __all__ as _settings_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-decimal")
__all__ = [
    "__version__",
    *_arithmetic_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_settings_all,
    *_types_all,
]

del _arithmetic_all
del _distr_all
del _errors_all
del _family_all
del _settings_all
del _types_all
