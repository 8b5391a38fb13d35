"""
Built-in continuous distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_decimal.families.builtins.continuous.normal import Normal

__all__ = [
    "Normal",
]
