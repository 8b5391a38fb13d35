"""
Exception hierarchy raised by distributions and their parametrizations.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    from pysatl_decimal.types import DecimalLike


class DistributionError(Exception):
    """Base class for errors raised by PySATL Decimal."""


class InvalidParameterError(DistributionError, ValueError):
    """
    Raised when distribution parameters violate a parametrization constraint.

    Construction is rejected, so no partially built distribution escapes.

    Parameters
    ----------
    description : str
        Human-readable description of the violated constraint.
    family : str, optional
        Family the parameters were given for.
    parametrization : str, optional
        Name of the parametrization holding the constraint.
    """

    def __init__(
        self,
        description: str,
        family: str | None = None,
        parametrization: str | None = None,
    ) -> None:
        self.description = description
        self.family = family
        self.parametrization = parametrization
        message = f'Constraint "{description}" does not hold'
        if family is not None:
            message += f" for {family} ({parametrization})"
        super().__init__(message)


class NonIntegerInputError(DistributionError, ValueError):
    """
    Raised when a discrete distribution is evaluated at a non-whole point.
    """

    def __init__(self, value: DecimalLike, characteristic: str) -> None:
        self.value = value
        self.characteristic = characteristic
        super().__init__(
            f"Only integers are valid x values for discrete distributions; "
            f"cannot compute the {characteristic} at {value}"
        )


class RangeExhaustedError(DistributionError, RuntimeError):
    """
    Raised when no random draw fell inside the requested range.

    Attributes
    ----------
    min_value, max_value : DecimalLike
        The requested closed range.
    max_iterations : int
        Number of draws that were attempted.
    last_value : Decimal
        The last value drawn before giving up.
    """

    def __init__(
        self,
        min_value: DecimalLike,
        max_value: DecimalLike,
        max_iterations: int,
        last_value: Decimal,
    ) -> None:
        self.min_value = min_value
        self.max_value = max_value
        self.max_iterations = max_iterations
        self.last_value = last_value
        super().__init__(
            f"A random number restricted by min ({min_value}) and max ({max_value}) "
            f"could not be found within {max_iterations} iterations; "
            f"last value drawn was {last_value}"
        )


class IterationBudgetExceededError(DistributionError, RuntimeError):
    """
    Raised when a configured iteration budget of an open-ended loop runs out.
    """

    def __init__(self, loop: str, budget: int) -> None:
        self.loop = loop
        self.budget = budget
        super().__init__(f"{loop} did not finish within {budget} iterations")


__all__ = [
    "DistributionError",
    "InvalidParameterError",
    "NonIntegerInputError",
    "RangeExhaustedError",
    "IterationBudgetExceededError",
]
