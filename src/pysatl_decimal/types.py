"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Decimal.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import TypeAlias

DecimalLike = Decimal | int | float | str
"""Type alias for values accepted wherever a decimal number is expected."""

POSITIVE_INFINITY = Decimal("Infinity")
NEGATIVE_INFINITY = Decimal("-Infinity")


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D decimal interval with configurable closure.

    Parameters
    ----------
    left : Decimal, default=-Infinity
        Left endpoint of the interval.
    right : Decimal, default=Infinity
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -Infinity).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = Infinity).
    """

    left: Decimal = NEGATIVE_INFINITY
    right: Decimal = POSITIVE_INFINITY
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Coerce endpoints and adjust closure for infinite endpoints."""
        object.__setattr__(self, "left", Decimal(str(self.left)))
        object.__setattr__(self, "right", Decimal(str(self.right)))
        if self.left == NEGATIVE_INFINITY and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == POSITIVE_INFINITY and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    def contains(self, x: DecimalLike) -> bool:
        """
        Check if a point is contained in the interval.

        Parameters
        ----------
        x : DecimalLike
            Point to check.

        Returns
        -------
        bool
            True when the point lies within the interval.
        """
        value = x if isinstance(x, Decimal) else Decimal(str(x))

        left_ok = value > self.left or (self.left_closed and value == self.left)
        right_ok = value < self.right or (self.right_closed and value == self.right)
        return left_ok and right_ok

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        if not isinstance(x, Decimal | int | float | str):
            return False
        return self.contains(x)


ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class FamilyName(StrEnum):
    NORMAL = "Normal"
    POISSON = "Poisson"


__all__ = [
    "DecimalLike",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "ParametrizationName",
    "DistributionType",
    "Interval1D",
    "FamilyName",
]
