from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_decimal.arithmetic.decimal_math import floor, is_natural, to_decimal
from pysatl_decimal.types import Interval1D

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_decimal.types import DecimalLike


@runtime_checkable
class Support(Protocol):
    def contains(self, x: DecimalLike) -> bool: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_leq(self, x: DecimalLike) -> Iterator[int]: ...

    def iter_between(self, a: DecimalLike, b: DecimalLike) -> Iterator[int]: ...


@dataclass(frozen=True, slots=True)
class IntegerSupport(DiscreteSupport):
    """
    Whole numbers from ``min_k`` upwards.

    Parameters
    ----------
    min_k : int, default 0
        Smallest point of the support.
    """

    min_k: int = 0

    def contains(self, x: DecimalLike) -> bool:
        if not is_natural(x):
            return False
        return int(to_decimal(x)) >= self.min_k

    def __contains__(self, x: object) -> bool:
        try:
            return self.contains(x)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def iter_between(self, a: DecimalLike, b: DecimalLike) -> Iterator[int]:
        """
        Iterate over support points in the closed range between ``a`` and ``b``.

        The endpoints may be given in either order.
        """
        low, high = sorted((to_decimal(a), to_decimal(b)))
        start = int(-floor(-low))
        stop = int(floor(high))
        yield from range(max(start, self.min_k), stop + 1)

    def iter_leq(self, x: DecimalLike) -> Iterator[int]:
        """Iterate over support points not greater than ``x``."""
        bound = to_decimal(x)
        if bound < self.min_k:
            return
        yield from self.iter_between(self.min_k, bound)


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerSupport",
]
