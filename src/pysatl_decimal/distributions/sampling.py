"""
Sampling Containers
===================

This module defines the protocol and the decimal implementation of sample
containers returned by distribution sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, overload

import numpy as np

from pysatl_decimal.arithmetic.decimal_math import to_decimal

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from decimal import Decimal
    from typing import Any

    import numpy.typing as npt

    from pysatl_decimal.types import DecimalLike


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Floating-point view of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class DecimalSample:
    """
    Ordered collection of decimal samples.

    Values keep their insertion order and are only ever appended.

    Parameters
    ----------
    values : Iterable[DecimalLike], optional
        Initial values, coerced to :class:`~decimal.Decimal`.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[DecimalLike] = ()) -> None:
        self._values: list[Decimal] = [to_decimal(v) for v in values]

    def push(self, value: DecimalLike) -> DecimalSample:
        """Append a value and return the container."""
        self._values.append(to_decimal(value))
        return self

    def __len__(self) -> int:
        """Return the number of samples."""
        return len(self._values)

    def __iter__(self) -> Iterator[Decimal]:
        """Iterate over samples in insertion order."""
        yield from self._values

    @overload
    def __getitem__(self, index: int) -> Decimal: ...
    @overload
    def __getitem__(self, index: slice) -> DecimalSample: ...

    def __getitem__(self, index: int | slice) -> Decimal | DecimalSample:
        if isinstance(index, slice):
            return DecimalSample(self._values[index])
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalSample):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(v) for v in self._values]})"

    @property
    def values(self) -> tuple[Decimal, ...]:
        """Return the samples as an immutable tuple."""
        return tuple(self._values)

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return a ``float64`` array of shape ``(n, 1)``."""
        return np.array([float(v) for v in self._values], dtype=np.float64).reshape(-1, 1)

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array ``(n, 1)``."""
        return len(self._values), 1


__all__ = [
    "Sample",
    "DecimalSample",
]
