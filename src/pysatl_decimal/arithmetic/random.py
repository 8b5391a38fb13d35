"""
Uniform Random Sources
======================

Distributions never own a generator; they draw integers from a
:class:`RandomSource` handed to them (or the process default) and scale the
draws into ``(0, 1)`` with :func:`uniform`.

Notes
-----
- The default source wraps :func:`numpy.random.default_rng` and is not
  synchronised; concurrent samplers should each inject their own source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_decimal.arithmetic.decimal_math import ONE, round_to_scale, working_context
from pysatl_decimal.settings import get_settings

if TYPE_CHECKING:
    from typing import Any

MAX_RANDOM_INT: int = 2**63 - 1
"""Upper bound of the integers drawn by distributions; uniforms are draws over it."""


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for uniform integer generators."""

    def random_int(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high]``."""
        ...


class NumpyRandomSource:
    """
    Random source backed by a NumPy :class:`~numpy.random.Generator`.

    Parameters
    ----------
    seed : int or numpy.random.SeedSequence, optional
        Seed passed to :func:`numpy.random.default_rng`. Ignored if ``rng``
        is given.
    rng : numpy.random.Generator, optional
        Existing generator to draw from.
    """

    __slots__ = ("_rng",)

    def __init__(
        self,
        seed: int | np.random.SeedSequence | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """The wrapped NumPy generator."""
        return self._rng

    def random_int(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range: low ({low}) > high ({high})")
        return int(self._rng.integers(low, high, endpoint=True))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rng!r})"


_default_source: RandomSource = NumpyRandomSource()


def default_random_source() -> RandomSource:
    """Return the process-wide random source."""
    return _default_source


def set_default_random_source(source: RandomSource) -> RandomSource:
    """
    Replace the process-wide random source.

    Returns
    -------
    RandomSource
        The previously installed source.
    """
    global _default_source
    if not isinstance(source, RandomSource):
        raise TypeError(f"{source!r} does not implement random_int(low, high)")
    previous, _default_source = _default_source, source
    return previous


def reset_default_random_source(**options: Any) -> None:
    """
    Install a fresh :class:`NumpyRandomSource` as the default.

    Parameters
    ----------
    **options
        Passed to :class:`NumpyRandomSource` (e.g. ``seed``).
    """
    global _default_source
    _default_source = NumpyRandomSource(**options)


def uniform(source: RandomSource, scale: int | None = None) -> Decimal:
    """
    Draw a decimal uniformly from the open interval ``(0, 1)``.

    An integer from ``[1, MAX_RANDOM_INT - 1]`` is divided by
    ``MAX_RANDOM_INT``; the quotient is rounded to ``scale`` digits and kept
    off both endpoints.

    Parameters
    ----------
    source : RandomSource
        Generator to draw from.
    scale : int, optional
        Fractional digits. Defaults to ``Settings.random_scale``.
    """
    if scale is None:
        scale = get_settings().random_scale
    numerator = source.random_int(1, MAX_RANDOM_INT - 1)

    with working_context(scale):
        value = round_to_scale(Decimal(numerator) / Decimal(MAX_RANDOM_INT), scale)
        step = ONE.scaleb(-scale)
        if value <= 0:
            value = step
        elif value >= ONE:
            value = ONE - step
    return value


__all__ = [
    "MAX_RANDOM_INT",
    "RandomSource",
    "NumpyRandomSource",
    "default_random_source",
    "set_default_random_source",
    "reset_default_random_source",
    "uniform",
]
