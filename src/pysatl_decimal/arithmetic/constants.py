"""
Mathematical constants at arbitrary scale.

Values are computed once per scale and cached; every constant is rounded
half-up to the requested number of fractional digits.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from functools import lru_cache

from pysatl_decimal.settings import get_settings

_GUARD = 5


def _resolve(scale: int | None) -> int:
    if scale is None:
        return get_settings().constant_scale
    if scale < 0:
        raise ValueError(f"Scale must be non-negative, got {scale}")
    return scale


def _finish(value: Decimal, scale: int) -> Decimal:
    with localcontext(Context(prec=scale + _GUARD + 2)):
        return value.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)


@lru_cache(maxsize=64)
def _pi(scale: int) -> Decimal:
    with localcontext(Context(prec=scale + _GUARD + 2)):
        three = Decimal(3)
        last, t, s, n, na, d, da = Decimal(0), three, three, 1, 0, 0, 24
        while s != last:
            last = s
            n, na = n + na, na + 8
            d, da = d + da, da + 32
            t = (t * n) / d
            s += t
    return _finish(s, scale)


@lru_cache(maxsize=64)
def _e(scale: int) -> Decimal:
    with localcontext(Context(prec=scale + _GUARD + 2)):
        value = Decimal(1).exp()
    return _finish(value, scale)


def make_zero() -> Decimal:
    """Return ``0``."""
    return Decimal(0)


def make_one() -> Decimal:
    """Return ``1``."""
    return Decimal(1)


def make_pi(scale: int | None = None) -> Decimal:
    """
    Return pi rounded to ``scale`` fractional digits.

    Parameters
    ----------
    scale : int, optional
        Fractional digits. Defaults to ``Settings.constant_scale``.
    """
    return _pi(_resolve(scale))


def make_2pi(scale: int | None = None) -> Decimal:
    """Return 2*pi rounded to ``scale`` fractional digits."""
    resolved = _resolve(scale)
    with localcontext(Context(prec=resolved + _GUARD + 2)):
        doubled = 2 * _pi(resolved + _GUARD)
    return _finish(doubled, resolved)


def make_e(scale: int | None = None) -> Decimal:
    """Return Euler's number rounded to ``scale`` fractional digits."""
    return _e(_resolve(scale))


TAU = make_2pi()
"""2*pi at the default constant scale."""


__all__ = [
    "make_zero",
    "make_one",
    "make_pi",
    "make_2pi",
    "make_e",
    "TAU",
]
