"""
Settings
========

Process-wide configuration of scales and iteration budgets.

- :class:`Settings` — immutable snapshot of the configuration.
- :func:`get_settings` / :func:`configure` / :func:`reset_settings` — read and
  replace the active snapshot.
- :func:`override_settings` — temporary overrides, restored on exit.

Notes
-----
- Budgets set to ``None`` leave the corresponding loop unbounded.
- Distributions read the settings at call time; nothing is cached.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

logger = logging.getLogger(__name__)

_OPTIONAL_BUDGETS = frozenset({"rejection_max_iterations", "cdf_product_max_terms"})


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Configuration snapshot.

    Parameters
    ----------
    default_scale : int, default 10
        Number of fractional digits returned when a method gets ``scale=None``.
    evaluation_guard_digits : int, default 10
        Extra digits carried by continuous evaluations before rounding.
    constant_scale : int, default 50
        Scale of module level constants such as ``TAU``.
    random_scale : int, default 20
        Scale of uniform variates and of generated random values.
    range_random_max_iterations : int, default 20
        Default number of draws attempted by ``range_random``.
    rejection_max_iterations : int or None, default None
        Budget of the Poisson rejection sampler.
    cdf_product_max_terms : int or None, default None
        Budget of the derivative series in ``Normal.cdf_product``.
    """

    default_scale: int = 10
    evaluation_guard_digits: int = 10
    constant_scale: int = 50
    random_scale: int = 20
    range_random_max_iterations: int = 20
    rejection_max_iterations: int | None = None
    cdf_product_max_terms: int | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None and f.name in _OPTIONAL_BUDGETS:
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Setting '{f.name}' must be an int, got {value!r}")
            if f.name == "evaluation_guard_digits":
                if value < 0:
                    raise ValueError("Setting 'evaluation_guard_digits' must be >= 0")
            elif value <= 0:
                raise ValueError(f"Setting '{f.name}' must be positive, got {value}")


_DEFAULTS = Settings()
_active: Settings = _DEFAULTS


def get_settings() -> Settings:
    """Return the active settings snapshot."""
    return _active


def configure(**changes: Any) -> Settings:
    """
    Replace selected fields of the active settings.

    Parameters
    ----------
    **changes
        Field names of :class:`Settings` and their new values.

    Returns
    -------
    Settings
        The new active snapshot.

    Raises
    ------
    TypeError
        If an unknown field is given or a value has the wrong type.
    ValueError
        If a scale or budget is not positive.
    """
    global _active
    _active = replace(_active, **changes)
    logger.debug("Settings updated: %s", changes)
    return _active


def reset_settings() -> None:
    """
    Restore the default settings.
    """
    global _active
    _active = _DEFAULTS


@contextmanager
def override_settings(**changes: Any) -> Iterator[Settings]:
    """
    Temporarily replace selected settings.

    The previous snapshot is restored on exit, even when the body raises.
    """
    global _active
    previous = _active
    try:
        yield configure(**changes)
    finally:
        _active = previous


__all__ = [
    "Settings",
    "get_settings",
    "configure",
    "reset_settings",
    "override_settings",
]
