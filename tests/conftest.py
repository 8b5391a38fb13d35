from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_decimal.arithmetic.random import reset_default_random_source
from pysatl_decimal.settings import reset_settings

pytest.importorskip("scipy")

SEED = 20250101


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, Any, None]:
    reset_settings()
    reset_default_random_source(seed=SEED)
    yield
    reset_settings()
