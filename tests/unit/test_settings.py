from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_decimal.settings import (
    Settings,
    configure,
    get_settings,
    override_settings,
    reset_settings,
)


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings == Settings()
        assert settings.default_scale == 10
        assert settings.evaluation_guard_digits == 10
        assert settings.constant_scale == 50
        assert settings.random_scale == 20
        assert settings.range_random_max_iterations == 20
        assert settings.rejection_max_iterations is None
        assert settings.cdf_product_max_terms is None

    def test_configure_replaces_snapshot(self):
        before = get_settings()
        after = configure(default_scale=4, rejection_max_iterations=100)
        assert get_settings() is after
        assert after.default_scale == 4
        assert after.rejection_max_iterations == 100
        assert before.default_scale == 10

    def test_reset(self):
        configure(random_scale=5)
        reset_settings()
        assert get_settings() == Settings()

    def test_unknown_field(self):
        with pytest.raises(TypeError):
            configure(precision=3)

    @pytest.mark.parametrize(
        "changes",
        [
            {"default_scale": 0},
            {"random_scale": -1},
            {"range_random_max_iterations": 0},
            {"cdf_product_max_terms": 0},
            {"evaluation_guard_digits": -1},
        ],
    )
    def test_non_positive_values(self, changes):
        with pytest.raises(ValueError):
            configure(**changes)
        assert get_settings() == Settings()

    @pytest.mark.parametrize(
        "changes",
        [
            {"default_scale": "10"},
            {"default_scale": True},
            {"default_scale": None},
            {"range_random_max_iterations": None},
        ],
    )
    def test_wrong_types(self, changes):
        with pytest.raises(TypeError):
            configure(**changes)

    def test_zero_guard_digits_allowed(self):
        assert configure(evaluation_guard_digits=0).evaluation_guard_digits == 0

    def test_budgets_can_be_unset(self):
        configure(cdf_product_max_terms=5)
        assert configure(cdf_product_max_terms=None).cdf_product_max_terms is None

    def test_override_restores(self):
        with override_settings(default_scale=3) as settings:
            assert settings.default_scale == 3
            assert get_settings().default_scale == 3
        assert get_settings().default_scale == 10

    def test_override_restores_on_error(self):
        with pytest.raises(RuntimeError), override_settings(default_scale=3):
            raise RuntimeError("boom")
        assert get_settings().default_scale == 10

    def test_frozen(self):
        with pytest.raises(AttributeError):
            get_settings().default_scale = 3  # type: ignore[misc]
