__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from decimal import Decimal

import pytest
from scipy.special import erf, ndtri

from pysatl_decimal.arithmetic.special import (
    gauss_error_function,
    inverse_normal_cdf,
    normal_ppf,
)
from pysatl_decimal.families import Normal
from pysatl_decimal.settings import override_settings


class TestGaussErrorFunction:
    """Test suite for the arbitrary-precision error function."""

    CALCULATION_PRECISION = 1e-10

    @pytest.mark.parametrize(
        "x, expected",
        [
            (0, "0.0000000000"),
            (1, "0.8427007929"),
            (-1, "-0.8427007929"),
            ("0.5", "0.5204998778"),
            (10, "1.0000000000"),
            (-10, "-1.0000000000"),
        ],
    )
    def test_known_values(self, x, expected):
        assert gauss_error_function(x, 10) == Decimal(expected)

    @pytest.mark.parametrize("x", [-3.2, -0.7, 0.01, 0.3, 1.7, 2.5, 4.0])
    def test_matches_scipy(self, x):
        assert abs(float(gauss_error_function(x, 15)) - erf(x)) < self.CALCULATION_PRECISION

    def test_odd_symmetry(self):
        assert gauss_error_function("1.234", 20) == -gauss_error_function("-1.234", 20)

    def test_high_scale(self):
        assert str(gauss_error_function(1, 30)) == "0.842700792949714869341220635083"

    def test_default_scale(self):
        with override_settings(default_scale=4):
            assert str(gauss_error_function(1)) == "0.8427"


class TestNormalQuantiles:
    """Test suite for the lower- and upper-tail normal quantiles."""

    @pytest.mark.parametrize(
        "p, expected",
        [
            ("0.5", "0.0000000000"),
            ("0.975", "1.9599639845"),
            ("0.025", "-1.9599639845"),
            ("0.1", "-1.2815515655"),
            ("0.9", "1.2815515655"),
        ],
    )
    def test_known_values(self, p, expected):
        assert normal_ppf(p, 10) == Decimal(expected)

    def test_endpoints(self):
        assert normal_ppf(0) == Decimal("-Infinity")
        assert normal_ppf(1) == Decimal("Infinity")

    @pytest.mark.parametrize("p", [-0.1, "1.5"])
    def test_out_of_range(self, p):
        with pytest.raises(ValueError, match="Probability must be in"):
            normal_ppf(p)

    @pytest.mark.parametrize("p", [1e-20, 1e-8, 0.001, 0.3, 0.999])
    def test_matches_scipy(self, p):
        assert abs(float(normal_ppf(p, 12)) - ndtri(p)) < 1e-8 * max(1.0, abs(ndtri(p)))

    @pytest.mark.parametrize("p", ["0.001", "0.2", "0.5", "0.7", "0.99"])
    def test_inverts_cdf(self, p):
        standard = Normal(0, 1)
        z = normal_ppf(p, 15)
        assert abs(standard.cdf(z, 12) - Decimal(p)) <= Decimal("1e-12")

    def test_upper_tail_convention(self):
        assert inverse_normal_cdf("0.9", 10) == Decimal("-1.2815515655")
        assert inverse_normal_cdf("0.1", 10) == normal_ppf("0.9", 10)

    def test_upper_tail_out_of_range(self):
        with pytest.raises(ValueError):
            inverse_normal_cdf(2)
