from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError, is_dataclass
from decimal import Decimal

import pytest

from pysatl_decimal.errors import InvalidParameterError
from pysatl_decimal.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_decimal.types import FamilyName


@parametrization(family=FamilyName.POISSON, name="bounded")
class _Bounded(Parametrization):
    low: Decimal
    high: Decimal

    @constraint(description="low >= 0")
    def check_low(self) -> bool:
        return self.low >= 0

    @constraint(description="low < high")
    def check_order(self) -> bool:
        return self.low < self.high


class TestParametrization:
    def setup_method(self):
        self.params = _Bounded(low=Decimal(1), high=Decimal(3))

    def test_is_frozen_dataclass(self):
        assert is_dataclass(self.params)
        with pytest.raises(FrozenInstanceError):
            self.params.low = Decimal(2)  # type: ignore[misc]

    def test_metadata(self):
        assert self.params.name == "bounded"
        assert self.params.family is FamilyName.POISSON
        assert self.params.parameters == {"low": Decimal(1), "high": Decimal(3)}

    def test_constraints_are_collected(self):
        descriptions = [c.description for c in self.params.constraints]
        assert descriptions == ["low >= 0", "low < high"]

    def test_valid_parameters(self):
        self.params.validate()

    @pytest.mark.parametrize(
        "low, high, description",
        [(-1, 3, "low >= 0"), (5, 3, "low < high")],
    )
    def test_violations(self, low, high, description):
        params = _Bounded(low=Decimal(low), high=Decimal(high))
        with pytest.raises(InvalidParameterError, match=description) as excinfo:
            params.validate()
        assert excinfo.value.description == description
        assert excinfo.value.family is FamilyName.POISSON
        assert excinfo.value.parametrization == "bounded"
        assert isinstance(excinfo.value, ValueError)

    def test_constraint_keeps_function_name(self):
        assert _Bounded.check_low.__name__ == "check_low"


class TestParametrizationDecorator:
    def test_static_constraint_is_rejected(self):
        with pytest.raises(TypeError, match="staticmethod"):

            @parametrization(family=FamilyName.NORMAL, name="broken")
            class _Broken(Parametrization):
                value: Decimal

                @staticmethod
                def check() -> bool:
                    return True

    def test_class_constraint_is_rejected(self):
        with pytest.raises(TypeError, match="classmethod"):

            @parametrization(family=FamilyName.NORMAL, name="broken")
            class _Broken(Parametrization):
                value: Decimal

                @classmethod
                def check(cls) -> bool:
                    return True

    def test_without_constraints(self):
        @parametrization(family=FamilyName.NORMAL, name="free")
        class _Free(Parametrization):
            value: Decimal

        params = _Free(value=Decimal(-1))
        params.validate()
        assert params.constraints == []
