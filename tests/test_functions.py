"""Tests for the sample function catalog."""

import math

import pytest

from numeric_lab.data.functions import (
    FunctionSpec,
    exact_integral,
    get_function,
    list_functions,
)


class TestGetFunction:
    """Tests for get_function."""

    def test_lookup_is_case_insensitive(self) -> None:
        """Names are matched case-insensitively."""
        assert get_function("EXP") is get_function("exp")

    def test_unknown_name_raises(self) -> None:
        """Unknown names should raise ValueError listing valid names."""
        with pytest.raises(ValueError, match="Unknown function"):
            get_function("tan")

    def test_spec_is_callable(self) -> None:
        """FunctionSpec evaluates its function when called."""
        assert get_function("poly")(2.0) == 0.0


class TestCatalog:
    """Consistency checks over every catalog entry."""

    @pytest.fixture(params=[spec.name for spec in list_functions()])
    def spec(self, request) -> FunctionSpec:
        return get_function(request.param)

    def test_immutable(self, spec: FunctionSpec) -> None:
        """FunctionSpec should be immutable."""
        with pytest.raises(AttributeError):
            spec.name = "other"  # type: ignore[misc]

    def test_derivative_matches_antiderivative(self, spec: FunctionSpec) -> None:
        """F' = f at an interior point (checked with a wide central difference)."""
        x, h = 0.7, 1e-5
        slope = (spec.antiderivative(x + h) - spec.antiderivative(x - h)) / (2 * h)
        assert slope == pytest.approx(spec.func(x), rel=1e-6)

    def test_derivative_closed_form(self, spec: FunctionSpec) -> None:
        """Closed-form derivative agrees with a wide central difference."""
        x, h = 0.7, 1e-5
        slope = (spec.func(x + h) - spec.func(x - h)) / (2 * h)
        assert slope == pytest.approx(spec.derivative(x), rel=1e-6)


class TestExactIntegral:
    """Tests for exact_integral."""

    def test_exponential(self) -> None:
        """∫ e^x over [0, 3] is e^3 - 1."""
        assert exact_integral(get_function("exp"), 0.0, 3.0) == pytest.approx(
            math.e**3 - 1.0
        )

    def test_reversed_bounds_negate(self) -> None:
        """The closed form is signed."""
        spec = get_function("quadratic")
        assert exact_integral(spec, 1.0, 0.0) == pytest.approx(-1.0 / 3.0)
