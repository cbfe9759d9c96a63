"""Tests for finite-difference differentiation."""

import math

import pytest

from numeric_lab.algorithms.differentiation import (
    BASE_STEP_SIZE,
    stencil_differentiation,
    symmetric_differentiation,
)
from numeric_lab.arithmetic import round_dp

# Decimal places expected of derivative estimates
PRECISION = 10

POINTS = (0.0, 1.0, 1.5)


def linear(x: float) -> float:
    return 2.0 * x


def quadratic(x: float) -> float:
    return x**2


class TestBaseStepSize:
    """Tests for the default step."""

    def test_two_sqrt_machine_epsilon(self) -> None:
        """Default step is 2 * sqrt(eps) for 64-bit floats."""
        assert BASE_STEP_SIZE == 0.000000029802322387695313
        assert BASE_STEP_SIZE == pytest.approx(2.0 * math.sqrt(2.0**-52))


class TestSymmetricDifferentiation:
    """Tests for the symmetric difference quotient."""

    @pytest.mark.parametrize("point", POINTS)
    def test_linear(self, point: float) -> None:
        """Slope of a line is recovered exactly."""
        assert round_dp(symmetric_differentiation(point, linear), PRECISION) == 2.0

    @pytest.mark.parametrize("point,expected", [(0.0, 0.0), (1.0, 2.0), (1.5, 3.0)])
    def test_quadratic(self, point: float, expected: float) -> None:
        """d/dx x^2 = 2x."""
        assert round_dp(symmetric_differentiation(point, quadratic), PRECISION) == expected

    @pytest.mark.parametrize("point", [-2.0, 0.25, 3.0])
    def test_affine_with_offset(self, point: float) -> None:
        """Any m*x + c recovers m."""
        result = symmetric_differentiation(point, lambda x: -3.5 * x + 4.0)
        assert round_dp(result, 6) == -3.5

    def test_resolution_override(self) -> None:
        """A coarse step gives the O(h^2) error of the formula."""
        h = 0.1
        # (sin(x+h) - sin(x-h)) / 2h = cos(x) * sin(h) / h
        expected = math.cos(1.0) * math.sin(h) / h
        assert symmetric_differentiation(1.0, math.sin, h) == pytest.approx(expected)

    def test_evaluation_points(self) -> None:
        """Exactly two evaluations at x ± h."""
        calls: list[float] = []

        def record(x: float) -> float:
            calls.append(x)
            return x

        symmetric_differentiation(1.0, record, 0.5)
        assert calls == [1.5, 0.5]

    def test_nan_propagates(self) -> None:
        """Non-finite function values propagate instead of raising."""
        assert math.isnan(symmetric_differentiation(0.0, lambda x: float("nan")))


class TestStencilDifferentiation:
    """Tests for the five-point stencil."""

    @pytest.mark.parametrize("point", POINTS)
    def test_linear(self, point: float) -> None:
        """Slope of a line is recovered exactly."""
        assert round_dp(stencil_differentiation(point, linear), PRECISION) == 2.0

    @pytest.mark.parametrize("point,expected", [(0.0, 0.0), (1.0, 2.0), (1.5, 3.0)])
    def test_quadratic(self, point: float, expected: float) -> None:
        """d/dx x^2 = 2x."""
        assert round_dp(stencil_differentiation(point, quadratic), 6) == expected

    def test_exact_for_cubic_with_coarse_step(self) -> None:
        """The stencil is exact for polynomials up to degree four."""
        result = stencil_differentiation(2.0, lambda x: x**3, 0.5)
        assert result == pytest.approx(12.0, abs=1e-12)

    def test_more_accurate_than_symmetric(self) -> None:
        """O(h^4) beats O(h^2) at the same coarse step."""
        h = 0.1
        exact = math.cos(1.0)
        stencil_error = abs(stencil_differentiation(1.0, math.sin, h) - exact)
        symmetric_error = abs(symmetric_differentiation(1.0, math.sin, h) - exact)
        assert stencil_error < symmetric_error / 100

    def test_evaluation_points(self) -> None:
        """Four evaluations at x ± h and x ± 2h."""
        calls: list[float] = []

        def record(x: float) -> float:
            calls.append(x)
            return x

        stencil_differentiation(1.0, record, 0.25)
        assert sorted(calls) == [0.5, 0.75, 1.25, 1.5]
