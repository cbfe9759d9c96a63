"""Tests for CORDIC trigonometry."""

import math

import numpy as np
import pytest

from numeric_lab.algorithms.cordic import (
    CORDIC_GAIN,
    MAX_CORDIC_ITER,
    CordicResult,
    cordic,
    reduce_angle,
    trig,
)
from numeric_lab.arithmetic import round_dp

# Decimal places expected of trig estimates
PRECISION = 4


class TestTrig:
    """Tests for trig against the math module."""

    @pytest.mark.parametrize("theta", [1.0, 2.0, -1.0, -2.0])
    def test_cosine(self, theta: float) -> None:
        assert round_dp(trig(theta)[0], PRECISION) == round_dp(math.cos(theta), PRECISION)

    @pytest.mark.parametrize("theta", [1.0, 2.0, -1.0, -2.0])
    def test_sine(self, theta: float) -> None:
        assert round_dp(trig(theta)[1], PRECISION) == round_dp(math.sin(theta), PRECISION)

    @pytest.mark.parametrize("theta", np.linspace(-12.5, 12.5, 101).tolist())
    def test_all_quadrants(self, theta: float) -> None:
        """Signs are restored in every quadrant, for both signs of θ."""
        cos, sin = trig(theta)
        assert cos == pytest.approx(math.cos(theta), abs=1e-9)
        assert sin == pytest.approx(math.sin(theta), abs=1e-9)

    def test_zero(self) -> None:
        cos, sin = trig(0.0)
        assert cos == pytest.approx(1.0, abs=1e-9)
        assert sin == pytest.approx(0.0, abs=1e-9)

    def test_large_angle_is_finite(self) -> None:
        """Very large angles lose precision but do not raise."""
        cos, sin = trig(1e12)
        assert math.isfinite(cos) and math.isfinite(sin)
        assert cos**2 + sin**2 == pytest.approx(1.0, abs=1e-6)


class TestCordic:
    """Tests for the CordicResult diagnostics."""

    def test_immutable(self) -> None:
        """CordicResult should be immutable."""
        result = cordic(1.0)
        with pytest.raises(AttributeError):
            result.cos = 0.0  # type: ignore[misc]

    def test_matches_trig(self) -> None:
        result = cordic(0.3)
        assert isinstance(result, CordicResult)
        assert (result.cos, result.sin) == trig(0.3)

    def test_early_exit(self) -> None:
        """The change threshold stops the loop well before the cap."""
        result = cordic(1.0)
        assert result.converged
        assert result.iterations < MAX_CORDIC_ITER

    @pytest.mark.parametrize(
        "theta,quadrant",
        [(0.5, 0), (2.0, 1), (4.0, 2), (5.0, 3), (-1.0, -1), (-2.0, -2), (-4.0, -3)],
    )
    def test_quadrant_index(self, theta: float, quadrant: int) -> None:
        """Quadrant index is floor(θ / (π/2))."""
        assert cordic(theta).quadrant == quadrant

    def test_gain_constant(self) -> None:
        """K is the product of 1 / sqrt(1 + 2^-2i)."""
        gain = math.prod(1.0 / math.sqrt(1.0 + 2.0 ** (-2 * i)) for i in range(60))
        assert CORDIC_GAIN == pytest.approx(gain, rel=1e-12)


class TestReduceAngle:
    """Tests for reduce_angle."""

    @pytest.mark.parametrize("theta", [0.3, 2.0, -1.0, -2.0, 7.5])
    def test_reduced_into_first_quadrant(self, theta: float) -> None:
        reduced, _ = reduce_angle(theta)
        assert 0.0 <= reduced <= math.pi / 2

    def test_reflection(self) -> None:
        """Angles past π/2 reflect via π - θ."""
        reduced, quadrant = reduce_angle(2.0)
        assert reduced == pytest.approx(math.pi - 2.0)
        assert quadrant == 1

    def test_negative_angle(self) -> None:
        reduced, quadrant = reduce_angle(-1.0)
        assert reduced == pytest.approx(1.0)
        assert quadrant == -1
