"""Finite-difference differentiation of scalar functions.

Two central difference formulas:
- Symmetric difference: (f(x+h) - f(x-h)) / 2h, error O(h^2)
- Five-point stencil: (-f(x+2h) + 8f(x+h) - 8f(x-h) + f(x-2h)) / 12h, error O(h^4)

No input validation is performed: non-finite function values propagate.

References:
- Fornberg, B.: "Generation of Finite Difference Formulas on Arbitrarily
  Spaced Grids", Math. Comp. 51 (1988)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from numeric_lab.data.precision_types import PrecisionFormat, get_default_step

if TYPE_CHECKING:
    from numeric_lab.data.functions import ScalarFunction

# 2 * sqrt(machine epsilon) for 64-bit floats (exactly 2^-25)
BASE_STEP_SIZE: float = get_default_step(PrecisionFormat.FP64, "differentiation")


def symmetric_differentiation(
    point: float,
    function: ScalarFunction,
    resolution: float | None = None,
) -> float:
    """Approximate f'(point) with the symmetric difference quotient.

    Args:
        point: Where to evaluate the derivative.
        function: Scalar function f.
        resolution: Step h (default BASE_STEP_SIZE).

    Returns:
        Derivative estimate.
    """
    dx = BASE_STEP_SIZE if resolution is None else resolution
    return (function(point + dx) - function(point - dx)) / (2.0 * dx)


def stencil_differentiation(
    point: float,
    function: ScalarFunction,
    resolution: float | None = None,
) -> float:
    """Approximate f'(point) with the five-point stencil."""
    dx = BASE_STEP_SIZE if resolution is None else resolution
    return (
        -function(point + 2.0 * dx)
        + 8.0 * function(point + dx)
        - 8.0 * function(point - dx)
        + function(point - 2.0 * dx)
    ) / (12.0 * dx)


__all__ = [
    "BASE_STEP_SIZE",
    "stencil_differentiation",
    "symmetric_differentiation",
]
