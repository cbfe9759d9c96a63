"""Arithmetic helpers shared by the numerical algorithms.

- Decimal rounding used to present and compare floating-point results
- Interval enumeration consumed by the parallel quadrature rule
- Euclidean greatest common divisor
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

import numpy as np

from numeric_lab.data.precision_types import PrecisionFormat, get_dtype

if TYPE_CHECKING:
    from numpy.typing import NDArray


class UndefinedInputError(ValueError):
    """Raised when an operation has no defined result for its inputs."""


def round_dp(num: float, precision: int) -> float:
    """Round to ``precision`` decimal places, halves away from zero.

    Rounding works on the shortest decimal representation of ``num``, so a
    precision beyond the available digits returns ``num`` unchanged.

    Args:
        num: Value to round.
        precision: Number of digits after the decimal point.

    Returns:
        Rounded value.

    Raises:
        ValueError: If precision is negative.

    Example:
        >>> round_dp(0.123456789101112, 5)
        0.12346
    """
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got {precision}")

    value = Decimal(repr(float(num)))
    if not value.is_finite():
        return float(num)

    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and -exponent <= precision:
        return float(num)

    quantum = Decimal(1).scaleb(-precision)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def arrange(start: float, end: float, resolution: float) -> NDArray[np.float64]:
    """All points of ``[start, end)`` spaced by ``resolution``.

    Inclusive of ``start``, exclusive of ``end``; empty when ``start >= end``.

    Example:
        >>> arrange(0.0, 1.0, 0.25).tolist()
        [0.0, 0.25, 0.5, 0.75]
    """
    points = np.arange(start, end, resolution, dtype=get_dtype(PrecisionFormat.FP64))
    # arange sizes by ceil(width / step), which can round up to a sample at end
    return points[points < end]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    Raises:
        UndefinedInputError: If both inputs are zero.

    Example:
        >>> gcd(15, 50)
        5
    """
    a, b = abs(a), abs(b)
    if a == 0 and b == 0:
        raise UndefinedInputError("GCD of 0 with 0 is ill-defined.")

    while a:
        a, b = b % a, a
    return b


__all__ = [
    "UndefinedInputError",
    "arrange",
    "gcd",
    "round_dp",
]
