"""
Precision Format Definitions - Single Source of Truth

This module defines the floating-point formats the toolkit reasons about,
their machine epsilon values, and the default step sizes derived from them
for finite differences and fixed-step quadrature.

References:
    - IEEE 754-2019 Standard for Floating-Point Arithmetic
    - Press et al.: "Numerical Recipes" (3rd ed.), Section 5.7
    - Higham: "Accuracy and Stability of Numerical Algorithms" (2nd ed.)
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

import numpy as np
from numpy.typing import DTypeLike


class PrecisionFormat(Enum):
    """Supported floating-point precision formats."""

    FP64 = "fp64"
    FP32 = "fp32"
    FP16 = "fp16"


@dataclass(frozen=True, slots=True)
class PrecisionSpec:
    """Specification for a floating-point precision format."""

    format: PrecisionFormat
    bits: int
    mantissa_bits: int
    exponent_bits: int
    machine_epsilon: float

    @property
    def bytes(self) -> int:
        """Number of bytes for this format."""
        return self.bits // 8


# =============================================================================
# PRECISION SPECIFICATIONS
# =============================================================================
# Machine epsilon: 2^(-mantissa_bits), stored exactly so that derived step
# sizes are exact powers of two.

_PRECISION_SPECS: dict[PrecisionFormat, PrecisionSpec] = {
    PrecisionFormat.FP64: PrecisionSpec(
        format=PrecisionFormat.FP64,
        bits=64,
        mantissa_bits=52,
        exponent_bits=11,
        machine_epsilon=2.0**-52,  # ~2.22e-16
    ),
    PrecisionFormat.FP32: PrecisionSpec(
        format=PrecisionFormat.FP32,
        bits=32,
        mantissa_bits=23,
        exponent_bits=8,
        machine_epsilon=2.0**-23,  # ~1.19e-7
    ),
    PrecisionFormat.FP16: PrecisionSpec(
        format=PrecisionFormat.FP16,
        bits=16,
        mantissa_bits=10,
        exponent_bits=5,
        machine_epsilon=2.0**-10,  # ~9.77e-4
    ),
}


# =============================================================================
# DEFAULT STEP SIZES
# =============================================================================
# Differentiation: h = 2 * sqrt(eps) balances O(h^2) truncation error against
# cancellation error in f(x + h) - f(x - h). For FP64 this is exactly 2^-25.
# Integration: fixed step, not refined from error estimates.

_INTEGRATION_STEP = 1e-6

_STEP_KINDS = ("differentiation", "integration")


# =============================================================================
# PUBLIC API
# =============================================================================


def get_spec(fmt: PrecisionFormat | str) -> PrecisionSpec:
    """
    Get the full specification for a precision format.

    Args:
        fmt: Precision format (enum or string like 'fp32', 'FP16', 'fp-64')

    Returns:
        PrecisionSpec with all format properties

    Raises:
        ValueError: If format is unknown

    Example:
        >>> spec = get_spec("fp32")
        >>> spec.mantissa_bits
        23
    """
    if isinstance(fmt, str):
        fmt = _parse_format(fmt)
    return _PRECISION_SPECS[fmt]


def get_dtype(fmt: PrecisionFormat | str) -> DTypeLike:
    """
    Get the numpy dtype for a precision format.

    Example:
        >>> get_dtype("fp32")
        <class 'numpy.float32'>
    """
    if isinstance(fmt, str):
        fmt = _parse_format(fmt)

    dtype_map: dict[PrecisionFormat, Any] = {
        PrecisionFormat.FP64: np.float64,
        PrecisionFormat.FP32: np.float32,
        PrecisionFormat.FP16: np.float16,
    }
    return cast("DTypeLike", dtype_map[fmt])


def get_eps(fmt: PrecisionFormat | str) -> float:
    """
    Get machine epsilon for a precision format.

    Machine epsilon is the smallest positive number ε such that 1.0 + ε ≠ 1.0
    in the given floating-point representation.

    Example:
        >>> get_eps("fp64")
        2.220446049250313e-16
    """
    return get_spec(fmt).machine_epsilon


def get_default_step(
    fmt: PrecisionFormat | str = PrecisionFormat.FP64,
    kind: str = "differentiation",
) -> float:
    """
    Get the default step size used when no resolution is supplied.

    Args:
        fmt: Precision format the computation runs in
        kind: One of 'differentiation', 'integration'

    Returns:
        Step size

    Raises:
        ValueError: If format or kind is unknown

    Example:
        >>> get_default_step("fp64", "differentiation")
        2.9802322387695312e-08
    """
    if kind not in _STEP_KINDS:
        raise ValueError(f"Unknown step kind: {kind}. Valid: {list(_STEP_KINDS)}")

    if kind == "integration":
        # Validate the format even though the step does not depend on it
        get_spec(fmt)
        return _INTEGRATION_STEP

    return 2.0 * math.sqrt(get_eps(fmt))


def list_formats() -> list[PrecisionFormat]:
    """List precision formats from lowest to highest precision."""
    return [PrecisionFormat.FP16, PrecisionFormat.FP32, PrecisionFormat.FP64]


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _parse_format(name: str) -> PrecisionFormat:
    """Parse a string into a PrecisionFormat enum."""
    normalized = name.lower().replace("-", "").replace("_", "").replace(" ", "")

    for fmt in PrecisionFormat:
        if fmt.value == normalized:
            return fmt

    valid = [f.value for f in PrecisionFormat]
    raise ValueError(f"Unknown precision format: '{name}'. Valid: {valid}")
