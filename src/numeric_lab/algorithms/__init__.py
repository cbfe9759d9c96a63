"""Numerical algorithms module.

This module contains implementations of:
- Fixed-step quadrature (Simpson, trapezoid, thread-parallel trapezoid)
- Finite-difference differentiation (symmetric, five-point stencil)
- Newton's method root finding (loop and recursive forms)
- CORDIC sine/cosine evaluation
"""

from numeric_lab.algorithms.cordic import (
    CORDIC_GAIN,
    CORDIC_THRESHOLD,
    MAX_CORDIC_ITER,
    CordicResult,
    cordic,
    reduce_angle,
    trig,
)
from numeric_lab.algorithms.differentiation import (
    stencil_differentiation,
    symmetric_differentiation,
)
from numeric_lab.algorithms.integration import (
    par_quad_trapezoid,
    quad_simpson,
    quad_trapezoid,
)
from numeric_lab.algorithms.root_finding import (
    MAX_NEWTON_ITER,
    STATIONARY_SLOPE,
    NewtonTrace,
    newton_iter,
    newton_step,
    newton_trace,
    recursive_newton_iter,
)

__all__ = [
    # CORDIC
    "CORDIC_GAIN",
    "CORDIC_THRESHOLD",
    "MAX_CORDIC_ITER",
    "CordicResult",
    "cordic",
    "reduce_angle",
    "trig",
    # Differentiation
    "stencil_differentiation",
    "symmetric_differentiation",
    # Quadrature
    "par_quad_trapezoid",
    "quad_simpson",
    "quad_trapezoid",
    # Root finding
    "MAX_NEWTON_ITER",
    "STATIONARY_SLOPE",
    "NewtonTrace",
    "newton_iter",
    "newton_step",
    "newton_trace",
    "recursive_newton_iter",
]
