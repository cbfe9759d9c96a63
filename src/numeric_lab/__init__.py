"""Numeric Lab: quadrature, finite differences, Newton's method and CORDIC."""

__version__ = "0.1.0"

from numeric_lab.algorithms import (
    newton_iter,
    par_quad_trapezoid,
    quad_simpson,
    quad_trapezoid,
    recursive_newton_iter,
    stencil_differentiation,
    symmetric_differentiation,
    trig,
)
from numeric_lab.arithmetic import UndefinedInputError, arrange, gcd, round_dp

__all__ = [
    "__version__",
    "UndefinedInputError",
    "arrange",
    "gcd",
    "newton_iter",
    "par_quad_trapezoid",
    "quad_simpson",
    "quad_trapezoid",
    "recursive_newton_iter",
    "round_dp",
    "stencil_differentiation",
    "symmetric_differentiation",
    "trig",
]
