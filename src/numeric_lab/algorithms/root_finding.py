"""Newton's method for roots of scalar functions.

Runs a fixed number of updates x <- x - f(x) / f'(x), with f'(x) from the
symmetric finite difference. There is no convergence or divergence check:
the final iterate is returned once the budget is spent, and callers detect
failure by inspecting |f(x)|.

Known limitation: when the difference quotient is exactly zero, a slope of
STATIONARY_SLOPE is substituted to avoid dividing by zero. This is a crude
step away from the stationary point, not a singularity handler, and carries
no convergence guarantee.

Two control shapes give identical results for identical inputs:
- newton_iter: bounded loop
- recursive_newton_iter: one update per call, recursing on a decremented count
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from numeric_lab.algorithms.differentiation import symmetric_differentiation

if TYPE_CHECKING:
    from numeric_lab.data.functions import ScalarFunction

logger = logging.getLogger(__name__)

# Default number of Newton updates
MAX_NEWTON_ITER: int = 100

# Slope used in place of an exactly-zero derivative estimate
STATIONARY_SLOPE: float = 0.1


def _slope(f: ScalarFunction, x: float) -> tuple[float, bool]:
    """Derivative estimate at x and whether the fallback slope was used."""
    derivative = symmetric_differentiation(x, f)
    if derivative == 0.0:
        logger.debug("Zero derivative at x=%r, using slope %r", x, STATIONARY_SLOPE)
        return STATIONARY_SLOPE, True
    return derivative, False


def newton_step(f: ScalarFunction, x: float) -> float:
    """Single Newton update from x."""
    derivative, _ = _slope(f, x)
    return x - f(x) / derivative


def newton_iter(
    f: ScalarFunction,
    x0: float,
    iter_count: int | None = None,
) -> float:
    """Newton's method as a bounded loop.

    Args:
        f: Scalar function whose root is sought.
        x0: Initial guess.
        iter_count: Number of updates (default MAX_NEWTON_ITER).

    Returns:
        The iterate after exactly ``iter_count`` updates.
    """
    max_iter = MAX_NEWTON_ITER if iter_count is None else iter_count

    x = x0
    for _ in range(max_iter):
        x = newton_step(f, x)
    return x


def recursive_newton_iter(
    f: ScalarFunction,
    x0: float,
    iter_count: int = MAX_NEWTON_ITER,
) -> float:
    """Newton's method in tail-recursive form.

    Each call performs one update and recurses with ``iter_count - 1``; the
    iterate is returned when the count reaches zero. Python does not
    eliminate tail calls, so recursion depth equals ``iter_count``; use
    :func:`newton_iter` for budgets near the interpreter's recursion limit.
    """
    if iter_count <= 0:
        return x0
    return recursive_newton_iter(f, newton_step(f, x0), iter_count - 1)


@dataclass(frozen=True, slots=True)
class NewtonTrace:
    """Complete trace of a Newton run."""

    root: float
    """Final iterate."""

    iterations: int
    """Number of updates performed."""

    residual: float
    """|f(root)|."""

    fallback_steps: int
    """Updates that used STATIONARY_SLOPE."""

    history: tuple[dict[str, Any], ...]
    """Per-update metrics."""


def newton_trace(
    f: ScalarFunction,
    x0: float,
    iter_count: int | None = None,
) -> NewtonTrace:
    """Run Newton's method and record every update.

    Produces the same final iterate as :func:`newton_iter`.
    """
    max_iter = MAX_NEWTON_ITER if iter_count is None else iter_count

    history: list[dict[str, Any]] = []
    fallback_steps = 0

    x = x0
    for iteration in range(max_iter):
        derivative, fallback = _slope(f, x)
        fx = f(x)
        if fallback:
            fallback_steps += 1

        history.append(
            {
                "iteration": iteration,
                "x": x,
                "fx": fx,
                "derivative": derivative,
                "fallback": fallback,
            }
        )

        x = x - fx / derivative

    return NewtonTrace(
        root=x,
        iterations=len(history),
        residual=abs(f(x)),
        fallback_steps=fallback_steps,
        history=tuple(history),
    )


__all__ = [
    "MAX_NEWTON_ITER",
    "STATIONARY_SLOPE",
    "NewtonTrace",
    "newton_iter",
    "newton_step",
    "newton_trace",
    "recursive_newton_iter",
]
