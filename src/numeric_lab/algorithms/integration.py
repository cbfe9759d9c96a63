"""Fixed-step quadrature rules for definite integrals of scalar functions.

Implements three interchangeable rules sharing one contract
``rule(start, end, f, resolution=None) -> float``:
- Composite Simpson's rule (coefficients 1, 4, 2, 4, ..., 2, 4, 1)
- Composite trapezoid rule
- Trapezoid rule with function evaluations spread over a thread pool

Step size is fixed, never refined from error estimates. Reversed bounds walk
from ``start`` toward ``end`` with the step magnitude, so the result for
``start > end`` equals the integral over the ordered interval (not negated).

References:
- Burden & Faires: "Numerical Analysis" (9th ed.), §4.4
"""

from __future__ import annotations

import logging
import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

import numpy as np

from numeric_lab.arithmetic import arrange
from numeric_lab.data.precision_types import PrecisionFormat, get_default_step

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from numeric_lab.data.functions import ScalarFunction

logger = logging.getLogger(__name__)

BASE_STEP_SIZE: float = get_default_step(PrecisionFormat.FP64, "integration")

# Thread count when none is given; same formula as ThreadPoolExecutor uses
DEFAULT_WORKERS: int = min(32, (os.cpu_count() or 1) + 4)


def quad_simpson(
    start_point: float,
    end_point: float,
    f: ScalarFunction,
    resolution: float | None = None,
) -> float:
    """Integrate f over [start_point, end_point] with Simpson's rule.

    The interval is split into ``ceil(width / h)`` panels; interior point i
    (1-indexed) is weighted 4 when i is odd and 2 when i is even.

    Args:
        start_point: Lower bound.
        end_point: Upper bound.
        f: Scalar integrand.
        resolution: Step h (default BASE_STEP_SIZE).

    Returns:
        Integral estimate.
    """
    dx = BASE_STEP_SIZE if resolution is None else resolution
    step = math.copysign(dx, end_point - start_point)

    # Endpoints are handled outside the loop
    num_steps = math.ceil(abs(end_point - start_point) / dx) - 1

    answer = f(start_point) + f(end_point)
    for i in range(1, num_steps + 1):
        coefficient = 4.0 if i % 2 else 2.0
        answer += coefficient * f(start_point + i * step)

    return dx / 3.0 * answer


def quad_trapezoid(
    start_point: float,
    end_point: float,
    f: ScalarFunction,
    resolution: float | None = None,
) -> float:
    """Integrate f over [start_point, end_point] with the trapezoid rule.

    h * (0.5 f(x_0) + f(x_1) + ... + f(x_{n-1}) + 0.5 f(x_n)),
    n = floor(width / h).
    """
    dx = BASE_STEP_SIZE if resolution is None else resolution
    step = math.copysign(dx, end_point - start_point)
    num_steps = math.floor(abs(end_point - start_point) / dx)

    answer = 0.5 * (f(start_point) + f(end_point))
    for i in range(1, num_steps):
        answer += f(start_point + i * step)

    return dx * answer


def par_quad_trapezoid(
    start_point: float,
    end_point: float,
    f: ScalarFunction,
    resolution: float | None = None,
    *,
    workers: int | None = None,
) -> float:
    """Trapezoid rule with function evaluations run on a thread pool.

    Samples v of [lower, upper) are mapped to f(v) + f(v + h), summed in
    contiguous chunks on worker threads, and the partial sums reduced.
    Summation order differs from :func:`quad_trapezoid`, so results agree to
    floating-point accumulation tolerance, not bit for bit.

    ``f`` must be safe to call concurrently. An exception raised by ``f`` in
    any worker propagates to the caller.

    Args:
        start_point: Lower bound.
        end_point: Upper bound.
        f: Scalar integrand.
        resolution: Step h (default BASE_STEP_SIZE).
        workers: Thread count (default DEFAULT_WORKERS).

    Returns:
        Integral estimate.
    """
    dx = BASE_STEP_SIZE if resolution is None else resolution

    lower, upper = sorted((start_point, end_point))
    interval = arrange(lower, upper, dx)

    max_workers = DEFAULT_WORKERS if workers is None else workers
    num_chunks = max(1, min(len(interval), max_workers))
    chunks = np.array_split(interval, num_chunks)

    logger.debug(
        "Trapezoid over %d samples in %d chunks (%d workers)",
        len(interval),
        num_chunks,
        max_workers,
    )

    def chunk_sum(chunk: NDArray[np.float64]) -> float:
        return sum(f(val) + f(val + dx) for val in chunk.tolist())

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        partial_sums = list(executor.map(chunk_sum, chunks))

    return 0.5 * dx * sum(partial_sums)


__all__ = [
    "BASE_STEP_SIZE",
    "DEFAULT_WORKERS",
    "par_quad_trapezoid",
    "quad_simpson",
    "quad_trapezoid",
]
