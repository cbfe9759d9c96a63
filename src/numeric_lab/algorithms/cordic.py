"""CORDIC evaluation of sine and cosine.

Rotates the vector (K, 0) through a sequence of angles arctan(2^-i), each
step using only additions and scaling by powers of two. The gain constant K
pre-compensates the magnitude growth of the unscaled rotations, so the final
vector is (cos φ, sin φ) for the reduced angle φ.

State machine:
1. Domain reduction: θ mod π into [0, π), reflected into [0, π/2]
2. Rotation loop: until the L1 change of (x, y) falls below CORDIC_THRESHOLD
   or MAX_CORDIC_ITER rotations have run
3. Quadrant correction: signs restored from the signed quadrant index

References:
- Volder, J.E.: "The CORDIC Trigonometric Computing Technique",
  IRE Trans. Electronic Computers (1959)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

# Product of 1 / sqrt(1 + 2^-2i) over all rotations
CORDIC_GAIN: float = 0.6072529350088812

MAX_CORDIC_ITER: int = 100

# L1 change in (x, y) below which further rotations are negligible
CORDIC_THRESHOLD: float = 1e-12

# arctan(2^-i) for every rotation the loop may perform
_ATAN_TABLE: tuple[float, ...] = tuple(
    np.arctan(np.exp2(-np.arange(MAX_CORDIC_ITER, dtype=np.float64))).tolist()
)

# Sign pairs applied to (x, y), keyed by the truncated quadrant residue
_QUADRANT_SIGNS: dict[int, tuple[float, float]] = {
    0: (1.0, 1.0),
    1: (-1.0, 1.0),
    2: (-1.0, -1.0),
    3: (1.0, -1.0),
    -1: (1.0, -1.0),
    -2: (-1.0, -1.0),
    -3: (-1.0, 1.0),
}


@dataclass(frozen=True, slots=True)
class CordicResult:
    """Result of a CORDIC evaluation."""

    cos: float
    """Cosine estimate."""

    sin: float
    """Sine estimate."""

    iterations: int
    """Rotations performed."""

    quadrant: int
    """Signed quadrant index floor(θ / (π/2))."""

    converged: bool
    """True if the change threshold stopped the loop before the cap."""


def reduce_angle(theta: float) -> tuple[float, int]:
    """Reduce θ into [0, π/2] and compute its signed quadrant index."""
    reduced = theta % math.pi
    if reduced > math.pi / 2.0:
        reduced = math.pi - reduced

    quadrant = math.floor(theta / (math.pi / 2.0))
    return reduced, quadrant


def cordic(theta: float) -> CordicResult:
    """Evaluate cos θ and sin θ by CORDIC rotation.

    Args:
        theta: Angle in radians (any sign or magnitude).

    Returns:
        CordicResult with both estimates and loop diagnostics.
    """
    phi, quadrant = reduce_angle(theta)

    x = CORDIC_GAIN
    y = 0.0
    change = 1.0
    n_iter = 0

    while n_iter < MAX_CORDIC_ITER and change > CORDIC_THRESHOLD:
        d = 1.0 if phi >= 0.0 else -1.0
        scale = 0.5**n_iter

        x_next = x - d * y * scale
        y_next = y + d * x * scale
        phi -= d * _ATAN_TABLE[n_iter]

        change = abs(x_next - x) + abs(y_next - y)
        x, y = x_next, y_next
        n_iter += 1

    converged = change <= CORDIC_THRESHOLD
    logger.debug(
        "CORDIC theta=%r: %d rotations (converged=%s)", theta, n_iter, converged
    )

    # Truncated remainder keeps the sign of negative quadrant indices
    residue = int(math.fmod(quadrant, 4))
    sign_x, sign_y = _QUADRANT_SIGNS.get(residue, (0.0, 0.0))

    return CordicResult(
        cos=sign_x * x,
        sin=sign_y * y,
        iterations=n_iter,
        quadrant=quadrant,
        converged=converged,
    )


def trig(theta: float) -> tuple[float, float]:
    """Return (cos θ, sin θ) computed by CORDIC."""
    result = cordic(theta)
    return result.cos, result.sin


__all__ = [
    "CORDIC_GAIN",
    "CORDIC_THRESHOLD",
    "MAX_CORDIC_ITER",
    "CordicResult",
    "cordic",
    "reduce_angle",
    "trig",
]
