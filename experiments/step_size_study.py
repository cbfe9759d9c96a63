"""Step-size study for numeric-lab quadrature and finite-difference rules.

This script sweeps the step size of:
- Every quadrature rule (Simpson, trapezoid, parallel trapezoid)
- Both finite-difference formulas (symmetric, five-point stencil)

against the closed forms of the function catalog, and writes JSON reports
suitable for plotting error-versus-step curves.
"""

from __future__ import annotations

import json
import time
from datetime import UTC, datetime
from pathlib import Path

import numpy as np

from numeric_lab import __version__
from numeric_lab.algorithms import (
    par_quad_trapezoid,
    quad_simpson,
    quad_trapezoid,
    stencil_differentiation,
    symmetric_differentiation,
)
from numeric_lab.data import exact_integral, get_function

QUADRATURE_RULES = {
    "simpson": quad_simpson,
    "trapezoid": quad_trapezoid,
    "parallel_trapezoid": par_quad_trapezoid,
}

DIFFERENCE_FORMULAS = {
    "symmetric": symmetric_differentiation,
    "stencil": stencil_differentiation,
}


def generate_quadrature_study(
    function: str = "exp",
    start: float = 0.0,
    end: float = 3.0,
    output_dir: Path | None = None,
) -> None:
    """Error of each quadrature rule over a sweep of step sizes.

    Args:
        function: Catalog function name.
        start: Lower bound.
        end: Upper bound.
        output_dir: Output directory (defaults to experiments/reports/).
    """
    if output_dir is None:
        output_dir = Path(__file__).parent / "reports"

    output_dir.mkdir(parents=True, exist_ok=True)

    spec = get_function(function)
    exact = exact_integral(spec, start, end)
    steps = np.logspace(-1, -5, 9).tolist()

    print(f"Quadrature study: ∫ {spec.expression} dx over [{start}, {end}]")

    results = []
    for name, rule in QUADRATURE_RULES.items():
        print(f"  Running {name}...", end=" ", flush=True)
        for step in steps:
            t0 = time.perf_counter()
            estimate = rule(start, end, spec.func, step)
            results.append(
                {
                    "rule": name,
                    "step": step,
                    "estimate": estimate,
                    "abs_error": abs(estimate - exact),
                    "time_seconds": time.perf_counter() - t0,
                }
            )
        print("✓")

    output = {
        "metadata": {
            "study": "quadrature",
            "function": spec.name,
            "expression": spec.expression,
            "bounds": [start, end],
            "exact": exact,
            "version": __version__,
            "timestamp": datetime.now(UTC).isoformat(),
        },
        "results": results,
    }

    output_file = output_dir / f"quadrature_{spec.name}.json"
    with output_file.open("w") as f:
        json.dump(output, f, indent=2)


def generate_difference_study(
    function: str = "sin",
    point: float = 1.0,
    output_dir: Path | None = None,
) -> None:
    """Error of each difference formula over a sweep of step sizes.

    Shows the truncation/cancellation trade-off: error falls with h until
    rounding in f(x + h) - f(x - h) dominates.
    """
    if output_dir is None:
        output_dir = Path(__file__).parent / "reports"

    output_dir.mkdir(parents=True, exist_ok=True)

    spec = get_function(function)
    exact = spec.derivative(point)
    steps = np.logspace(-1, -12, 23).tolist()

    print(f"\nDifference study: d/dx {spec.expression} at x = {point}")

    results = [
        {
            "formula": name,
            "step": step,
            "estimate": (estimate := formula(point, spec.func, step)),
            "abs_error": abs(estimate - exact),
        }
        for name, formula in DIFFERENCE_FORMULAS.items()
        for step in steps
    ]

    for name in DIFFERENCE_FORMULAS:
        best = min((r for r in results if r["formula"] == name), key=lambda r: r["abs_error"])
        print(f"  {name}: best step {best['step']:.1e} (error {best['abs_error']:.2e})")

    output = {
        "metadata": {
            "study": "differentiation",
            "function": spec.name,
            "expression": spec.expression,
            "point": point,
            "exact": exact,
            "version": __version__,
            "timestamp": datetime.now(UTC).isoformat(),
        },
        "results": results,
    }

    output_file = output_dir / f"differentiation_{spec.name}.json"
    with output_file.open("w") as f:
        json.dump(output, f, indent=2)


def main() -> None:
    """Generate all step-size reports."""
    print("=" * 70)
    print("Numeric Lab - Step Size Study")
    print("=" * 70)

    output_dir = Path(__file__).parent / "reports"

    generate_quadrature_study(output_dir=output_dir)
    generate_difference_study(output_dir=output_dir)

    print("\n" + "=" * 70)
    print(f"Output directory: {output_dir.absolute()}")
    for report in sorted(output_dir.glob("*.json")):
        size_kb = report.stat().st_size / 1024
        print(f"  - {report.name} ({size_kb:.1f} KB)")


if __name__ == "__main__":
    main()
