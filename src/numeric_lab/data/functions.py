"""Catalog of named sample functions with closed-form references.

Each entry pairs a scalar function with its exact derivative and
antiderivative so quadrature, differentiation and root-finding results can be
compared against ground truth from the command line and in tests.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass

ScalarFunction = Callable[[float], float]


@dataclass(frozen=True, slots=True)
class FunctionSpec:
    """A sample function and its closed forms."""

    name: str
    """Registry key."""

    expression: str
    """Human-readable formula."""

    func: ScalarFunction
    """f(x)."""

    derivative: ScalarFunction
    """f'(x)."""

    antiderivative: ScalarFunction
    """F(x) with F' = f."""

    def __call__(self, x: float) -> float:
        return self.func(x)


# =============================================================================
# FUNCTION REGISTRY
# =============================================================================

_FUNCTIONS: dict[str, FunctionSpec] = {
    spec.name: spec
    for spec in (
        FunctionSpec(
            name="linear",
            expression="2x",
            func=lambda x: 2.0 * x,
            derivative=lambda x: 2.0,
            antiderivative=lambda x: x**2,
        ),
        FunctionSpec(
            name="quadratic",
            expression="x^2",
            func=lambda x: x**2,
            derivative=lambda x: 2.0 * x,
            antiderivative=lambda x: x**3 / 3.0,
        ),
        FunctionSpec(
            name="cubic",
            expression="x^3",
            func=lambda x: x**3,
            derivative=lambda x: 3.0 * x**2,
            antiderivative=lambda x: x**4 / 4.0,
        ),
        FunctionSpec(
            name="sqrt",
            expression="sqrt(x)",
            func=math.sqrt,
            derivative=lambda x: 0.5 / math.sqrt(x),
            antiderivative=lambda x: 2.0 / 3.0 * x**1.5,
        ),
        FunctionSpec(
            name="exp",
            expression="e^x",
            func=math.exp,
            derivative=math.exp,
            antiderivative=math.exp,
        ),
        FunctionSpec(
            name="sin",
            expression="sin(x)",
            func=math.sin,
            derivative=math.cos,
            antiderivative=lambda x: -math.cos(x),
        ),
        FunctionSpec(
            name="cos",
            expression="cos(x)",
            func=math.cos,
            derivative=lambda x: -math.sin(x),
            antiderivative=math.sin,
        ),
        FunctionSpec(
            name="poly",
            expression="x^2 + x - 6",
            func=lambda x: x**2 + x - 6.0,
            derivative=lambda x: 2.0 * x + 1.0,
            antiderivative=lambda x: x**3 / 3.0 + x**2 / 2.0 - 6.0 * x,
        ),
    )
}


def get_function(name: str) -> FunctionSpec:
    """
    Look up a catalog function by name (case-insensitive).

    Raises:
        ValueError: If the name is not registered
    """
    key = name.strip().lower()
    if key not in _FUNCTIONS:
        valid = list(_FUNCTIONS)
        raise ValueError(f"Unknown function: '{name}'. Valid: {valid}")
    return _FUNCTIONS[key]


def list_functions() -> list[FunctionSpec]:
    """All catalog functions in registration order."""
    return list(_FUNCTIONS.values())


def exact_integral(spec: FunctionSpec, start: float, end: float) -> float:
    """Exact definite integral from the closed-form antiderivative."""
    return spec.antiderivative(end) - spec.antiderivative(start)
