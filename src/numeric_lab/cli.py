"""
Command-line interface for Numeric Lab.

Usage:
    numeric-lab info            Show catalog functions and precision formats
    numeric-lab integrate       Compare quadrature rules on a catalog function
    numeric-lab differentiate   Compare finite-difference formulas
    numeric-lab root            Run Newton's method
    numeric-lab trig            Evaluate sine and cosine by CORDIC
"""

import logging
import math
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from numeric_lab import __version__
from numeric_lab.algorithms import (
    cordic,
    newton_trace,
    par_quad_trapezoid,
    quad_simpson,
    quad_trapezoid,
    stencil_differentiation,
    symmetric_differentiation,
)
from numeric_lab.arithmetic import round_dp
from numeric_lab.data import (
    FunctionSpec,
    exact_integral,
    get_default_step,
    get_function,
    get_spec,
    list_formats,
    list_functions,
)

app = typer.Typer(
    name="numeric-lab",
    help="Quadrature, finite differences, Newton's method and CORDIC",
    add_completion=False,
)
console = Console()

DecimalPlaces = Annotated[
    int,
    typer.Option("--precision", "-d", help="Decimal places shown"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"numeric-lab version {__version__}")
        raise typer.Exit()


def _lookup(name: str) -> FunctionSpec:
    """Resolve a catalog function or exit with an error."""
    try:
        return get_function(name)
    except ValueError as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _fmt(value: float, places: int) -> str:
    return repr(round_dp(value, places))


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING)"),
    ] = "WARNING",
) -> None:
    """Numeric Lab - numerical methods toolkit."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()  # type: ignore[misc]
def info() -> None:
    """Display catalog functions and default step sizes."""
    functions = Table(title="Catalog Functions")
    functions.add_column("Name", style="cyan", no_wrap=True)
    functions.add_column("Expression")

    for spec in list_functions():
        functions.add_row(spec.name, spec.expression)

    console.print(functions)

    formats = Table(title="Precision Formats")
    formats.add_column("Format", style="cyan", no_wrap=True)
    formats.add_column("Bits", justify="right")
    formats.add_column("Bytes", justify="right")
    formats.add_column("Machine ε", justify="right")
    formats.add_column("Diff step", justify="right")
    formats.add_column("Quad step", justify="right")

    for fmt in list_formats():
        spec = get_spec(fmt)
        formats.add_row(
            fmt.value.upper(),
            str(spec.bits),
            str(spec.bytes),
            f"{spec.machine_epsilon:.2e}",
            f"{get_default_step(fmt, 'differentiation'):.2e}",
            f"{get_default_step(fmt, 'integration'):.0e}",
        )

    console.print(formats)


@app.command()  # type: ignore[misc]
def integrate(
    function: Annotated[str, typer.Argument(help="Catalog function name")],
    start: Annotated[float, typer.Option("--start", "-a", help="Lower bound")] = 0.0,
    end: Annotated[float, typer.Option("--end", "-b", help="Upper bound")] = 1.0,
    step: Annotated[
        float | None,
        typer.Option("--step", "-s", help="Step size (default 1e-6)"),
    ] = None,
    places: DecimalPlaces = 6,
) -> None:
    """Compare quadrature rules against the exact integral."""
    spec = _lookup(function)
    exact = exact_integral(spec, start, end)

    table = Table(title=f"∫ {spec.expression} dx over [{start}, {end}]")
    table.add_column("Rule", style="bold")
    table.add_column("Estimate", justify="right")
    table.add_column("Abs. error", justify="right")

    rules = {
        "Simpson": quad_simpson,
        "Trapezoid": quad_trapezoid,
        "Parallel trapezoid": par_quad_trapezoid,
    }
    for name, rule in rules.items():
        estimate = rule(start, end, spec.func, step)
        table.add_row(name, _fmt(estimate, places), f"{abs(estimate - exact):.2e}")

    table.add_row("Exact", _fmt(exact, places), "-", style="dim")
    console.print(table)


@app.command()  # type: ignore[misc]
def differentiate(
    function: Annotated[str, typer.Argument(help="Catalog function name")],
    at: Annotated[float, typer.Option("--at", "-x", help="Evaluation point")] = 1.0,
    step: Annotated[
        float | None,
        typer.Option("--step", "-s", help="Step size (default 2*sqrt(eps))"),
    ] = None,
    places: DecimalPlaces = 10,
) -> None:
    """Compare finite-difference formulas against the exact derivative."""
    spec = _lookup(function)
    exact = spec.derivative(at)

    table = Table(title=f"d/dx {spec.expression} at x = {at}")
    table.add_column("Formula", style="bold")
    table.add_column("Estimate", justify="right")
    table.add_column("Abs. error", justify="right")

    for name, formula in (
        ("Symmetric", symmetric_differentiation),
        ("Five-point stencil", stencil_differentiation),
    ):
        estimate = formula(at, spec.func, step)
        table.add_row(name, _fmt(estimate, places), f"{abs(estimate - exact):.2e}")

    table.add_row("Exact", _fmt(exact, places), "-", style="dim")
    console.print(table)


@app.command()  # type: ignore[misc]
def root(
    function: Annotated[str, typer.Argument(help="Catalog function name")],
    guess: Annotated[float, typer.Option("--guess", "-x", help="Initial guess")] = 1.0,
    max_iterations: Annotated[
        int | None,
        typer.Option("--max-iter", "-i", help="Newton updates (default 100)"),
    ] = None,
    places: DecimalPlaces = 10,
) -> None:
    """Run Newton's method from an initial guess."""
    spec = _lookup(function)
    trace = newton_trace(spec.func, guess, max_iterations)

    console.print(f"[bold]Newton's method on {spec.expression}[/]")
    console.print(f"  Initial guess: {guess}")
    console.print(f"  Updates: {trace.iterations}")
    console.print(f"  Root: {_fmt(trace.root, places)}")
    console.print(f"  |f(root)|: {trace.residual:.2e}")
    if trace.fallback_steps:
        console.print(
            f"\n[yellow]Note:[/] zero derivative hit {trace.fallback_steps} time(s); "
            "fallback slope substituted"
        )


@app.command()  # type: ignore[misc]
def trig(
    theta: Annotated[float, typer.Argument(help="Angle in radians")],
    places: DecimalPlaces = 10,
) -> None:
    """Evaluate cos and sin by CORDIC and compare with the math module."""
    result = cordic(theta)

    table = Table(title=f"CORDIC at θ = {theta}")
    table.add_column("", style="bold")
    table.add_column("CORDIC", justify="right")
    table.add_column("math", justify="right")
    table.add_column("Abs. error", justify="right")

    for name, estimate, reference in (
        ("cos", result.cos, math.cos(theta)),
        ("sin", result.sin, math.sin(theta)),
    ):
        table.add_row(
            name,
            _fmt(estimate, places),
            _fmt(reference, places),
            f"{abs(estimate - reference):.2e}",
        )

    console.print(table)
    console.print(f"  Rotations: {result.iterations} (quadrant {result.quadrant})")


if __name__ == "__main__":
    app()
