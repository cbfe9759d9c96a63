"""Data module for precision formats and the sample function catalog."""

from numeric_lab.data.functions import (
    FunctionSpec,
    exact_integral,
    get_function,
    list_functions,
)
from numeric_lab.data.precision_types import (
    PrecisionFormat,
    PrecisionSpec,
    get_default_step,
    get_dtype,
    get_eps,
    get_spec,
    list_formats,
)

__all__ = [
    "FunctionSpec",
    "PrecisionFormat",
    "PrecisionSpec",
    "exact_integral",
    "get_default_step",
    "get_dtype",
    "get_eps",
    "get_function",
    "get_spec",
    "list_formats",
    "list_functions",
]
