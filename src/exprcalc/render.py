"""Result renderer: canonical text for values and evaluation results."""

from __future__ import annotations

import math

from exprcalc.eval import EvalResult, Ok
from exprcalc.values import INT64_MAX, INT64_MIN, IntValue, Value

# Floats closer than this to an integer print as that integer
INTEGRAL_EPSILON = 1e-12


def format_value(value: Value) -> str:
    """Render a value: integers as digits, floats as integers when integral."""
    if isinstance(value, IntValue):
        return str(value.value)

    x = value.value
    if math.isfinite(x):
        nearest = round(x)
        if INT64_MIN <= nearest <= INT64_MAX and abs(x - nearest) < INTEGRAL_EPSILON:
            return str(nearest)
    return f"{x:.15g}"


def render_result(result: EvalResult) -> str:
    """Render an evaluation result as one output line, without the newline."""
    if isinstance(result, Ok):
        return format_value(result.value)
    return f"ERROR:{result.position}"
