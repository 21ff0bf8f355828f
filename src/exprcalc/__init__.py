"""exprcalc arithmetic expression evaluator."""

from __future__ import annotations

__version__ = "0.1.0"


def calculate(buffer: bytes | str) -> str:
    """Evaluate one expression and return its output line (no newline)."""
    from exprcalc.eval import evaluate
    from exprcalc.render import render_result

    return render_result(evaluate(buffer))
