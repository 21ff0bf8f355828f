"""Evaluation entry point: folds the first error into an Ok/Err result."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from exprcalc.errors import CalcError
from exprcalc.parser import DEFAULT_MAX_DEPTH, parse
from exprcalc.values import Value


@dataclass(frozen=True, slots=True)
class Ok:
    """Successful evaluation."""

    value: Value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed evaluation: 1-based position of the first error."""

    position: int


EvalResult = Ok | Err


def evaluate(
    buffer: bytes | str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    on_error: Callable[[CalcError], None] | None = None,
) -> EvalResult:
    """Evaluate one expression buffer.

    Bytes are taken as-is, one position per byte. on_error, when given, is
    called with the error before it is reduced to its position.
    """
    try:
        value = parse(buffer, max_depth=max_depth)
    except CalcError as exc:
        if on_error is not None:
            on_error(exc)
        return Err(exc.position)
    return Ok(value)
