"""Numeric values: exact 64-bit integers and floats, with promotion rules."""

from __future__ import annotations

import math
from dataclasses import dataclass

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class IntValue:
    """Exact signed 64-bit integer."""

    value: int


@dataclass(frozen=True, slots=True)
class FloatValue:
    """Double-precision floating-point number."""

    value: float


Value = IntValue | FloatValue


def wrap_int64(n: int) -> int:
    """Wrap an unbounded int into the signed 64-bit range (two's complement)."""
    return ((n - INT64_MIN) % 2**64) + INT64_MIN


def as_float(v: Value) -> float:
    return float(v.value)


def add(a: Value, b: Value) -> Value:
    if isinstance(a, IntValue) and isinstance(b, IntValue):
        return IntValue(wrap_int64(a.value + b.value))
    return FloatValue(as_float(a) + as_float(b))


def subtract(a: Value, b: Value) -> Value:
    if isinstance(a, IntValue) and isinstance(b, IntValue):
        return IntValue(wrap_int64(a.value - b.value))
    return FloatValue(as_float(a) - as_float(b))


def multiply(a: Value, b: Value) -> Value:
    if isinstance(a, IntValue) and isinstance(b, IntValue):
        return IntValue(wrap_int64(a.value * b.value))
    return FloatValue(as_float(a) * as_float(b))


def is_zero(v: Value) -> bool:
    """Return True for integer 0 and for both signed float zeros."""
    if isinstance(v, IntValue):
        return v.value == 0
    return abs(v.value) == 0.0


def divide(a: Value, b: Value) -> FloatValue:
    """True division. Always a float, even for two integers.

    Raises ZeroDivisionError when the divisor is zero.
    """
    if is_zero(b):
        raise ZeroDivisionError("division by zero")
    return FloatValue(as_float(a) / as_float(b))


def power(base: Value, exponent: Value) -> FloatValue:
    """Real exponentiation. Always a float; never raises."""
    return FloatValue(_real_pow(as_float(base), as_float(exponent)))


def negate(v: Value) -> Value:
    if isinstance(v, IntValue):
        return IntValue(wrap_int64(-v.value))
    return FloatValue(-v.value)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == math.floor(x) and math.fmod(x, 2.0) != 0.0


def _real_pow(x: float, y: float) -> float:
    # math.pow raises where C pow returns inf or nan; map back to C results.
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0.0:
            # pow(±0, y<0): pole, sign kept only for odd integer exponents
            if _is_odd_integer(y):
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan
