"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from exprcalc.lexer import tokenize
from exprcalc.tokens import Token
from exprcalc.values import IntValue


def dump_tokens(source: bytes | str, *, file: TextIO | None = None) -> None:
    """Print one line per token of *source* to *file* (default: current stderr)."""
    if file is None:
        file = sys.stderr
    for tok in tokenize(source):
        file.write(_format_token(tok))
        file.write("\n")


def _format_token(tok: Token) -> str:
    line = f"{tok.position:>5}  {tok.type.name:<8} {tok.raw!r}"
    if tok.value is not None:
        kind = "int" if isinstance(tok.value, IntValue) else "float"
        line += f" -> {kind} {tok.value.value!r}"
    return line
