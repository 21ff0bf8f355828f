"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from exprcalc.values import Value


class TokenType(Enum):
    # Operators (single-character unless noted)
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    POW = auto()  # ** (two characters)

    # Grouping
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Content
    NUMBER = auto()  # decimal literal: value is IntValue or FloatValue
    INVALID = auto()  # unrecognized character or malformed literal start

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its 1-based start position and source text."""

    type: TokenType
    raw: str
    position: int
    value: Value | None = None


WHITESPACE = frozenset(" \t\r\n")

# Single-character tokens; '*' is handled separately because of '**'
SIMPLE_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in "0123456789"


def starts_number(ch: str) -> bool:
    """Return True if ch can begin a numeric literal."""
    return ch == "." or is_digit(ch)
