"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from exprcalc import calculate
from exprcalc.lexer import tokenize
from exprcalc.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        return [t for t in tokenize(source) if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def calc():
    """Return a helper that evaluates source and returns the output line."""

    def _calc(source: str | bytes) -> str:
        return calculate(source)

    return _calc


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_positions(tokens: list[Token], expected: list[int]) -> None:
    """Assert that the token start positions match the expected list."""
    actual = [t.position for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
