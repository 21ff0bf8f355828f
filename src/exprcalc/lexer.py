"""exprcalc lexer: produces tokens one at a time from expression source."""

from __future__ import annotations

import re
from collections.abc import Iterator

from exprcalc.tokens import SIMPLE_TOKENS, WHITESPACE, Token, TokenType, starts_number
from exprcalc.values import INT64_MAX, FloatValue, IntValue

# Longest decimal literal: digits with optional fraction, or a bare fraction,
# followed by an optional exponent that must carry at least one digit.
_NUMBER_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def decode_buffer(buffer: bytes | str) -> str:
    """Return source text in which each input byte is exactly one character."""
    if isinstance(buffer, str):
        return buffer
    return bytes(buffer).decode("latin-1")


class Lexer:
    """Pull-based tokenizer: each next_token() call scans exactly one token."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0  # 0-based read offset

    @property
    def position(self) -> int:
        """1-based position of the next unread character."""
        return self._pos + 1

    def next_token(self) -> Token:
        """Skip whitespace and comments, then scan and return the next token."""
        self._skip_ws_and_comments()

        if self._pos >= len(self._source):
            return Token(TokenType.EOF, "", self.position)

        ch = self._source[self._pos]
        start = self.position

        if starts_number(ch):
            return self._lex_number()

        if ch == "*":
            if self._peek(1) == "*":
                self._pos += 2
                return Token(TokenType.POW, "**", start)
            self._pos += 1
            return Token(TokenType.STAR, "*", start)

        tt = SIMPLE_TOKENS.get(ch)
        if tt is not None:
            self._pos += 1
            return Token(tt, ch, start)

        # Unknown character: one character wide
        self._pos += 1
        return Token(TokenType.INVALID, ch, start)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _skip_ws_and_comments(self) -> None:
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if ch in WHITESPACE:
                self._pos += 1
            elif ch == "#":
                # Comment runs up to, not including, the newline
                end = self._source.find("\n", self._pos)
                self._pos = len(self._source) if end < 0 else end
            else:
                break

    def _lex_number(self) -> Token:
        start = self.position
        m = _NUMBER_RE.match(self._source, self._pos)
        if m is None:
            # A lone '.' that no literal can extend
            ch = self._source[self._pos]
            self._pos += 1
            return Token(TokenType.INVALID, ch, start)

        text = m.group()
        self._pos = m.end()

        if "." in text or "e" in text or "E" in text:
            return Token(TokenType.NUMBER, text, start, FloatValue(float(text)))

        # int() caps digit-string length; a 64-bit value has at most 19 digits
        digits = text.lstrip("0") or "0"
        if len(digits) > 19 or int(digits) > INT64_MAX:
            return Token(TokenType.NUMBER, text, start, FloatValue(float(text)))
        return Token(TokenType.NUMBER, text, start, IntValue(int(digits)))


def tokenize(source: bytes | str) -> Iterator[Token]:
    """Yield every token of source, ending with (and including) EOF."""
    lexer = Lexer(decode_buffer(source))
    while True:
        tok = lexer.next_token()
        yield tok
        if tok.type == TokenType.EOF:
            return
