"""exprcalc parser: single-pass recursive descent that evaluates as it parses.

Grammar, lowest precedence first::

    expr    := term { ('+' | '-') term }
    term    := power { ('*' | '/') power }
    power   := unary ('**' power)?
    unary   := ('+' | '-') unary | primary
    primary := NUMBER | '(' expr ')'

Unary signs sit inside power, so ``-2 ** 2`` is ``(-2) ** 2``.
"""

from __future__ import annotations

from exprcalc import values
from exprcalc.errors import CalcError, EvalError, LexError, ParseError
from exprcalc.lexer import Lexer, decode_buffer
from exprcalc.tokens import Token, TokenType
from exprcalc.values import Value

DEFAULT_MAX_DEPTH = 100
# Each parenthesis level costs several interpreter frames
MAX_DEPTH_CEILING = 150


class Parser:
    """Recursive descent evaluator over a pull-based token stream.

    The first error raises and ends the pass, so its position can never be
    replaced by a later failure.
    """

    def __init__(self, source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._source = source
        self._lexer = Lexer(source)
        self._max_depth = max_depth
        self._depth = 0
        self._tok = self._lexer.next_token()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _at(self, *types: TokenType) -> bool:
        return self._tok.type in types

    def _advance(self) -> Token:
        tok = self._tok
        if tok.type != TokenType.EOF:
            self._tok = self._lexer.next_token()
        return tok

    def _error(self, cls: type[CalcError], message: str, position: int) -> CalcError:
        return cls(message, position, self._source)

    def _unexpected(self, tok: Token, expected: str) -> CalcError:
        """Build the error for a token that cannot appear here."""
        if tok.type == TokenType.INVALID:
            if tok.raw == ".":
                return self._error(LexError, "malformed number literal", tok.position)
            return self._error(LexError, f"unexpected character {tok.raw!r}", tok.position)
        if tok.type == TokenType.EOF:
            return self._error(ParseError, f"expected {expected}, found end of input", tok.position)
        return self._error(ParseError, f"expected {expected}, found {tok.raw!r}", tok.position)

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            raise self._error(
                ParseError,
                f"expression nested too deeply (limit {self._max_depth})",
                self._tok.position,
            )

    def _leave(self) -> None:
        self._depth -= 1

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def parse(self) -> Value:
        try:
            value = self._parse_expr()
        except RecursionError:
            # The interpreter stack ran out before max_depth was reached
            raise self._error(
                ParseError, "expression nested too deeply", self._tok.position
            ) from None
        if not self._at(TokenType.EOF):
            raise self._unexpected(self._tok, "end of input")
        return value

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _parse_expr(self) -> Value:
        value = self._parse_term()
        while self._at(TokenType.PLUS, TokenType.MINUS):
            op = self._advance()
            right = self._parse_term()
            if op.type == TokenType.PLUS:
                value = values.add(value, right)
            else:
                value = values.subtract(value, right)
        return value

    def _parse_term(self) -> Value:
        value = self._parse_power()
        while self._at(TokenType.STAR, TokenType.SLASH):
            op = self._advance()
            right = self._parse_power()
            if op.type == TokenType.STAR:
                value = values.multiply(value, right)
                continue
            try:
                value = values.divide(value, right)
            except ZeroDivisionError:
                # Reported at the '/' rather than at the zero operand
                raise self._error(EvalError, "division by zero", op.position) from None
        return value

    def _parse_power(self) -> Value:
        base = self._parse_unary()
        if not self._at(TokenType.POW):
            return base
        self._advance()
        self._enter()
        exponent = self._parse_power()
        self._leave()
        return values.power(base, exponent)

    def _parse_unary(self) -> Value:
        self._enter()
        if self._at(TokenType.PLUS):
            self._advance()
            value = self._parse_unary()
        elif self._at(TokenType.MINUS):
            self._advance()
            value = values.negate(self._parse_unary())
        else:
            value = self._parse_primary()
        self._leave()
        return value

    def _parse_primary(self) -> Value:
        tok = self._tok
        if tok.type == TokenType.NUMBER:
            self._advance()
            assert tok.value is not None
            return tok.value

        if tok.type == TokenType.LPAREN:
            self._advance()
            inside = self._parse_expr()
            if not self._at(TokenType.RPAREN):
                raise self._unexpected(self._tok, "')'")
            self._advance()
            return inside

        raise self._unexpected(tok, "a number or '('")


def parse(source: bytes | str, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Parse and evaluate one expression, raising the first error encountered."""
    return Parser(decode_buffer(source), max_depth=max_depth).parse()
