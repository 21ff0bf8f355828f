"""Test numeric literal scanning: integer vs float kinds and maximal munch."""

from exprcalc.tokens import TokenType
from exprcalc.values import FloatValue, IntValue

from .conftest import assert_positions, assert_types


class TestIntegers:
    def test_integer_literal(self, lex):
        tokens = lex("42")
        assert_types(tokens, [TokenType.NUMBER])
        assert tokens[0].value == IntValue(42)
        assert tokens[0].raw == "42"

    def test_leading_zeros(self, lex):
        tokens = lex("007")
        assert tokens[0].value == IntValue(7)

    def test_int64_max_stays_integer(self, lex):
        tokens = lex("9223372036854775807")
        assert tokens[0].value == IntValue(9223372036854775807)

    def test_overflow_falls_back_to_float(self, lex):
        tokens = lex("9223372036854775808")
        assert isinstance(tokens[0].value, FloatValue)
        assert tokens[0].value.value == 9223372036854775808.0

    def test_very_long_literal(self, lex):
        tokens = lex("1" + "0" * 5000)
        assert isinstance(tokens[0].value, FloatValue)
        assert tokens[0].value.value == float("inf")

    def test_long_zero_run_is_integer(self, lex):
        tokens = lex("0" * 5000 + "12")
        assert tokens[0].value == IntValue(12)

    def test_sign_is_not_part_of_literal(self, lex):
        tokens = lex("-5")
        assert_types(tokens, [TokenType.MINUS, TokenType.NUMBER])
        assert tokens[1].value == IntValue(5)


class TestFloats:
    def test_decimal_point(self, lex):
        tokens = lex("3.25")
        assert tokens[0].value == FloatValue(3.25)

    def test_trailing_dot(self, lex):
        tokens = lex("2.")
        assert tokens[0].value == FloatValue(2.0)
        assert tokens[0].raw == "2."

    def test_leading_dot(self, lex):
        tokens = lex(".5")
        assert tokens[0].value == FloatValue(0.5)

    def test_exponent_makes_float(self, lex):
        tokens = lex("2e3")
        assert tokens[0].value == FloatValue(2000.0)

    def test_uppercase_exponent_with_sign(self, lex):
        tokens = lex("15E-1")
        assert tokens[0].value == FloatValue(1.5)

    def test_exponent_without_digits_is_not_consumed(self, lex):
        tokens = lex("1e")
        assert_types(tokens, [TokenType.NUMBER, TokenType.INVALID])
        assert tokens[0].value == IntValue(1)
        assert_positions(tokens, [1, 2])

    def test_exponent_sign_without_digits(self, lex):
        tokens = lex("1e+")
        assert_types(tokens, [TokenType.NUMBER, TokenType.INVALID, TokenType.PLUS])

    def test_second_dot_starts_new_literal(self, lex):
        tokens = lex("1.5.25")
        assert_types(tokens, [TokenType.NUMBER, TokenType.NUMBER])
        assert tokens[1].value == FloatValue(0.25)
        assert_positions(tokens, [1, 4])


class TestMalformed:
    def test_lone_dot_is_invalid(self, lex):
        tokens = lex(".")
        assert_types(tokens, [TokenType.INVALID])
        assert tokens[0].raw == "."

    def test_dot_before_operator(self, lex):
        tokens = lex(". + 1")
        assert_types(tokens, [TokenType.INVALID, TokenType.PLUS, TokenType.NUMBER])
        assert_positions(tokens, [1, 3, 5])
