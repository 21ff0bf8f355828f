"""Test operator, grouping, and invalid-character tokens and their positions."""

from exprcalc.lexer import Lexer, tokenize
from exprcalc.tokens import TokenType

from .conftest import assert_positions, assert_types


class TestOperators:
    def test_single_char_operators(self, lex):
        tokens = lex("+-*/")
        assert_types(
            tokens,
            [TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH],
        )

    def test_double_star_is_pow(self, lex):
        tokens = lex("**")
        assert_types(tokens, [TokenType.POW])
        assert tokens[0].raw == "**"

    def test_triple_star(self, lex):
        tokens = lex("***")
        assert_types(tokens, [TokenType.POW, TokenType.STAR])
        assert_positions(tokens, [1, 3])

    def test_star_space_star_is_two_stars(self, lex):
        tokens = lex("* *")
        assert_types(tokens, [TokenType.STAR, TokenType.STAR])

    def test_parens(self, lex):
        tokens = lex("()")
        assert_types(tokens, [TokenType.LPAREN, TokenType.RPAREN])


class TestPositions:
    def test_positions_are_one_based(self, lex):
        tokens = lex("1 + 2")
        assert_positions(tokens, [1, 3, 5])

    def test_newline_counts_as_one(self, lex):
        tokens = lex("1\n+\n2")
        assert_positions(tokens, [1, 3, 5])

    def test_crlf_counts_as_two(self, lex):
        tokens = lex("1\r\n+")
        assert_positions(tokens, [1, 4])

    def test_eof_position_is_length_plus_one(self):
        tokens = list(tokenize("12 + 3"))
        assert tokens[-1].type == TokenType.EOF
        assert tokens[-1].position == 7

    def test_eof_after_trailing_whitespace(self):
        tokens = list(tokenize("1  \n\n"))
        assert tokens[-1].position == 6

    def test_bytes_count_per_byte(self):
        # 'é' is two bytes in UTF-8, so the '+' sits at byte position 4
        tokens = list(tokenize("é +".encode("utf-8")))
        assert_types(tokens[:3], [TokenType.INVALID, TokenType.INVALID, TokenType.PLUS])
        assert tokens[2].position == 4


class TestInvalid:
    def test_unknown_character(self, lex):
        tokens = lex("&")
        assert_types(tokens, [TokenType.INVALID])
        assert tokens[0].raw == "&"

    def test_unknown_characters_are_one_wide(self, lex):
        tokens = lex("a%b")
        assert_types(tokens, [TokenType.INVALID] * 3)
        assert_positions(tokens, [1, 2, 3])

    def test_letters_are_invalid(self, lex):
        tokens = lex("x")
        assert_types(tokens, [TokenType.INVALID])


class TestComments:
    def test_full_line_comment(self, lex):
        tokens = lex("# comment\n3")
        assert_types(tokens, [TokenType.NUMBER])
        assert tokens[0].position == 11

    def test_comment_after_expression(self, lex):
        tokens = lex("3 # trailing note")
        assert_types(tokens, [TokenType.NUMBER])

    def test_indented_comment(self, lex):
        tokens = lex("   # note\n  4")
        assert_positions(tokens, [13])

    def test_several_comment_lines(self, lex):
        tokens = lex("# a\n# b\n\n5 + # c\n6")
        assert_types(tokens, [TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER])

    def test_comment_to_end_of_input(self):
        tokens = list(tokenize("1 # no newline"))
        assert tokens[-1].type == TokenType.EOF
        assert tokens[-1].position == 15


class TestPullBased:
    def test_next_token_advances_one_token(self):
        lexer = Lexer("1 + 2")
        assert lexer.next_token().type == TokenType.NUMBER
        assert lexer.position == 2
        assert lexer.next_token().type == TokenType.PLUS
        assert lexer.position == 4

    def test_eof_repeats(self):
        lexer = Lexer("")
        assert lexer.next_token().type == TokenType.EOF
        assert lexer.next_token().type == TokenType.EOF

    def test_tokenize_is_lazy(self):
        stream = tokenize("1 + 2")
        first = next(stream)
        assert first.type == TokenType.NUMBER
