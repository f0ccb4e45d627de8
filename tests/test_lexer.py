"""
Test suite for the exprcalc lexer.

Tests cover:
- Token stream shapes for operators, numbers and parentheses
- Whitespace handling and source locations
- INVALID tokens and continuation past them
- End-of-input behaviour
"""

import dataclasses
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprcalc.lexer.lexer import Lexer, tokenize_string
from exprcalc.lexer.tokens import Token, TokenType, SourceLocation


def token_types(source):
    return [token.type for token in tokenize_string(source)]


class TestLexer(unittest.TestCase):
    """Test cases for the lexer."""

    def test_operators_and_parentheses(self):
        """Every single-character token is recognised."""
        self.assertEqual(token_types("(2 + 3) * 5 - 1 / 4"), [
            TokenType.LEFT_PAREN, TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER,
            TokenType.RIGHT_PAREN, TokenType.MULTIPLY, TokenType.NUMBER, TokenType.MINUS,
            TokenType.NUMBER, TokenType.DIVIDE, TokenType.NUMBER, TokenType.EOF,
        ])

    def test_number_payload_is_exact_digit_run(self):
        tokens = tokenize_string("123+007")

        self.assertEqual(tokens[0].type, TokenType.NUMBER)
        self.assertEqual(tokens[0].value, "123")
        self.assertEqual(tokens[0].lexeme, "123")
        self.assertEqual(tokens[2].value, "007")

    def test_operator_payload(self):
        tokens = tokenize_string("*")
        self.assertEqual(tokens[0].value, "*")

    def test_whitespace_is_skipped(self):
        """Spaces, tabs and newlines separate tokens but produce none."""
        self.assertEqual(token_types(" \t2\n+\r\n  3  "),
                         [TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(token_types("2+3"), token_types(" 2 +   3 "))

    def test_empty_and_blank_input(self):
        self.assertEqual(token_types(""), [TokenType.EOF])
        self.assertEqual(token_types("   \n\t"), [TokenType.EOF])

    def test_eof_is_sticky(self):
        """next_token keeps returning EOF once input is exhausted."""
        lexer = Lexer("7")
        self.assertEqual(lexer.next_token().type, TokenType.NUMBER)
        for _ in range(3):
            self.assertEqual(lexer.next_token().type, TokenType.EOF)
        self.assertEqual(lexer.pos, 1)

    def test_invalid_character_continues_lexing(self):
        tokens = tokenize_string("2 @ 3")

        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER, TokenType.INVALID, TokenType.NUMBER, TokenType.EOF,
        ])
        invalid = tokens[1]
        self.assertEqual(invalid.lexeme, "@")
        self.assertEqual(invalid.value, "Invalid character: @")
        self.assertIn("@", invalid.value)

    def test_decimal_point_is_not_part_of_a_number(self):
        tokens = tokenize_string("3.5")

        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER, TokenType.INVALID, TokenType.NUMBER, TokenType.EOF,
        ])
        self.assertEqual(tokens[0].value, "3")
        self.assertEqual(tokens[2].value, "5")

    def test_non_ascii_digit_is_invalid(self):
        """Only 0-9 form numbers, so payloads always convert with float()."""
        tokens = tokenize_string("٣")
        self.assertEqual(tokens[0].type, TokenType.INVALID)

        tokens = tokenize_string("2²")
        self.assertEqual(tokens[0].value, "2")
        self.assertEqual(tokens[1].type, TokenType.INVALID)

    def test_source_locations(self):
        tokens = tokenize_string("1 +\n 22")

        self.assertEqual(tokens[0].location, SourceLocation("<expression>", 1, 1, 0))
        self.assertEqual(tokens[1].location, SourceLocation("<expression>", 1, 3, 2))
        self.assertEqual(tokens[2].location, SourceLocation("<expression>", 2, 2, 5))
        self.assertEqual(tokens[3].location, SourceLocation("<expression>", 2, 4, 7))
        self.assertEqual(str(tokens[2].location), "<expression>:2:2")

    def test_custom_filename(self):
        tokens = tokenize_string("1", filename="input.txt")
        self.assertEqual(tokens[0].location.filename, "input.txt")

    def test_iteration_matches_tokenize(self):
        source = "(1 + 2) * 3"
        self.assertEqual(list(Lexer(source)), Lexer(source).tokenize())

    def test_tokens_are_immutable(self):
        token = tokenize_string("1")[0]
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.value = "2"

    def test_token_str(self):
        number = tokenize_string("42")[0]
        invalid = tokenize_string("$")[0]

        self.assertEqual(str(number), "NUMBER('42')")
        self.assertEqual(str(invalid), "INVALID('$' -> 'Invalid character: $')")

    def test_is_operator(self):
        tokens = tokenize_string("+ - * / ( 1")
        self.assertEqual([t.is_operator for t in tokens[:-1]],
                         [True, True, True, True, False, False])
        self.assertTrue(tokens[-1].is_eof)


if __name__ == '__main__':
    unittest.main()
