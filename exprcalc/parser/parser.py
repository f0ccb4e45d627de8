"""
exprcalc Recursive Descent Parser

Grammar:

    expression := term (("+" | "-") term)*
    term       := factor (("*" | "/") factor)*
    factor     := NUMBER | "(" expression ")"

Rule nesting encodes precedence; the loops in expression/term fold to the
left, which gives left associativity. Tokens are pulled from the lexer one
at a time through a single-token lookahead.
"""

import logging
from typing import Optional

from ..lexer.lexer import Lexer, DEFAULT_FILENAME
from ..lexer.tokens import (
    Token, TokenType, DIGITS, ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS
)
from ..lexer.errors import create_invalid_character_error
from .ast_nodes import (
    Expression, NumberLiteral, BinaryOp, BinaryOperator, SourceSpan, tree_depth
)
from .errors import (
    create_unexpected_token_error, create_unclosed_delimiter_error,
    create_unexpected_eof_error, create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

FACTOR_EXPECTATION = "a number or '('"

# Each open parenthesis costs three Python frames (factor, expression, term)
MAX_NESTING_DEPTH = 200


class Parser:
    """
    exprcalc recursive descent parser.

    Holds the lexer and exactly one current token. Every parse method that
    matches a token advances before handing control back, so `current`
    always holds the token about to be acted on.
    """

    def __init__(self, lexer: Lexer, max_depth: int = MAX_NESTING_DEPTH):
        """
        Initialize the parser and prime the lookahead token.

        Args:
            lexer: Lexer positioned at the start of the expression
            max_depth: Deepest parenthesis nesting accepted before reporting P005
        """
        self.lexer = lexer
        self.max_depth = max_depth
        self.depth = 0
        self.current: Optional[Token] = None
        self._advance()

    def parse(self) -> Expression:
        """
        Parse the whole token stream into an expression tree.

        Returns:
            Root node of the expression tree

        Raises:
            LexerError: If an invalid character is reached
            ParseError: If the tokens do not match the grammar
        """
        tree = self._parse_expression()

        if self.current.type == TokenType.INVALID:
            raise create_invalid_character_error(self.current)
        if self.current.type != TokenType.EOF:
            raise create_unexpected_token_error(TokenType.EOF, self.current)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Parsed %s (depth %d)", tree, tree_depth(tree))
        return tree

    def _parse_expression(self) -> Expression:
        """expression := term (("+" | "-") term)*"""
        left = self._parse_term()

        while self.current.type in ADDITIVE_OPERATORS:
            operator = BinaryOperator.from_token_type(self._advance().type)
            right = self._parse_term()
            left = BinaryOp(left, operator, right, SourceSpan(left.span.start, right.span.end))

        return left

    def _parse_term(self) -> Expression:
        """term := factor (("*" | "/") factor)*"""
        left = self._parse_factor()

        while self.current.type in MULTIPLICATIVE_OPERATORS:
            operator = BinaryOperator.from_token_type(self._advance().type)
            right = self._parse_factor()
            left = BinaryOp(left, operator, right, SourceSpan(left.span.start, right.span.end))

        return left

    def _parse_factor(self) -> Expression:
        """factor := NUMBER | "(" expression ")" """
        token = self.current

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(_parse_number(token.value), SourceSpan(token.location, token.location))

        if token.type == TokenType.LEFT_PAREN:
            if self.depth >= self.max_depth:
                raise create_nesting_too_deep_error(self.max_depth, token)

            self._advance()
            self.depth += 1
            try:
                expr = self._parse_expression()
            finally:
                self.depth -= 1

            if self.current.type == TokenType.INVALID:
                raise create_invalid_character_error(self.current)
            if self.current.type != TokenType.RIGHT_PAREN:
                raise create_unclosed_delimiter_error(token.location, self.current)

            self._advance()
            # Parentheses only group; they do not get a node of their own
            return expr

        if token.type == TokenType.INVALID:
            raise create_invalid_character_error(token)
        if token.type == TokenType.EOF:
            raise create_unexpected_eof_error(FACTOR_EXPECTATION, token)

        raise create_unexpected_token_error(FACTOR_EXPECTATION, token)

    def _advance(self) -> Token:
        """Replace the current token with the next one; return the old one."""
        previous = self.current
        self.current = self.lexer.next_token()
        return previous


def _parse_number(digits: str) -> float:
    # The lexer only emits ASCII digit runs, so anything else is a bug upstream
    assert digits and all(c in DIGITS for c in digits), f"malformed NUMBER payload {digits!r}"
    return float(digits)


def parse_string(source: str, filename: str = DEFAULT_FILENAME) -> Expression:
    """
    Convenience function to parse an expression string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        Expression tree

    Raises:
        LexerError: If an invalid character is reached
        ParseError: If parsing fails
    """
    return Parser(Lexer(source, filename)).parse()
