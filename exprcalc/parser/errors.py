"""
Error handling for the exprcalc parser.

Provides diagnostics with source locations for token streams that do not
match the expression grammar.
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def summary(self) -> str:
        """Category of the error code, e.g. "Unclosed delimiter"."""
        return PARSER_ERROR_CODES.get(self.diagnostic.code, "Syntax error")

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P004": "Unclosed delimiter",
    "P005": "Nesting too deep",
    "P010": "Unexpected end of input",
}


def describe_expected(expected: Union[TokenType, str]) -> str:
    return expected.name if isinstance(expected, TokenType) else expected


def suggest_for_unexpected(found: Token) -> List[str]:
    """Suggest fixes based on what showed up where an operand was expected."""
    if found.type == TokenType.RIGHT_PAREN:
        return ["Remove the extra ')'", "Check for an empty pair of parentheses"]
    if found.is_operator:
        if found.type == TokenType.MINUS:
            return ["Negative numbers are not supported; write (0 - n) instead"]
        return ["Check for two operators in a row", "Ensure all operators have operands"]
    if found.type in (TokenType.NUMBER, TokenType.LEFT_PAREN):
        return ["Add an operator between the two operands"]
    return []


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    expected_str = describe_expected(expected)
    found_str = found.type.name

    return ParseError(
        message=f"Expected {expected_str}, found {found_str}",
        location=found.location,
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=suggest_for_unexpected(found)
    )


def create_unclosed_delimiter_error(open_location: SourceLocation, found: Token) -> ParseError:
    """Create an error for a '(' that was never closed."""
    return ParseError(
        message="Unclosed delimiter '(': expected closing parenthesis",
        location=found.location,
        token=found,
        code="P004",
        help_text=f"The opening '(' at {open_location} was never closed; found {found.type.name} instead.",
        suggestions=["Add a closing ')'", "Check for missing delimiters"]
    )


def create_unexpected_eof_error(expected: str, found: Token) -> ParseError:
    """Create an error for unexpected end of input."""
    return ParseError(
        message=f"Unexpected end of input, expected {expected}",
        location=found.location,
        token=found,
        code="P010",
        help_text=f"The parser reached the end of the expression while expecting {expected}.",
        suggestions=[f"Add the missing {expected}", "Check for a trailing operator"]
    )


def create_nesting_too_deep_error(limit: int, found: Token) -> ParseError:
    """Create an error for a '(' past the parenthesis nesting limit."""
    return ParseError(
        message=f"Parentheses nested more than {limit} levels deep",
        location=found.location,
        token=found,
        code="P005",
        help_text=f"The parser accepts at most {limit} levels of nested parentheses.",
        suggestions=["Remove redundant parentheses"]
    )
