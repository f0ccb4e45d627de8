"""
Token definitions for the exprcalc lexer.

The token alphabet:
- Integer literals (runs of ASCII digits)
- The four arithmetic operators
- Parentheses
- End of input, and an INVALID token for characters outside the alphabet
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """Enumeration of all token types produced by the lexer."""

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, 007

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    # ========================================================================
    # Error Tokens
    # ========================================================================
    INVALID = auto()                # Character outside the token alphabet


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the expression text.

    Line and column are 1-based; offset is the 0-based character index.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    `value` is the payload: the digit string for NUMBER, a description of the
    offending character for INVALID, the operator character for operators
    and parentheses, and None for EOF.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_operator(self) -> bool:
        """Check if this token is one of the four binary operators."""
        return self.type in ADDITIVE_OPERATORS or self.type in MULTIPLICATIVE_OPERATORS

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


# Single-character tokens recognised by the lexer
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

# Operator groups by precedence level (lowest first)
ADDITIVE_OPERATORS = frozenset({TokenType.PLUS, TokenType.MINUS})
MULTIPLICATIVE_OPERATORS = frozenset({TokenType.MULTIPLY, TokenType.DIVIDE})

DIGITS = frozenset("0123456789")
