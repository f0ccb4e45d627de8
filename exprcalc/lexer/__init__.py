"""
exprcalc Lexer Package

Implements the lexical analyzer for arithmetic expressions.

Key Features:
- On-demand token production with single-character lookahead
- Integer literals, + - * / and parentheses
- INVALID tokens instead of exceptions for unknown characters
- Source location tracking for diagnostics
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
]
