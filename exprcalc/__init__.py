"""
exprcalc - Arithmetic Expression Evaluator

Converts a string of integers, + - * /, and parentheses into a number via a
three-stage pipeline: text -> tokens -> expression tree -> float.

Architecture:
    exprcalc/
    ├── lexer/           # Characters to tokens
    ├── parser/          # Tokens to expression tree
    ├── evaluator/       # Expression tree to number
    └── cli.py           # Command line driver

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, SourceLocation, LexerError
from .parser import Parser, Expression, NumberLiteral, BinaryOp, BinaryOperator, ParseError
from .parser.parser import parse_string
from .evaluator import Evaluator, EvaluationError, DivisionByZeroError, evaluate_tree, evaluate_string

# Every user-facing failure the pipeline reports
EXPRESSION_ERRORS = (LexerError, ParseError, EvaluationError)


def parse(text: str) -> Expression:
    """Parse expression text into a tree; raises LexerError or ParseError."""
    return parse_string(text)


def evaluate(tree: Expression) -> float:
    """Evaluate a parsed tree; raises EvaluationError on division by zero."""
    return evaluate_tree(tree)


def calculate(text: str) -> float:
    """Parse and evaluate expression text in one call."""
    return evaluate_string(text)


__all__ = [
    # Pipeline entry points
    "parse",
    "evaluate",
    "calculate",

    # Core classes
    "Lexer",
    "Parser",
    "Evaluator",
    "Token",
    "TokenType",
    "SourceLocation",
    "Expression",
    "NumberLiteral",
    "BinaryOp",
    "BinaryOperator",

    # Errors
    "LexerError",
    "ParseError",
    "EvaluationError",
    "DivisionByZeroError",
    "EXPRESSION_ERRORS",

    # Version info
    "__version__",
    "__license__",
]
