"""
exprcalc Parser Package

Implements a recursive descent parser for arithmetic expressions.
Produces immutable expression trees with source spans.

Key Features:
- Standard precedence: * and / bind tighter than + and -
- Left associativity for operators of equal precedence
- Parenthesized grouping without extra tree nodes
- First-error-aborts diagnostics
"""

from .ast_nodes import (
    ASTNodeType, SourceSpan, Expression, NumberLiteral, BinaryOp, BinaryOperator
)
from .parser import Parser, parse_string
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "ASTNodeType", "SourceSpan",
    "Expression", "NumberLiteral", "BinaryOp", "BinaryOperator",

    # Error handling
    "ParseError",
]
