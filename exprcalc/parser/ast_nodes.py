"""
Expression tree node definitions for exprcalc.

The tree has exactly two variants, NumberLiteral and BinaryOp. Nodes are
frozen after construction and every BinaryOp exclusively owns its two
children, so the tree never has sharing or cycles.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from ..lexer.tokens import SourceLocation, TokenType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    NUMBER_LITERAL = "NumberLiteral"
    BINARY_OP = "BinaryOp"


class BinaryOperator(Enum):
    """The four arithmetic operators, valued by their source symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> "BinaryOperator":
        return _OPERATOR_BY_TOKEN[token_type]

    @property
    def symbol(self) -> str:
        return self.value


_OPERATOR_BY_TOKEN = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUBTRACT,
    TokenType.MULTIPLY: BinaryOperator.MULTIPLY,
    TokenType.DIVIDE: BinaryOperator.DIVIDE,
}


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source text (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class Expression(ABC):
    """Base class for expression tree nodes."""

    @property
    @abstractmethod
    def node_type(self) -> ASTNodeType:
        pass

    @abstractmethod
    def children(self) -> List["Expression"]:
        """Get all child nodes."""
        pass


@dataclass(frozen=True)
class NumberLiteral(Expression):
    """Numeric literal; the value is always stored as a float."""
    value: float
    span: SourceSpan

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.NUMBER_LITERAL

    def children(self) -> List[Expression]:
        return []

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operation over two owned child expressions."""
    left: Expression
    operator: BinaryOperator
    right: Expression
    span: SourceSpan

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.BINARY_OP

    def children(self) -> List[Expression]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return render_tree(self)


# Operator chains build trees thousands of levels deep, so the helpers below
# walk with an explicit stack instead of recursing.

def render_tree(node: Expression) -> str:
    """Fully parenthesized text of the tree, so parser grouping is visible."""
    parts: List[str] = []
    stack: List[Union[str, Expression]] = [node]

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, BinaryOp):
            stack.extend([")", item.right, f" {item.operator.symbol} ", item.left, "("])
        else:
            parts.append(str(item))

    return "".join(parts)


def tree_depth(node: Expression) -> int:
    """Height of the tree rooted at node (a single literal has depth 1)."""
    deepest = 0
    stack = [(node, 1)]

    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in current.children())

    return deepest
