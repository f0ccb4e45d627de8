"""
Tree-walking evaluator for exprcalc expression trees.

Post-order: both children are evaluated before their parent, each node
exactly once.
"""

import logging
import operator
from typing import List, Tuple

from ..lexer.lexer import DEFAULT_FILENAME
from ..parser.ast_nodes import Expression, NumberLiteral, BinaryOp, BinaryOperator
from ..parser.parser import parse_string
from .errors import EvaluationError, create_division_by_zero_error

logger = logging.getLogger(__name__)


_BINARY_OPS = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUBTRACT: operator.sub,
    BinaryOperator.MULTIPLY: operator.mul,
    BinaryOperator.DIVIDE: operator.truediv,
}


class Evaluator:
    """Reduces an expression tree to a float."""

    def evaluate(self, node: Expression) -> float:
        """
        Evaluate the tree rooted at node.

        Raises:
            DivisionByZeroError: If a divisor evaluates to exactly 0.0
            TypeError: If node is not an expression tree node
        """
        try:
            return self._eval(node)
        except EvaluationError as e:
            logger.debug("Evaluation failed at %s: %s", e.diagnostic.location, e.message)
            raise

    def _eval(self, node: Expression) -> float:
        # Explicit stack: long operator chains make left-deep trees far
        # deeper than the interpreter's recursion limit.
        values: List[float] = []
        stack: List[Tuple[Expression, bool]] = [(node, False)]

        while stack:
            current, children_done = stack.pop()

            if isinstance(current, NumberLiteral):
                values.append(current.value)

            elif isinstance(current, BinaryOp):
                if not children_done:
                    # Left is pushed last so it is evaluated first
                    stack.append((current, True))
                    stack.append((current.right, False))
                    stack.append((current.left, False))
                    continue

                right = values.pop()
                left = values.pop()

                if current.operator is BinaryOperator.DIVIDE and right == 0.0:
                    raise create_division_by_zero_error(current, current.right)

                values.append(_BINARY_OPS[current.operator](left, right))

            else:
                raise TypeError(f"Invalid expression tree node: {type(current).__name__}")

        return values.pop()


def evaluate_tree(tree: Expression) -> float:
    """Evaluate an already parsed expression tree."""
    return Evaluator().evaluate(tree)


def evaluate_string(source: str, filename: str = DEFAULT_FILENAME) -> float:
    """
    Convenience function to parse and evaluate an expression string.

    Raises:
        LexerError: If an invalid character is reached
        ParseError: If parsing fails
        EvaluationError: If evaluation fails
    """
    return evaluate_tree(parse_string(source, filename))
