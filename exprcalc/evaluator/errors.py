"""
Evaluation error handling for exprcalc.

Arithmetic failures found while reducing an expression tree. These are
ordinary reported failures, not crashes.
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import Expression


class EvaluationError(Exception):
    """
    Exception raised when evaluation encounters an arithmetic error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        node: Optional[Expression] = None,
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
        self.node = node

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def summary(self) -> str:
        return EVALUATOR_ERROR_CODES.get(self.diagnostic.code, "Evaluation error")

    def __str__(self) -> str:
        return str(self.diagnostic)


class DivisionByZeroError(EvaluationError):
    """Raised when the right operand of a division evaluates to exactly zero."""
    pass


EVALUATOR_ERROR_CODES = {
    "E001": "Division by zero",
}


def create_division_by_zero_error(node: Expression, divisor: Expression) -> DivisionByZeroError:
    """Create an error for a division whose divisor evaluated to zero."""
    return DivisionByZeroError(
        message="division by zero",
        location=divisor.span.start,
        node=node,
        code="E001",
        help_text=f"The divisor {divisor} evaluates to 0.",
    )
