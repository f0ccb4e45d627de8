"""
exprcalc Evaluator Package

Reduces expression trees to floating-point results.
"""

from .evaluator import Evaluator, evaluate_tree, evaluate_string
from .errors import EvaluationError, DivisionByZeroError

__all__ = [
    "Evaluator",
    "evaluate_tree",
    "evaluate_string",
    "EvaluationError",
    "DivisionByZeroError",
]
