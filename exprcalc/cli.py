#!/usr/bin/env python3
"""
exprcalc command line driver
============================

Evaluates one arithmetic expression and prints the result.

Usage:
    exprcalc [expression] [-v]

With no expression the built-in example "(2 + 3) * 5" is evaluated.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer import Lexer, LexerError
from .parser import Parser, ParseError
from .evaluator import Evaluator, EvaluationError

logger = logging.getLogger(__name__)

DEFAULT_EXPRESSION = "(2 + 3) * 5"


def format_result(value: float) -> str:
    """Render whole-number results without a trailing .0"""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="Evaluate an arithmetic expression of integers, + - * / and parentheses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprcalc                      # Evaluates (2 + 3) * 5
    exprcalc "2 + 3 * 4"          # 14
    exprcalc "10 - 2 - 3" -v      # 5, with debug logging
        """
    )
    parser.add_argument('expression', nargs='?', default=DEFAULT_EXPRESSION,
                        help=f'Expression to evaluate (default: "{DEFAULT_EXPRESSION}")')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def run(expression: str) -> int:
    """Run the pipeline on one expression; returns the process exit code."""
    lexer = Lexer(expression)
    parser = Parser(lexer)

    logger.info("Parsing %r", expression)
    try:
        tree = parser.parse()
    except (LexerError, ParseError) as e:
        logger.debug("Parse failed: %s [%s]", e.summary, e.diagnostic.code)
        print(f"Error parsing expression: {e.message}", file=sys.stderr)
        print(str(e), end="", file=sys.stderr)
        return 1

    logger.info("Evaluating %r", expression)
    try:
        result = Evaluator().evaluate(tree)
    except EvaluationError as e:
        logger.debug("Evaluation failed: %s [%s]", e.summary, e.diagnostic.code)
        print(f"Error evaluating expression: {e.message}", file=sys.stderr)
        print(str(e), end="", file=sys.stderr)
        return 1

    print(f"Result: {format_result(result)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the exprcalc console script"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return run(args.expression)


if __name__ == "__main__":
    sys.exit(main())
