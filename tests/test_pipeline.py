"""
End-to-end tests for the exprcalc pipeline.

Runs text through lexer, parser and evaluator via the package-level API and
checks results against standard arithmetic.
"""

import sys
import os

import pytest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import exprcalc
from exprcalc import (
    calculate, parse, evaluate, LexerError, ParseError, DivisionByZeroError,
    EXPRESSION_ERRORS,
)


EXPECTED_RESULTS = [
    ("2 + 3 * 4", 14.0),
    ("10 - 2 - 3", 5.0),
    ("8 / 4 / 2", 1.0),
    ("(2 + 3) * 5", 25.0),
    ("((1 + 2)) * ((3))", 9.0),
    ("2 * (3 + 4) * 5", 70.0),
    ("100 / (4 * (2 + 3))", 5.0),
    ("1 - 2", -1.0),
    ("0", 0.0),
    ("007 + 3", 10.0),
    ("12345678901234567890 - 1", 12345678901234567890.0 - 1),
]

ERROR_CASES = [
    ("1 / 0", DivisionByZeroError),
    ("2 + @", LexerError),
    ("(2 + 3", ParseError),
    ("", ParseError),
    ("2 + + 3", ParseError),
    ("4 )", ParseError),
]


@pytest.mark.parametrize("source, expected", EXPECTED_RESULTS)
def test_calculate(source, expected):
    assert calculate(source) == expected


@pytest.mark.parametrize("source, expected", EXPECTED_RESULTS)
def test_parse_then_evaluate(source, expected):
    assert evaluate(parse(source)) == expected


@pytest.mark.parametrize("source, error_type", ERROR_CASES)
def test_reported_failures(source, error_type):
    with pytest.raises(error_type) as excinfo:
        calculate(source)

    assert isinstance(excinfo.value, EXPRESSION_ERRORS)
    assert excinfo.value.diagnostic.severity == "error"


@pytest.mark.parametrize("spaced", ["2+3", " 2 +   3 ", "\t2\n+\n3\n", "2 +3"])
def test_whitespace_insensitivity(spaced):
    assert calculate(spaced) == calculate("2 + 3") == 5.0


def test_idempotence():
    """No state carries over between runs on the same input."""
    source = "(10 - 4) / 3 * (2 + 1)"
    results = [calculate(source) for _ in range(5)]
    trees = [str(parse(source)) for _ in range(5)]

    assert results == [6.0] * 5
    assert len(set(trees)) == 1


def test_failure_then_success():
    with pytest.raises(DivisionByZeroError):
        calculate("5 / 0")
    assert calculate("5 / 1") == 5.0


def test_results_are_floats():
    assert isinstance(calculate("6 / 3"), float)
    assert isinstance(calculate("2"), float)


def test_version():
    assert exprcalc.__version__


LONG_CHAINS = [
    ("+".join(["1"] * 2000), 2000.0),
    ("*".join(["1"] * 2000), 1.0),
    ("2000" + " - 1" * 1999, 1.0),
    ("1" + " / 1" * 1999, 1.0),
    ("1" + " + 2 * 3" * 1000, 6001.0),
]


@pytest.mark.parametrize("source, expected", LONG_CHAINS)
def test_long_operator_chains(source, expected):
    assert calculate(source) == expected


def test_nesting_up_to_limit():
    assert calculate("(" * 200 + "1" + ")" * 200) == 1.0
    assert calculate("(" * 100 + "1" + "+ 1)" * 100) == 101.0


@pytest.mark.parametrize("depth", [201, 400, 5000])
def test_nesting_past_limit(depth):
    with pytest.raises(ParseError) as excinfo:
        calculate("(" * depth + "1" + ")" * depth)

    assert isinstance(excinfo.value, EXPRESSION_ERRORS)
    assert excinfo.value.diagnostic.code == "P005"
