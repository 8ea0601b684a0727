"""Tests for the public evaluation interface."""

import math
import warnings

import pandas as pd
import pytest

from expression import ExpressionEvaluator, evaluate, evaluate_many


@pytest.mark.parametrize("expr,expected", [
    ("4 + 2 * 3", 10.0),
    ("4.5 + 2 * 3", 10.5),
    ("4 * (2 + 3)", 20.0),
    ("2^3^2", 512.0),
    ("-1", -1.0),
    ("sin(0)", 0.0),
])
def test_evaluate(expr, expected):
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr", ["not an exp", "(1 + 2", "1 + 2)", "+", "5 - 3", "", "--1"])
def test_malformed_input_gives_none(expr):
    assert evaluate(expr) is None


def test_x_is_recorded_but_not_substituted():
    evaluator = ExpressionEvaluator(2.0)
    assert evaluator.variables == {"x": 2.0}
    assert evaluator.evaluate("5x") == 5.0
    assert evaluate("5x", 2.0) == 5.0


def test_default_x():
    assert ExpressionEvaluator().variables == {"x": 0.0}


def test_complex_expression():
    assert evaluate("2 ( x + 1 ) / 2", -1.0) == 1.5


def test_repeated_evaluation_is_stable():
    evaluator = ExpressionEvaluator()
    first = evaluator.evaluate("2 ^ 3 ^ 2 + sin(1)")
    assert evaluator.evaluate("2 ^ 3 ^ 2 + sin(1)") == first
    assert evaluate("1 + 2") == evaluate("1 + 2")


def test_evaluate_detailed_reports_errors():
    evaluator = ExpressionEvaluator()
    assert evaluator.evaluate_detailed("1 + 1") == (2.0, None)
    result, error = evaluator.evaluate_detailed("(1 + 2")
    assert result is None
    assert error == "Mismatched '('"
    assert evaluator.evaluate_detailed("2 * ")[1] == "Missing operand for operator '*'"


def test_describe():
    evaluator = ExpressionEvaluator()
    assert evaluator.describe("1 + 2 * 3") == "1 2 3 * +"
    assert evaluator.describe("1 + 2)") == "<Mismatched ')'>"


def test_evaluate_many():
    results = evaluate_many(["1 + 1", "bad", "2 ^ 10"])
    assert isinstance(results, pd.Series)
    assert results.name == "result"
    assert results[0] == 2.0
    assert math.isnan(results[1])
    assert results[2] == 1024.0


def test_evaluate_never_raises_on_overflow():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert evaluate("9" * 300 + " / 0." + "0" * 300 + "1") == math.inf
