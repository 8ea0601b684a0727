"""Tests for postfix evaluation."""

import math
import warnings

import pytest

from core import (
    RPNEvaluator, Token, Variable, NEGATE, MissingOperandError, StackSizeError,
    tokenize, to_postfix,
)


def calc(text):
    return RPNEvaluator.evaluate(to_postfix(tokenize(text)))


@pytest.mark.parametrize("expr,expected", [
    ("4 + 2 * 3", 10.0),
    ("4.5 + 2 * 3", 10.5),
    ("4 * (2 + 3)", 20.0),
    ("2^3^2", 512.0),
    ("-1", -1.0),
    ("8 / 4 / 2", 1.0),
    ("2 (x + 1) / 2", 1.5),
    ("2 * -3 + 1", -5.0),
])
def test_calculate(expr, expected):
    assert calc(expr) == expected


def test_result_is_python_float():
    assert type(calc("1 + 1")) is float


def test_functions():
    assert calc("sin(0)") == 0.0
    assert calc("cos(0)") == 1.0
    assert calc("tan(0)") == 0.0
    assert calc("sin(0) + 1") == 1.0


def test_variable_passes_top_of_stack_through():
    assert calc("5x") == 5.0
    # x 不会新增栈元素，所以 '*' 只剩一个操作数
    with pytest.raises(MissingOperandError):
        calc("2 + x")
    with pytest.raises(MissingOperandError):
        calc("5 * sin(x)")


def test_variable_on_empty_stack_is_skipped():
    postfix = [Token.variable('x'), Token.number(3)]
    assert RPNEvaluator.evaluate(postfix) == 3.0


def test_unary_underflow_is_permissive():
    assert RPNEvaluator.evaluate([NEGATE, Token.function('sin'), Token.number(2)]) == 2.0


def test_single_operator_is_missing_operand():
    with pytest.raises(MissingOperandError, match="Missing operand for operator '\\+'"):
        RPNEvaluator.evaluate([Token.operator('+')])


def test_operator_with_one_operand():
    with pytest.raises(MissingOperandError) as excinfo:
        RPNEvaluator.evaluate([Token.number(1), Token.operator('^')])
    assert excinfo.value.symbol == '^'


def test_empty_stack_at_end():
    with pytest.raises(StackSizeError) as excinfo:
        RPNEvaluator.evaluate([])
    assert excinfo.value.size == 0
    assert str(excinfo.value) == "Expected 1 value on stack, found 0"


def test_subtraction_leaves_two_values():
    with pytest.raises(StackSizeError, match="found 2"):
        calc("5 - 3")


def test_ieee_semantics():
    assert calc("1 / 0") == math.inf
    assert math.isnan(calc("0 / 0"))
    assert math.isnan(calc("(-8) ^ (1 / 3)"))
    assert calc("10 ^ 400") == math.inf


def test_overflow_does_not_warn():
    big = "9" * 300
    tiny = "0." + "0" * 300 + "1"
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert calc(f"{big} / {tiny}") == math.inf
        assert calc(f"{big} * {big}") == math.inf
        assert calc(f"{big} + {big} * {big}") == math.inf
        assert math.isnan(calc("0 / 0"))
