import pytest

from core import (
    evaluate, ContractViolation, DivideByZeroError, InvalidCharacterError,
    InvalidExpressionError, MismatchedParenthesesError, ZeroLengthExpressionError
)


@pytest.mark.parametrize("text, expected", [
    ("3 + 4 * 2", 11),
    ("3 + 4 / 2", 5),
    ("1 + 2 + 3 + 4 + 5 * 14 / 7", 20),
    ("(3 + 4) * 2", 14),
    ("42", 42),
    ("(((7)))", 7),
    ("2 * (3 + (4 - 1))", 12),
    ("7 / 2", 3),
    ("1 - 3", -2),
    ("100 * 0", 0),
])
def test_evaluate(text, expected):
    assert evaluate(text) == expected


def test_same_precedence_groups_to_the_right():
    assert evaluate("10 - 4 - 3") == 9
    assert evaluate("8 / 2 / 2") == 8


def test_divide_by_zero():
    with pytest.raises(DivideByZeroError):
        evaluate("5 / 0")


def test_divide_by_zero_from_subexpression():
    with pytest.raises(DivideByZeroError) as exc_info:
        evaluate("1 / (2 - 2)")
    assert (exc_info.value.a, exc_info.value.b) == (1, 0)


def test_empty_expression():
    with pytest.raises(ZeroLengthExpressionError):
        evaluate("")
    with pytest.raises(ZeroLengthExpressionError):
        evaluate("   ")


def test_consecutive_operands():
    with pytest.raises(InvalidExpressionError):
        evaluate("2 2")


@pytest.mark.parametrize("text", ["-1", "1 + + 1", "1 +", "* 2", "(1 +)"])
def test_structural_errors(text):
    with pytest.raises(InvalidExpressionError):
        evaluate(text)


@pytest.mark.parametrize("text", ["(3 + 4", "3 + 4)", "((1)", "(1))"])
def test_mismatched_parentheses(text):
    with pytest.raises(MismatchedParenthesesError):
        evaluate(text)


def test_invalid_character():
    with pytest.raises(InvalidCharacterError):
        evaluate("3 + x")


def test_first_failing_stage_wins():
    # 分词错误优先于结构错误和除零
    with pytest.raises(InvalidCharacterError):
        evaluate("5 / 0 +  x")
    with pytest.raises(InvalidExpressionError):
        evaluate("5 / 0 + ")


def test_unvalidated_paren_adjacency_reaches_evaluator():
    with pytest.raises(ContractViolation):
        evaluate("()")
    with pytest.raises(ContractViolation):
        evaluate("(2)(3)")


def test_evaluate_is_idempotent():
    text = "1 + 2 * (3 - 4) / 5"
    assert {evaluate(text) for _ in range(5)} == {evaluate(text)}
