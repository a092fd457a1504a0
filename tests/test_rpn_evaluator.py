import pytest

from core import (
    Token, OperatorKind, OPERATOR_TOKENS, LEFT_PAREN,
    evaluate_postfix, DivideByZeroError, ContractViolation, CalculatorError
)

ADD = OPERATOR_TOKENS[OperatorKind.ADD]
SUB = OPERATOR_TOKENS[OperatorKind.SUBTRACT]
MUL = OPERATOR_TOKENS[OperatorKind.MULTIPLY]
DIV = OPERATOR_TOKENS[OperatorKind.DIVIDE]


def _rpn(*items):
    return [item if isinstance(item, Token) else Token.operand(item) for item in items]


def test_multiplication_before_addition():
    assert evaluate_postfix(_rpn(3, 4, 2, MUL, ADD)) == 11


def test_division_before_addition():
    assert evaluate_postfix(_rpn(3, 4, 2, DIV, ADD)) == 5


def test_single_operand():
    assert evaluate_postfix(_rpn(5)) == 5


def test_operand_order_for_subtract_and_divide():
    assert evaluate_postfix(_rpn(10, 4, SUB)) == 6
    assert evaluate_postfix(_rpn(12, 4, DIV)) == 3


def test_divide_by_zero():
    with pytest.raises(DivideByZeroError) as exc_info:
        evaluate_postfix(_rpn(5, 0, DIV))
    assert (exc_info.value.a, exc_info.value.b) == (5, 0)
    assert str(exc_info.value) == "attempted to divide by zero: 5 / 0"


def test_insufficient_operands_is_a_contract_violation():
    with pytest.raises(ContractViolation):
        evaluate_postfix(_rpn(5, ADD))


def test_leftover_operands_is_a_contract_violation():
    with pytest.raises(ContractViolation):
        evaluate_postfix(_rpn(5, 6))


def test_empty_sequence_is_a_contract_violation():
    with pytest.raises(ContractViolation):
        evaluate_postfix([])


def test_parenthesis_in_rpn_is_a_contract_violation():
    with pytest.raises(ContractViolation):
        evaluate_postfix(_rpn(LEFT_PAREN, 5))


def test_contract_violation_is_not_a_user_error():
    assert issubclass(ContractViolation, AssertionError)
    assert not issubclass(ContractViolation, CalculatorError)
