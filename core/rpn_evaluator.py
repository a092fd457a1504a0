"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from typing import List

from core.errors import ContractViolation
from core.operators import Operators
from core.token_system import Token, TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _violation(message, token_sequence):
        logger.error(message)
        logger.error(f"RPN expression: {' '.join(t.name for t in token_sequence)}")
        return ContractViolation(message)

    @staticmethod
    def evaluate(token_sequence: List[Token]) -> int:
        """
        Args:
            token_sequence: 后缀Token序列（由InfixConverter生成）
        Returns:
            整数结果
        Raises:
            DivideByZeroError: 除数为0
            ContractViolation: 序列不是合法的后缀表达式（上游阶段的bug）
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.OPERAND:
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    raise RPNEvaluator._violation(
                        f"Insufficient operands for {token.name}", token_sequence
                    )
                operand2 = stack.pop()
                operand1 = stack.pop()

                op_method = getattr(Operators, token.operator.value)
                stack.append(op_method(operand1, operand2))

            else:
                raise RPNEvaluator._violation(
                    f"Unexpected parenthesis token {token.name} in RPN expression", token_sequence
                )

        if len(stack) != 1:
            raise RPNEvaluator._violation(
                f"Stack has {len(stack)} elements after evaluation, expected 1", token_sequence
            )
        return stack[0]


def evaluate_postfix(token_sequence: List[Token]) -> int:
    return RPNEvaluator.evaluate(token_sequence)
