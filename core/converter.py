"""core/converter.py - 中缀转后缀（shunting-yard）"""
import logging
from typing import List

from core.errors import MismatchedParenthesesError
from core.token_system import Token, TokenType

logger = logging.getLogger(__name__)


class InfixConverter:
    """把已通过ExpressionValidator的中缀Token序列转换为RPN序列"""

    @staticmethod
    def to_postfix(tokens: List[Token]) -> List[Token]:
        """
        Args:
            tokens: 中缀Token序列
        Returns:
            后缀（RPN）Token序列，不含括号
        Raises:
            MismatchedParenthesesError: 括号不配对
        """
        output = []
        stack = []  # 操作符栈，也存放左括号

        for tk in tokens:
            if tk.type == TokenType.OPERAND:
                output.append(tk)

            elif tk.type == TokenType.LEFT_PAREN:
                stack.append(tk)

            elif tk.type == TokenType.OPERATOR:
                # 只有栈顶优先级严格更高时才出栈，同级不出栈
                while (stack and stack[-1].type == TokenType.OPERATOR
                       and stack[-1].precedence > tk.precedence):
                    output.append(stack.pop())
                stack.append(tk)

            elif tk.type == TokenType.RIGHT_PAREN:
                while True:
                    if not stack:
                        logger.debug("Right parenthesis without matching left parenthesis")
                        raise MismatchedParenthesesError()
                    top = stack.pop()
                    if top.type == TokenType.LEFT_PAREN:
                        break
                    output.append(top)

        while stack:
            top = stack.pop()
            if top.type == TokenType.LEFT_PAREN:
                logger.debug("Unclosed left parenthesis")
                raise MismatchedParenthesesError()
            output.append(top)

        logger.debug(f"RPN expression: {' '.join(t.name for t in output)}")
        return output


def to_postfix(tokens: List[Token]) -> List[Token]:
    return InfixConverter.to_postfix(tokens)
