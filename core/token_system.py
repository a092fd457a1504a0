"""core/token_system.py"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from core.errors import (
    InvalidCharacterError, InvalidExpressionError, ZeroLengthExpressionError
)

logger = logging.getLogger(__name__)

INT64_MAX = 2 ** 63 - 1


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class OperatorKind(Enum):
    # 取值与Operators中的方法名一致
    ADD = "add"
    SUBTRACT = "sub"
    MULTIPLY = "mul"
    DIVIDE = "div"


# 优先级：数值越大结合越紧
PRECEDENCE = {
    OperatorKind.ADD: 1,
    OperatorKind.SUBTRACT: 1,
    OperatorKind.MULTIPLY: 2,
    OperatorKind.DIVIDE: 2,
}

assert set(PRECEDENCE) == set(OperatorKind), "每个操作符必须且只能有一个优先级"


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: str
    value: Optional[int] = None
    operator: Optional[OperatorKind] = None

    @classmethod
    def operand(cls, value):
        return cls(TokenType.OPERAND, str(value), value=value)

    @property
    def precedence(self):
        """操作符优先级，非操作符返回None"""
        if self.operator is None:
            return None
        return PRECEDENCE[self.operator]

    def __repr__(self):
        return f"Token({self.name})"


# 单字符Token定义
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, '+', operator=OperatorKind.ADD),
    '-': Token(TokenType.OPERATOR, '-', operator=OperatorKind.SUBTRACT),
    '*': Token(TokenType.OPERATOR, '*', operator=OperatorKind.MULTIPLY),
    '/': Token(TokenType.OPERATOR, '/', operator=OperatorKind.DIVIDE),
    '(': Token(TokenType.LEFT_PAREN, '('),
    ')': Token(TokenType.RIGHT_PAREN, ')'),
}

OPERATOR_TOKENS = {tk.operator: tk for tk in TOKEN_DEFINITIONS.values() if tk.operator is not None}
LEFT_PAREN = TOKEN_DEFINITIONS['(']
RIGHT_PAREN = TOKEN_DEFINITIONS[')']


def _is_digit(char):
    # 只接受ASCII数字；str.isdigit()会放过'²'、'五'之类的字符
    return '0' <= char <= '9'


class Tokenizer:
    """把表达式文本切分为Token序列，不做任何语义检查"""

    @staticmethod
    def tokenize(text: str) -> List[Token]:
        tokens = []
        digits = []
        start = 0

        def flush():
            if not digits:
                return
            literal = ''.join(digits)
            value = int(literal)
            if value > INT64_MAX:
                raise InvalidExpressionError(
                    f"operand {literal} at position {start} is out of range"
                )
            tokens.append(Token.operand(value))
            digits.clear()

        # 位置从1开始计数（列号）
        for position, char in enumerate(text, start=1):
            if _is_digit(char):
                if not digits:
                    start = position
                digits.append(char)
                continue

            flush()

            if char == ' ':
                continue
            if char in TOKEN_DEFINITIONS:
                tokens.append(TOKEN_DEFINITIONS[char])
                continue

            logger.debug(f"Invalid character {char!r} at position {position}")
            raise InvalidCharacterError(char, position)

        flush()
        logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
        return tokens


class ExpressionValidator:
    """
    检查中缀Token序列的结构（操作数/操作符相邻规则）。
    括号配对不在这里检查，由InfixConverter负责。
    """

    @staticmethod
    def validate(tokens: List[Token]) -> None:
        if not tokens:
            raise ZeroLengthExpressionError()

        previous = None
        for i, tk in enumerate(tokens):
            following = tokens[i + 1] if i + 1 < len(tokens) else None

            if tk.type == TokenType.OPERAND:
                if previous is not None and previous.type == TokenType.OPERAND:
                    raise InvalidExpressionError(
                        f"consecutive operands {previous.name} and {tk.name}"
                    )

            elif tk.type == TokenType.OPERATOR:
                if previous is None:
                    raise InvalidExpressionError(f"operator {tk.name} has no leading operand")
                if following is None:
                    raise InvalidExpressionError(f"operator {tk.name} has no trailing operand")
                if following.type not in (TokenType.OPERAND, TokenType.LEFT_PAREN):
                    raise InvalidExpressionError(
                        f"operator {tk.name} is followed by invalid token {following.name}"
                    )

            previous = tk


def tokenize(text: str) -> List[Token]:
    return Tokenizer.tokenize(text)


def validate(tokens: List[Token]) -> None:
    ExpressionValidator.validate(tokens)
