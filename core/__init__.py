"""核心模块 - Token系统、中缀转后缀、RPN评估器和操作符"""
from .errors import (
    CalculatorError, InvalidCharacterError, ZeroLengthExpressionError,
    InvalidExpressionError, MismatchedParenthesesError, DivideByZeroError,
    ContractViolation
)
from .token_system import (
    TokenType, OperatorKind, Token, PRECEDENCE, TOKEN_DEFINITIONS,
    OPERATOR_TOKENS, LEFT_PAREN, RIGHT_PAREN,
    Tokenizer, ExpressionValidator, tokenize, validate
)
from .converter import InfixConverter, to_postfix
from .operators import Operators
from .rpn_evaluator import RPNEvaluator, evaluate_postfix
from .calculator import evaluate

__all__ = [
    'CalculatorError', 'InvalidCharacterError', 'ZeroLengthExpressionError',
    'InvalidExpressionError', 'MismatchedParenthesesError', 'DivideByZeroError',
    'ContractViolation',
    'TokenType', 'OperatorKind', 'Token', 'PRECEDENCE', 'TOKEN_DEFINITIONS',
    'OPERATOR_TOKENS', 'LEFT_PAREN', 'RIGHT_PAREN',
    'Tokenizer', 'ExpressionValidator', 'tokenize', 'validate',
    'InfixConverter', 'to_postfix',
    'Operators',
    'RPNEvaluator', 'evaluate_postfix',
    'evaluate'
]
