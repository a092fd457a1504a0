"""core/calculator.py - 组合完整的求值流水线"""
import logging

from core.converter import InfixConverter
from core.rpn_evaluator import RPNEvaluator
from core.token_system import ExpressionValidator, Tokenizer

logger = logging.getLogger(__name__)


def evaluate(text: str) -> int:
    """
    求值中缀整数表达式：分词 -> 结构检查 -> 转后缀 -> 后缀求值。
    任一阶段失败立即抛出对应的CalculatorError，不返回部分结果。
    """
    logger.debug(f"Evaluating expression: {text!r}")
    tokens = Tokenizer.tokenize(text)
    ExpressionValidator.validate(tokens)
    postfix = InfixConverter.to_postfix(tokens)
    result = RPNEvaluator.evaluate(postfix)
    logger.debug(f"Result: {result}")
    return result
