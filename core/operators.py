"""core/operators.py"""
import logging

import numpy as np

from core.errors import DivideByZeroError

INT_DTYPE = np.int64  # 原生64位有符号整数，溢出时回绕

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合，方法名与OperatorKind的取值一致"""

    @staticmethod
    def _as_int(value):
        return INT_DTYPE(value)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore'):
            return int(Operators._as_int(operand1) + Operators._as_int(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore'):
            return int(Operators._as_int(operand1) - Operators._as_int(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore'):
            return int(Operators._as_int(operand1) * Operators._as_int(operand2))

    @staticmethod
    def div(operand1, operand2):
        """
        整数除法，向零截断（不是Python默认的向下取整）
        除数为0时抛出DivideByZeroError
        """
        if operand2 == 0:
            raise DivideByZeroError(operand1, operand2)

        a = Operators._as_int(operand1)
        b = Operators._as_int(operand2)
        with np.errstate(over='ignore', divide='ignore'):
            quotient = np.floor_divide(a, b)
            remainder = np.remainder(a, b)
            # floor结果在异号且不能整除时比截断结果小1
            if remainder != 0 and (a < 0) != (b < 0):
                quotient = quotient + INT_DTYPE(1)
        return int(quotient)
