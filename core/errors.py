"""core/errors.py - 计算器错误类型"""


class CalculatorError(Exception):
    """所有可报告给调用方的用户输入错误的基类"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidCharacterError(CalculatorError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(
            f"encountered invalid character {char} in expression at position {position}"
        )


class ZeroLengthExpressionError(CalculatorError):
    def __init__(self):
        super().__init__("input expression appears to have zero length and cannot be evaluated")


class InvalidExpressionError(CalculatorError):
    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"input expression is invalid: {detail}")


class MismatchedParenthesesError(CalculatorError):
    def __init__(self):
        super().__init__("input expression contains mismatched parentheses")


class DivideByZeroError(CalculatorError):
    def __init__(self, a, b):
        self.a = a
        self.b = b
        super().__init__(f"attempted to divide by zero: {a} / {b}")


class ContractViolation(AssertionError):
    """
    上游阶段的程序错误（不是用户输入错误）。
    例如后缀表达式中操作数不足、残留括号、求值后栈内元素个数不为1。
    不继承CalculatorError，调用方不应将其当作普通错误吞掉。
    """
