"""core/errors.py"""


class CalculatorError(Exception):
    """所有计算错误的基类"""


class MismatchedParenthesesError(CalculatorError):
    """括号不匹配"""

    def __init__(self, message="Mismatched parentheses"):
        super().__init__(message)


class InvalidExpressionError(CalculatorError):
    """操作数不足、栈中残留元素等结构性错误"""

    def __init__(self, message="Invalid expression"):
        super().__init__(message)


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """除数为0（二元除法或倒数函数）"""

    def __init__(self, message="Division by zero"):
        super().__init__(message)


class ImaginaryResultError(CalculatorError, ValueError):
    """负数的平方根"""

    def __init__(self, message="Square root of a negative number is imaginary"):
        super().__init__(message)


class UnsupportedFunctionError(CalculatorError, ValueError):
    """未知的科学函数名"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unsupported function: {name}")
