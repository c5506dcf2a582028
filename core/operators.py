"""core/operators.py"""
import logging

import numpy as np
from scipy import special

from config.config import ENGINE_CONFIG
from core.errors import (
    DivisionByZeroError, ImaginaryResultError, InvalidExpressionError,
    UnsupportedFunctionError
)

SNAP_EPSILON = ENGINE_CONFIG["snap_epsilon"]
MAX_FACTORIAL = ENGINE_CONFIG["max_factorial"]

logger = logging.getLogger(__name__)


def _snap_to_zero(value):
    """消除 cos(90°) = 6.1e-17 这类浮点噪声"""
    return 0.0 if abs(value) < SNAP_EPSILON else value


class Operators:
    """所有操作符的静态方法集合"""

    # 二元操作符========================================

    @staticmethod
    def add(a, b):
        return a + b

    @staticmethod
    def sub(a, b):
        return a - b

    @staticmethod
    def mul(a, b):
        return a * b

    @staticmethod
    def div(a, b):
        """除法，除数为0时报错"""
        if b == 0:
            raise DivisionByZeroError()
        return a / b

    # 三角函数=====================================

    @staticmethod
    def sin(value, use_degrees=True):
        if use_degrees:
            value = np.deg2rad(value)
        return float(np.sin(value))

    @staticmethod
    def cos(value, use_degrees=True):
        if use_degrees:
            value = np.deg2rad(value)
        return _snap_to_zero(float(np.cos(value)))

    @staticmethod
    def tan(value, use_degrees=True):
        if use_degrees:
            value = np.deg2rad(value)
        return _snap_to_zero(float(np.tan(value)))

    @staticmethod
    def asin(value, use_degrees=True):
        """反三角函数：角度单位转换作用在输出上"""
        with np.errstate(invalid='ignore'):
            result = np.arcsin(value)
        return float(np.rad2deg(result) if use_degrees else result)

    @staticmethod
    def acos(value, use_degrees=True):
        with np.errstate(invalid='ignore'):
            result = np.arccos(value)
        return float(np.rad2deg(result) if use_degrees else result)

    @staticmethod
    def atan(value, use_degrees=True):
        result = np.arctan(value)
        return float(np.rad2deg(result) if use_degrees else result)

    # 对数/指数=====================================

    @staticmethod
    def log(value, use_degrees=True):
        """常用对数（底为10）"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.log10(value))

    @staticmethod
    def ln(value, use_degrees=True):
        """自然对数"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.log(value))

    @staticmethod
    def exp(value, use_degrees=True):
        with np.errstate(over='ignore'):
            return float(np.exp(value))

    # 其他=====================================

    @staticmethod
    def sqrt(value, use_degrees=True):
        if value < 0:
            raise ImaginaryResultError()
        return float(np.sqrt(value))

    @staticmethod
    def cbrt(value, use_degrees=True):
        return float(np.cbrt(value))

    @staticmethod
    def pow2(value, use_degrees=True):
        return float(np.square(value))

    @staticmethod
    def inv(value, use_degrees=True):
        """倒数"""
        if value == 0:
            raise DivisionByZeroError()
        return 1.0 / value

    @staticmethod
    def abs(value, use_degrees=True):
        return float(np.abs(value))

    @staticmethod
    def fact(value, use_degrees=True):
        """
        阶乘。负数返回NaN而不是报错；非整数按 Γ(x+1) 计算
        """
        if np.isnan(value) or value < 0:
            return float('nan')
        if float(value).is_integer():
            if value > MAX_FACTORIAL:
                return float('inf')
            return float(special.factorial(int(value), exact=True))
        return float(special.gamma(value + 1))


BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}

SCIENTIFIC_FUNCTIONS = {
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tan': Operators.tan,
    'asin': Operators.asin,
    'acos': Operators.acos,
    'atan': Operators.atan,
    'log': Operators.log,
    'ln': Operators.ln,
    'exp': Operators.exp,
    'sqrt': Operators.sqrt,
    'cbrt': Operators.cbrt,
    'pow2': Operators.pow2,
    'inv': Operators.inv,
    'abs': Operators.abs,
    'fact': Operators.fact,
}


def apply_operator(a, b, operator):
    """计算 a <operator> b"""
    op_method = BINARY_OPERATORS.get(operator)
    if op_method is None:
        logger.debug(f"Unknown binary operator: {operator}")
        raise InvalidExpressionError(f"Unknown operator: {operator}")
    return op_method(a, b)


def apply_function(name, value, use_degrees=True):
    """按函数名分发科学函数"""
    op_method = SCIENTIFIC_FUNCTIONS.get(name)
    if op_method is None:
        logger.debug(f"Unknown scientific function: {name}")
        raise UnsupportedFunctionError(name)
    return op_method(value, use_degrees)
