"""
计算引擎

calculate: tokenize -> infix_to_postfix -> RPNEvaluator
引擎本身无状态，可以在任意位置并发调用。
"""
import logging

from core.operators import apply_function
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import infix_to_postfix
from core.token_system import parse_number, tokenize
from utils.formatter import number_to_string

logger = logging.getLogger(__name__)


class CalculatorEngine:

    def __init__(self):
        self.rpn_evaluator = RPNEvaluator

    def calculate(self, expression: str) -> float:
        """
        计算给定的中缀表达式

        Args:
            expression: 例如 "2 + 3 * 4"
        Returns:
            计算结果
        """
        # 1. 分词
        tokens = tokenize(expression)
        logger.debug(f"Tokens: {tokens}")

        # 2. 中缀 -> 后缀
        postfix = infix_to_postfix(tokens)

        # 3. 后缀求值
        return self.rpn_evaluator.evaluate(postfix)

    def calculate_scientific_function(self, name: str, value: float,
                                      use_degrees: bool = True) -> float:
        """对当前输入的数字应用科学函数"""
        return apply_function(name, value, use_degrees)

    def calculate_percent(self, value: str, base: str = None) -> str:
        """
        百分比计算

        - 没有base: value / 100，例如 "20" -> "0.2"
        - 有base且可解析: base * (value / 100)，例如 "20", "100" -> "20"
        - base无法解析时退回到无base的情况
        - value无法解析时返回 "0"
        """
        percent = parse_number(value)
        if percent is None:
            logger.debug(f"Unparseable percent value: {value!r}")
            return '0'

        ratio = percent / 100
        if base is not None:
            base_value = parse_number(base)
            if base_value is not None:
                return number_to_string(base_value * ratio)
            logger.debug(f"Unparseable percent base: {base!r}, falling back to ratio")

        return number_to_string(ratio)


_default_engine = CalculatorEngine()


def calculate(expression: str) -> float:
    return _default_engine.calculate(expression)


def calculate_scientific_function(name: str, value: float, use_degrees: bool = True) -> float:
    return _default_engine.calculate_scientific_function(name, value, use_degrees)


def calculate_percent(value: str, base: str = None) -> str:
    return _default_engine.calculate_percent(value, base)
