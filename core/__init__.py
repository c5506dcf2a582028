"""核心模块 - 分词、Shunting-yard转换、RPN评估器和操作符"""
from .token_system import (
    TokenType, OPERATOR_PRECEDENCE, get_precedence, parse_number,
    classify_token, tokenize
)
from .shunting_yard import infix_to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators, BINARY_OPERATORS, SCIENTIFIC_FUNCTIONS
from .errors import (
    CalculatorError, MismatchedParenthesesError, InvalidExpressionError,
    DivisionByZeroError, ImaginaryResultError, UnsupportedFunctionError
)
from .engine import (
    CalculatorEngine, calculate, calculate_scientific_function, calculate_percent
)

__all__ = [
    'TokenType', 'OPERATOR_PRECEDENCE', 'get_precedence', 'parse_number',
    'classify_token', 'tokenize', 'infix_to_postfix', 'RPNEvaluator',
    'Operators', 'BINARY_OPERATORS', 'SCIENTIFIC_FUNCTIONS',
    'CalculatorError', 'MismatchedParenthesesError', 'InvalidExpressionError',
    'DivisionByZeroError', 'ImaginaryResultError', 'UnsupportedFunctionError',
    'CalculatorEngine', 'calculate', 'calculate_scientific_function',
    'calculate_percent'
]
