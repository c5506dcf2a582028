"""工具模块"""
from .formatter import (
    format_number, format_decimal, remove_trailing_zeros, format_result,
    number_to_string, to_exponential
)
from .validators import (
    is_valid_input, is_valid_expression, can_add_operator, can_add_decimal,
    can_add_parenthesis, has_balanced_parentheses
)
from .history import history_to_frame, export_history

__all__ = [
    'format_number', 'format_decimal', 'remove_trailing_zeros', 'format_result',
    'number_to_string', 'to_exponential',
    'is_valid_input', 'is_valid_expression', 'can_add_operator', 'can_add_decimal',
    'can_add_parenthesis', 'has_balanced_parentheses',
    'history_to_frame', 'export_history'
]
