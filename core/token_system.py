"""core/token_system.py"""
import logging
import math
from enum import Enum

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # + - * /
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


LEFT_PAREN = '('
RIGHT_PAREN = ')'

# 操作符优先级表（未知操作符为0，仅作为转换时的哨兵）
OPERATOR_PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
}

OPERATORS = tuple(OPERATOR_PRECEDENCE)
NUMBER_CHARS = frozenset('0123456789.')


def get_precedence(operator):
    """返回操作符优先级，未知操作符（包括括号）返回0"""
    return OPERATOR_PRECEDENCE.get(operator, 0)


def is_operator(token):
    return token in OPERATOR_PRECEDENCE


def parse_number(text):
    """
    把字符串解析为有限浮点数

    Returns:
        float，无法解析或结果非有限值时返回None
    """
    if text is None:
        return None
    # float() 接受 "1_0" 这种Python数字写法，这里不接受
    if isinstance(text, str) and '_' in text:
        return None
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def is_number(token):
    return parse_number(token) is not None


def classify_token(token):
    """
    对token分类

    Returns:
        TokenType，无法识别时返回None（例如 "1.2.3" 这样的畸形数字）
    """
    if token == LEFT_PAREN:
        return TokenType.LEFT_PAREN
    if token == RIGHT_PAREN:
        return TokenType.RIGHT_PAREN
    if is_operator(token):
        return TokenType.OPERATOR
    if is_number(token):
        return TokenType.NUMBER
    return None


def tokenize(expression):
    """
    把表达式字符串切分成token序列

    - 先去掉所有空白
    - 连续的数字和小数点合并为一个数字token（不检查格式）
    - 遇到操作符或括号时先输出缓冲区中的数字
    - 其他字符直接丢弃
    """
    cleaned = ''.join(expression.split())
    tokens = []
    current_number = ''

    for char in cleaned:
        if char in NUMBER_CHARS:
            current_number += char
        elif is_operator(char) or char in (LEFT_PAREN, RIGHT_PAREN):
            if current_number:
                tokens.append(current_number)
                current_number = ''
            tokens.append(char)
        else:
            logger.debug(f"Dropping unrecognized character: {char!r}")

    if current_number:
        tokens.append(current_number)

    return tokens
