"""utils/validators.py - 输入合法性检查"""
import re

from core.token_system import OPERATORS

VALID_CHARS = re.compile(r'^[0-9+\-*/().]$')


def is_valid_input(char):
    """单个输入字符是否合法"""
    return bool(VALID_CHARS.fullmatch(char)) if char else False


def is_valid_expression(expression):
    """表达式只包含合法字符，且不是单独的操作符"""
    if not expression or not expression.strip():
        return False

    for char in ''.join(expression.split()):
        if not is_valid_input(char):
            return False

    # 拒绝只有操作符的表达式
    if expression.strip() in OPERATORS:
        return False

    return True


def can_add_operator(expression, operator):
    """操作符、小数点、左括号之后不能再接操作符"""
    if not expression or not expression.strip():
        return False

    last_char = expression.strip()[-1]
    if last_char in OPERATORS or last_char in ('.', '('):
        return False

    return True


def can_add_decimal(expression):
    """当前正在输入的数字中已经有小数点时不能再加"""
    if not expression or not expression.strip():
        return True

    parts = re.split(r'[+\-*/()]', expression.strip())
    current_number = parts[-1].strip()
    return '.' not in current_number


def can_add_parenthesis(expression, parenthesis):
    """左括号总是可以加；右括号只有在左括号多于右括号时才能加"""
    if parenthesis == '(':
        return True

    return expression.count('(') > expression.count(')')


def has_balanced_parentheses(expression):
    count = 0
    for char in expression:
        if char == '(':
            count += 1
        elif char == ')':
            count -= 1
            if count < 0:  # 右括号先出现
                return False
    return count == 0
