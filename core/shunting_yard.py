"""中缀表达式转后缀表达式（Shunting-yard算法）"""
import logging

from core.errors import InvalidExpressionError, MismatchedParenthesesError
from core.token_system import (
    LEFT_PAREN, RIGHT_PAREN, TokenType, classify_token, get_precedence
)

logger = logging.getLogger(__name__)


def infix_to_postfix(tokens):
    """
    Args:
        tokens: tokenize() 输出的token序列
    Returns:
        后缀表达式token序列
    Raises:
        MismatchedParenthesesError: 括号不匹配
        InvalidExpressionError: 畸形数字token
    """
    output = []
    operator_stack = []

    for token in tokens:
        token_type = classify_token(token)

        if token_type == TokenType.NUMBER:
            output.append(token)

        elif token_type == TokenType.LEFT_PAREN:
            operator_stack.append(token)

        elif token_type == TokenType.RIGHT_PAREN:
            while operator_stack and operator_stack[-1] != LEFT_PAREN:
                output.append(operator_stack.pop())
            if not operator_stack:
                logger.debug("Unmatched ')' in token sequence")
                raise MismatchedParenthesesError()
            operator_stack.pop()  # 丢弃 '('

        elif token_type == TokenType.OPERATOR:
            # 相同优先级先出栈 => 左结合
            while operator_stack and get_precedence(operator_stack[-1]) >= get_precedence(token):
                output.append(operator_stack.pop())
            operator_stack.append(token)

        else:
            logger.debug(f"Malformed number token: {token!r}")
            raise InvalidExpressionError(f"Malformed number: {token}")

    while operator_stack:
        op = operator_stack.pop()
        if op in (LEFT_PAREN, RIGHT_PAREN):
            logger.debug("Unclosed '(' in token sequence")
            raise MismatchedParenthesesError()
        output.append(op)

    logger.debug(f"Postfix: {' '.join(output)}")
    return output
