"""RPN表达式求值器 - 调用统一的Operators"""
import logging

from core.errors import InvalidExpressionError
from core.operators import apply_operator
from core.token_system import is_operator, parse_number

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(postfix):
        """
        Args:
            postfix: 后缀表达式token序列
        Returns:
            float 计算结果
        Raises:
            InvalidExpressionError: 操作数不足或栈中残留多个元素
            DivisionByZeroError: 除数为0
        """
        stack = []

        for token in postfix:
            value = parse_number(token)
            if value is not None:
                stack.append(value)
            elif is_operator(token):
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token}")
                    raise InvalidExpressionError()
                b = stack.pop()
                a = stack.pop()
                stack.append(apply_operator(a, b, token))
            else:
                logger.debug(f"Unexpected token in postfix sequence: {token!r}")
                raise InvalidExpressionError()

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpressionError()

        return stack[0]
