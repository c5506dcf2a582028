"""utils/formatter.py - 数字和结果格式化"""
import math
import re

import numpy as np

from config.config import FORMAT_CONFIG

_THOUSANDS = re.compile(r'\B(?=(\d{3})+(?!\d))')


def _to_float(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _js_exponent(mantissa, exponent):
    """把 '1.5e-07' 形式的指数改为 '1.5e-7'"""
    exponent = int(exponent)
    sign = '+' if exponent >= 0 else '-'
    return f"{mantissa}e{sign}{abs(exponent)}"


def number_to_string(x):
    """
    按JavaScript Number#toString 的方式输出浮点数：
    整数不带 '.0'，1e-6 ~ 1e21 之间使用定点表示，其余使用指数表示
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x == 0:
        return '0'
    if 1e-6 <= abs(x) < 1e21:
        return np.format_float_positional(x, trim='-')
    mantissa, exponent = repr(float(x)).split('e')
    return _js_exponent(mantissa, exponent)


def to_exponential(x, digits=None):
    """等同于JavaScript的 Number#toExponential(digits)"""
    if digits is None:
        digits = FORMAT_CONFIG["exponent_digits"]
    mantissa, exponent = f"{x:.{digits}e}".split('e')
    return _js_exponent(mantissa, exponent)


def format_number(value):
    """
    添加千位分隔符

    Args:
        value: 数字字符串，例如 "1234567.89"
    Returns:
        "1,234,567.89"；非数字原样返回
    """
    if not value:
        return value

    num = _to_float(value)
    if num is None or math.isnan(num):
        return value

    parts = value.split('.')
    integer_part = parts[0]
    decimal_part = parts[1] if len(parts) > 1 else None

    # 负数处理
    is_negative = integer_part.startswith('-')
    absolute_integer = integer_part[1:] if is_negative else integer_part

    formatted_integer = _THOUSANDS.sub(',', absolute_integer)
    result = '-' + formatted_integer if is_negative else formatted_integer

    return f"{result}.{decimal_part}" if decimal_part is not None else result


def format_decimal(value, max_decimals=None):
    """限制小数位数并四舍五入，整数原样返回"""
    if max_decimals is None:
        max_decimals = FORMAT_CONFIG["max_decimals"]

    num = _to_float(value)
    if num is None or math.isnan(num):
        return value
    if num.is_integer():
        return value

    return re.sub(r'\.?0+$', '', f"{num:.{max_decimals}f}")


def remove_trailing_zeros(value):
    """去掉小数部分多余的0，例如 "1.500" -> "1.5"，"2.0" -> "2" """
    if '.' not in value:
        return value
    value = re.sub(r'(\.\d*?)0+$', r'\1', value)
    return re.sub(r'\.$', '', value)


def format_result(value):
    """
    格式化计算结果
    - 添加千位分隔符
    - 去掉多余的0
    - 限制小数位数
    - 极小/极大的数使用科学计数法
    """
    if value in ('Infinity', '-Infinity'):
        return value
    if value == 'NaN':
        return 'Error'

    num = _to_float(value)
    if num is None or math.isnan(num):
        return value
    if math.isinf(num):
        return number_to_string(num)

    if num != 0 and abs(num) < FORMAT_CONFIG["small_threshold"]:
        return to_exponential(num)
    if abs(num) > FORMAT_CONFIG["large_threshold"]:
        return to_exponential(num)

    formatted = format_decimal(number_to_string(num))
    formatted = remove_trailing_zeros(formatted)
    return format_number(formatted)
