"""
辅助函数
"""

import math

import numpy as np


def js_round(value: float) -> int:
    """四舍五入 (0.5 向上取整, 与浏览器 Math.round 一致)"""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """数值转文本: 整数不带小数点, 其余去掉多余的 0"""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return np.format_float_positional(value, trim='-')
