"""utils/formatting.py"""
import math

import numpy as np


def format_result(value, precision=4):
    """整数结果按整数显示，其余保留precision位小数；NaN/inf按原样显示"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{precision}f}"


def format_operand(value):
    """不带指数的十进制文本，可以直接拼回表达式里"""
    if float(value).is_integer() and math.isfinite(value):
        return str(int(value))
    return np.format_float_positional(value, trim='-')
