"""core/operators.py"""
import logging
import math

import numpy as np

from core.errors import EvaluationError, DIVISION_BY_ZERO

logger = logging.getLogger(__name__)

DEG_TO_RAD = np.pi / 180
RAD_TO_DEG = 180 / np.pi


def factorial(n):
    """
    迭代阶乘：负数返回NaN，0和1返回1，否则 2*3*...（i <= n）
    非整数n不截断，循环边界直接用浮点比较
    """
    if n < 0:
        return math.nan
    if n == 0 or n == 1:
        return 1.0
    result = 1.0
    i = 2
    while i <= n:
        result *= i
        if math.isinf(result):
            break  # 已溢出，继续乘也还是inf
        i += 1
    return result


class Operators:
    """所有操作符的静态方法集合，结果一律为Python float"""

    @staticmethod
    def _apply(ufunc, *operands):
        # NaN/inf 原样返回，不当作错误
        with np.errstate(all='ignore'):
            return float(ufunc(*operands))

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        return Operators._apply(np.add, operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        return Operators._apply(np.subtract, operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        return Operators._apply(np.multiply, operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法，除数为0时报错"""
        if operand2 == 0:
            raise EvaluationError(DIVISION_BY_ZERO)
        return Operators._apply(np.divide, operand1, operand2)

    @staticmethod
    def mod(operand1, operand2):
        """浮点取余，符号跟随被除数；除数为0得到NaN"""
        return Operators._apply(np.fmod, operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        return Operators._apply(np.power, float(operand1), float(operand2))

    # 一元操作符====================
    @staticmethod
    def sin(operand, is_degree_mode=False):
        if is_degree_mode:
            operand = operand * DEG_TO_RAD
        return Operators._apply(np.sin, operand)

    @staticmethod
    def cos(operand, is_degree_mode=False):
        if is_degree_mode:
            operand = operand * DEG_TO_RAD
        return Operators._apply(np.cos, operand)

    @staticmethod
    def tan(operand, is_degree_mode=False):
        if is_degree_mode:
            operand = operand * DEG_TO_RAD
        return Operators._apply(np.tan, operand)

    @staticmethod
    def asin(operand, is_degree_mode=False):
        result = Operators._apply(np.arcsin, operand)
        return result * RAD_TO_DEG if is_degree_mode else result

    @staticmethod
    def acos(operand, is_degree_mode=False):
        result = Operators._apply(np.arccos, operand)
        return result * RAD_TO_DEG if is_degree_mode else result

    @staticmethod
    def atan(operand, is_degree_mode=False):
        result = Operators._apply(np.arctan, operand)
        return result * RAD_TO_DEG if is_degree_mode else result

    @staticmethod
    def log10(operand, is_degree_mode=False):
        """以10为底；负数得到NaN，0得到-inf"""
        return Operators._apply(np.log10, operand)

    @staticmethod
    def ln(operand, is_degree_mode=False):
        return Operators._apply(np.log, operand)

    @staticmethod
    def pow10(operand, is_degree_mode=False):
        return Operators._apply(np.power, 10.0, float(operand))

    @staticmethod
    def exp(operand, is_degree_mode=False):
        return Operators._apply(np.exp, operand)

    @staticmethod
    def square(operand, is_degree_mode=False):
        return Operators._apply(np.square, operand)

    @staticmethod
    def sqrt(operand, is_degree_mode=False):
        return Operators._apply(np.sqrt, operand)

    @staticmethod
    def abs(operand, is_degree_mode=False):
        return Operators._apply(np.abs, operand)

    @staticmethod
    def neg(operand, is_degree_mode=False):
        return Operators._apply(np.negative, operand)

    @staticmethod
    def factorial(operand, is_degree_mode=False):
        return float(factorial(operand))
