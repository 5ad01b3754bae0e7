"""表达式计算入口 - 分词 -> 改写 -> 校验 -> 转后缀 -> 求值"""
import logging
from typing import Optional, Union

from config.config import CALCULATOR_CONFIG
from core.errors import CalculatorError
from core.operators import factorial
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import ShuntingYardConverter
from core.token_system import ExpressionValidator
from core.tokenizer import tokenize, rewrite_unary_minus

logger = logging.getLogger(__name__)


class CalculationResult:
    """两种结果之一：成功(value) 或 失败(error)"""

    __slots__ = ('value', 'error')

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, message):
        return cls(error=message)

    @property
    def ok(self):
        return self.error is None

    def unwrap(self) -> Union[float, str]:
        """成功返回数值，失败返回错误信息"""
        return self.value if self.ok else self.error

    def __eq__(self, other):
        if not isinstance(other, CalculationResult):
            return NotImplemented
        if self.ok and other.ok and self.value != self.value and other.value != other.value:
            return True  # 两边都是NaN
        return self.value == other.value and self.error == other.error

    def __repr__(self):
        if self.ok:
            return f"CalculationResult.success({self.value!r})"
        return f"CalculationResult.failure({self.error!r})"


def calculate(expression, is_degree_mode=True,
              right_associative_power: Optional[bool] = None) -> CalculationResult:
    """
    计算一个中缀表达式，任何错误都折叠成失败结果，不向外抛异常
    Args:
        expression: 表达式字符串
        is_degree_mode: 三角函数按角度(True)还是弧度(False)
        right_associative_power: None时取配置中的默认值
    Returns:
        CalculationResult
    """
    if right_associative_power is None:
        right_associative_power = CALCULATOR_CONFIG['right_associative_power']

    try:
        tokens = rewrite_unary_minus(tokenize(expression))
        ExpressionValidator.validate(tokens)
        postfix = ShuntingYardConverter.to_postfix(tokens, right_associative_power)
        value = RPNEvaluator.evaluate(postfix, is_degree_mode)
    except CalculatorError as e:
        logger.debug(f"Failed to evaluate {expression!r}: {e.message}")
        return CalculationResult.failure(e.message)
    except Exception as e:
        logger.exception(f"Unexpected error evaluating {expression!r}")
        return CalculationResult.failure(str(e))

    return CalculationResult.success(value)


def evaluate_expression(expression, is_degree_mode) -> Union[float, str]:
    """成功返回数值，失败返回错误信息字符串"""
    return calculate(expression, is_degree_mode).unwrap()


__all__ = ['CalculationResult', 'calculate', 'evaluate_expression', 'factorial']
