"""session/calculator_session.py - 无界面的计算器会话（等号键状态机）"""
import logging
import math
import re

from config.config import CALCULATOR_CONFIG, HISTORY_CONFIG
from core.calculator import calculate
from history.store import HistoryStore
from utils.formatting import format_result, format_operand

logger = logging.getLogger(__name__)

# 以这些操作符开头的输入接在上一次结果后面；'-' 视为负数，不接
CHAIN_PATTERN = re.compile(r'^[+*/%]')


class CalculatorSession:
    """
    保存两次计算之间的状态：角度/弧度模式、上一次结果和表达式、历史记录。
    core 中的计算本身是纯函数，状态都在这里显式传递。
    """

    def __init__(self, is_degree_mode=None, history=None, precision=None,
                 right_associative_power=None):
        if is_degree_mode is None:
            is_degree_mode = CALCULATOR_CONFIG['degree_mode']
        self.is_degree_mode = is_degree_mode
        self.right_associative_power = right_associative_power
        self.precision = CALCULATOR_CONFIG['display_precision'] if precision is None else precision
        self.history = history if history is not None else HistoryStore(HISTORY_CONFIG['max_entries'])
        self.last_result = None
        self.last_expression = None

    def press_equal(self, expression=None):
        """
        Args:
            expression: 新输入的表达式；None 表示再次按等号，重复上一次的表达式
        Returns:
            CalculationResult
        """
        repeated = expression is None and self.last_expression is not None
        if repeated:
            expression = self.last_expression
        else:
            expression = expression or ''
            self.last_expression = expression

        # NaN/inf 不能拼回表达式，此时按没有上一次结果处理
        if self.last_result is not None and math.isfinite(self.last_result) \
                and CHAIN_PATTERN.match(expression):
            expression = format_operand(self.last_result) + expression

        result = calculate(expression, self.is_degree_mode, self.right_associative_power)
        if result.ok:
            self.last_result = result.value
            # 单纯重复同一表达式不重复记入历史
            if not repeated or expression != self.last_expression:
                self.history.add(expression, result.value)
        else:
            logger.info(f"Evaluation failed for {expression!r}: {result.error}")
        return result

    def display(self, result):
        """结果的显示文本；失败时返回错误信息"""
        if result.ok:
            return format_result(result.value, self.precision)
        return result.error

    def toggle_angle_mode(self):
        self.is_degree_mode = not self.is_degree_mode
        logger.debug(f"Angle mode: {self.angle_mode}")
        return self.is_degree_mode

    @property
    def angle_mode(self):
        return 'deg' if self.is_degree_mode else 'rad'

    def clear(self):
        """AC：清空上一次结果和表达式，历史保留"""
        self.last_result = None
        self.last_expression = None

    def clear_history(self):
        self.history.clear()
