"""core/errors.py - 计算器异常层次"""

EMPTY_OR_INVALID = "Invalid expression: Empty input or invalid characters."
START_OR_END_OPERATOR = "Invalid expression: Cannot start or end with an operator."
CONSECUTIVE_OPERATORS = "Invalid expression: Consecutive operators are not allowed."
MISMATCHED_PARENTHESES = "Invalid expression: Mismatched parentheses."
DIVISION_BY_ZERO = "Division by zero"
UNABLE_TO_COMPUTE = "Invalid expression: Unable to compute result."


class CalculatorError(Exception):
    """所有计算阶段错误的基类，str(e) 即对外暴露的错误信息"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ParseError(CalculatorError):
    """词法/结构错误（分词、校验、括号匹配）"""


class EvaluationError(CalculatorError):
    """求值阶段错误（除零、栈形状不对）"""
