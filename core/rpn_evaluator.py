"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from core.errors import EvaluationError, UNABLE_TO_COMPUTE
from core.operators import Operators
from core.token_system import TokenType

logger = logging.getLogger(__name__)

CONSTANT_VALUES = {
    'π': float(np.pi),
    'e': float(np.e),
}


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def _pop(stack, token):
        if not stack:
            logger.debug(f"Insufficient operands for {token.name}")
            raise EvaluationError(UNABLE_TO_COMPUTE)
        return stack.pop()

    @staticmethod
    def evaluate(postfix_tokens, is_degree_mode=False):
        """
        Args:
            postfix_tokens: 后缀顺序的Token序列
            is_degree_mode: 三角函数是否按角度计算
        Returns:
            float结果（可能是NaN或inf）
        Raises:
            EvaluationError: 除零，或栈最终不是恰好一个值
        """
        stack = []

        for token in postfix_tokens:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.CONSTANT:
                stack.append(CONSTANT_VALUES[token.name])

            elif token.type == TokenType.OPERATOR:
                operand2 = RPNEvaluator._pop(stack, token)
                operand1 = RPNEvaluator._pop(stack, token)
                op_method = getattr(Operators, token.op)
                stack.append(op_method(operand1, operand2))

            elif token.type == TokenType.FUNCTION:
                operand = RPNEvaluator._pop(stack, token)
                op_method = getattr(Operators, token.op)
                stack.append(op_method(operand, is_degree_mode))

            else:
                # 括号不应该出现在后缀序列里
                logger.error(f"Unexpected token in postfix sequence: {token!r}")
                raise EvaluationError(UNABLE_TO_COMPUTE)

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvaluationError(UNABLE_TO_COMPUTE)
        return stack[0]
