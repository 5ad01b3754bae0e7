"""Shunting-Yard 转换器 - 中缀Token序列转后缀(RPN)序列"""
import logging

from core.errors import ParseError, MISMATCHED_PARENTHESES
from core.token_system import TokenType, POWER_FUNCTIONS

logger = logging.getLogger(__name__)


class ShuntingYardConverter:

    @staticmethod
    def _should_pop(top, incoming, right_associative_power):
        """栈顶是操作符或函数，且优先级满足出栈条件"""
        if top.type not in (TokenType.OPERATOR, TokenType.FUNCTION):
            return False
        if right_associative_power and incoming.name == '^':
            # 10^3^2 -> 10^(3^2)
            if top.name == '^' or top.name in POWER_FUNCTIONS:
                return False
        return top.precedence >= incoming.precedence

    @staticmethod
    def to_postfix(tokens, right_associative_power=False):
        """
        标准的操作符优先级解析
        Args:
            tokens: 已校验的中缀Token序列
            right_associative_power: True时 ^ 右结合；默认左结合（2^3^2 = 64）
        Returns:
            后缀顺序的Token列表（常数不在此阶段求值）
        Raises:
            ParseError: 括号不匹配
        """
        output = []
        stack = []

        for token in tokens:
            if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
                output.append(token)

            elif token.type == TokenType.OPERATOR:
                while stack and ShuntingYardConverter._should_pop(stack[-1], token, right_associative_power):
                    output.append(stack.pop())
                stack.append(token)

            elif token.type == TokenType.FUNCTION:
                stack.append(token)

            elif token.is_open_paren:
                stack.append(token)

            elif token.is_close_paren:
                while stack and not stack[-1].is_open_paren:
                    output.append(stack.pop())
                if not stack:
                    raise ParseError(MISMATCHED_PARENTHESES)
                stack.pop()  # 丢弃左括号
                # 括号前面的前缀函数作用于整个括号
                if stack and stack[-1].is_prefix_function:
                    output.append(stack.pop())

        while stack:
            token = stack.pop()
            if token.type == TokenType.PAREN:
                raise ParseError(MISMATCHED_PARENTHESES)
            output.append(token)

        logger.debug(f"Postfix: {' '.join(t.name for t in output)}")
        return output
