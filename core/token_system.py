"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from core.errors import (
    ParseError, START_OR_END_OPERATOR, CONSECUTIVE_OPERATORS, MISMATCHED_PARENTHESES
)


class TokenType(Enum):
    NUMBER = "number"      # 数字字面量
    OPERATOR = "operator"  # 二元操作符 + - * / % ^
    PAREN = "paren"        # ( )
    FUNCTION = "function"  # 一元函数 / 后缀操作符
    CONSTANT = "constant"  # π, e


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: str
    value: Optional[float] = None
    arity: int = 0
    precedence: int = 0
    op: Optional[str] = None  # Operators 中对应的方法名
    postfix: bool = False     # ! 和 x² 作用于前面的操作数

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def is_open_paren(self):
        return self.type == TokenType.PAREN and self.name == '('

    @property
    def is_close_paren(self):
        return self.type == TokenType.PAREN and self.name == ')'

    @property
    def is_prefix_function(self):
        return self.type == TokenType.FUNCTION and not self.postfix

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token({self.type.value}, {self.value!r})"
        return f"Token({self.type.value}, {self.name!r})"


# 函数绑定强度高于所有二元操作符
FUNCTION_PRECEDENCE = 4

OPERATOR_PRECEDENCE = MappingProxyType({
    '+': 1, '-': 1,
    '*': 2, '/': 2, '%': 2,
    '^': 3,
})


def _operator(symbol, op):
    return Token(TokenType.OPERATOR, symbol, arity=2,
                 precedence=OPERATOR_PRECEDENCE[symbol], op=op)


def _function(name, op, postfix=False):
    return Token(TokenType.FUNCTION, name, arity=1,
                 precedence=FUNCTION_PRECEDENCE, op=op, postfix=postfix)


# Token定义字典（固定词素 -> 共享的不可变Token）
TOKEN_DEFINITIONS = MappingProxyType({
    # 二元操作符
    '+': _operator('+', 'add'),
    '-': _operator('-', 'sub'),
    '*': _operator('*', 'mul'),
    '/': _operator('/', 'div'),
    '%': _operator('%', 'mod'),
    '^': _operator('^', 'pow'),

    # 括号
    '(': Token(TokenType.PAREN, '('),
    ')': Token(TokenType.PAREN, ')'),

    # 三角函数及其反函数
    'sin': _function('sin', 'sin'),
    'cos': _function('cos', 'cos'),
    'tan': _function('tan', 'tan'),
    'sin⁻¹': _function('sin⁻¹', 'asin'),
    'cos⁻¹': _function('cos⁻¹', 'acos'),
    'tan⁻¹': _function('tan⁻¹', 'atan'),

    # 对数 / 指数
    'log': _function('log', 'log10'),
    '10^': _function('10^', 'pow10'),
    'ln': _function('ln', 'ln'),
    'e^': _function('e^', 'exp'),

    # 其他一元函数
    'x²': _function('x²', 'square', postfix=True),
    '√': _function('√', 'sqrt'),
    '!': _function('!', 'factorial', postfix=True),
    'abs': _function('abs', 'abs'),

    # 常数
    'π': Token(TokenType.CONSTANT, 'π'),
    'e': Token(TokenType.CONSTANT, 'e'),
})

# 一元负号：不出现在文本中，由 rewrite_unary_minus 生成
NEGATION = _function('neg', 'neg')

# 以函数形式出现的幂运算底数（10^x, e^x），右结合时与 ^ 同等对待
POWER_FUNCTIONS = frozenset({'10^', 'e^'})

# 按长度降序，保证最长匹配优先
LEXEMES = tuple(sorted(TOKEN_DEFINITIONS, key=len, reverse=True))


def number_token(text):
    """把数字文本（可带负号）转成 NUMBER Token"""
    return Token(TokenType.NUMBER, text, value=float(text))


class ExpressionValidator:

    @staticmethod
    def check_boundaries(tokens):
        """首个Token不能是除 - 以外的操作符，末尾不能是操作符"""
        first, last = tokens[0], tokens[-1]
        if (first.is_operator and first.name != '-') or last.is_operator:
            raise ParseError(START_OR_END_OPERATOR)

    @staticmethod
    def check_consecutive_operators(tokens):
        for left, right in zip(tokens, tokens[1:]):
            if left.is_operator and right.is_operator:
                raise ParseError(CONSECUTIVE_OPERATORS)

    @staticmethod
    def check_parentheses(tokens):
        balance = 0
        for token in tokens:
            if token.is_open_paren:
                balance += 1
            elif token.is_close_paren:
                balance -= 1
            if balance < 0:
                raise ParseError(MISMATCHED_PARENTHESES)
        if balance != 0:
            raise ParseError(MISMATCHED_PARENTHESES)

    @staticmethod
    def validate(tokens):
        """
        在一元负号改写之后做结构检查，第一个失败的检查决定错误信息
        Args:
            tokens: 改写后的Token序列（非空）
        Raises:
            ParseError
        """
        ExpressionValidator.check_boundaries(tokens)
        ExpressionValidator.check_consecutive_operators(tokens)
        ExpressionValidator.check_parentheses(tokens)
