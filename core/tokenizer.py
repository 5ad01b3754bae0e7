"""中缀表达式分词器 - 最长匹配 + 一元负号改写"""
import logging
import re

from core.errors import ParseError, EMPTY_OR_INVALID
from core.token_system import (
    TokenType, TOKEN_DEFINITIONS, LEXEMES, NEGATION, number_token
)

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r'\d+\.?\d*', re.ASCII)


def tokenize(expression):
    """
    从左到右扫描，在每个位置取最长的匹配（数字或固定词素）
    Args:
        expression: 原始表达式字符串
    Returns:
        Token列表
    Raises:
        ParseError: 输入为空或含有无法识别的字符
    """
    tokens = []
    pos = 0
    length = len(expression or '')

    while pos < length:
        char = expression[pos]
        if char.isspace():
            pos += 1
            continue

        best_text, best_token = None, None

        number_match = NUMBER_PATTERN.match(expression, pos)
        if number_match:
            best_text = number_match.group()
            best_token = number_token(best_text)

        # LEXEMES已按长度降序，第一个命中即当前位置最长的词素
        for lexeme in LEXEMES:
            if expression.startswith(lexeme, pos):
                if best_text is None or len(lexeme) > len(best_text):
                    best_text, best_token = lexeme, TOKEN_DEFINITIONS[lexeme]
                break

        if best_token is None:
            logger.debug(f"Unrecognized character {char!r} at position {pos}")
            raise ParseError(EMPTY_OR_INVALID)

        tokens.append(best_token)
        pos += len(best_text)

    if not tokens:
        raise ParseError(EMPTY_OR_INVALID)
    return tokens


def _is_unary_context(previous):
    if previous is None:
        return True
    return previous.is_open_paren or previous.is_operator or previous.is_prefix_function


def rewrite_unary_minus(tokens):
    """
    处理一元负号：
    - 后面是数字：合并成负数字面量
    - 后面是常数、左括号或前缀函数：改写为 neg 函数
    - 其他情况保持为操作符，交给校验/求值报错
    """
    result = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        previous = result[-1] if result else None
        following = tokens[i + 1] if i + 1 < len(tokens) else None

        if token.name == '-' and token.is_operator and _is_unary_context(previous) and following is not None:
            if following.type == TokenType.NUMBER:
                result.append(number_token('-' + following.name))
                i += 2
                continue
            if (following.type == TokenType.CONSTANT or following.is_open_paren
                    or following.is_prefix_function):
                result.append(NEGATION)
                i += 1
                continue

        result.append(token)
        i += 1
    return result
