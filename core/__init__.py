"""核心模块 - Token系统、分词器、Shunting-Yard转换器、RPN求值器和操作符"""
from .errors import CalculatorError, ParseError, EvaluationError
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_PRECEDENCE, ExpressionValidator
)
from .tokenizer import tokenize, rewrite_unary_minus
from .shunting_yard import ShuntingYardConverter
from .rpn_evaluator import RPNEvaluator
from .operators import Operators, factorial
from .calculator import CalculationResult, calculate, evaluate_expression

__all__ = [
    'CalculatorError', 'ParseError', 'EvaluationError',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_PRECEDENCE', 'ExpressionValidator',
    'tokenize', 'rewrite_unary_minus', 'ShuntingYardConverter',
    'RPNEvaluator', 'Operators', 'factorial',
    'CalculationResult', 'calculate', 'evaluate_expression'
]
