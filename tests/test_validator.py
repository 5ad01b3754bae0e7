import unittest

from core.errors import (
    ParseError, START_OR_END_OPERATOR, CONSECUTIVE_OPERATORS, MISMATCHED_PARENTHESES
)
from core.token_system import ExpressionValidator, OPERATOR_PRECEDENCE
from core.tokenizer import tokenize, rewrite_unary_minus


def validate(expression):
    ExpressionValidator.validate(rewrite_unary_minus(tokenize(expression)))


class TestExpressionValidator(unittest.TestCase):
    def assertFails(self, expression, message):
        with self.assertRaises(ParseError) as ctx:
            validate(expression)
        self.assertEqual(ctx.exception.message, message)

    def test_valid_expressions(self):
        for expression in ("2+3", "-5+3", "(2+3)*4", "sin(30)", "2*-3", "-(1)"):
            validate(expression)

    def test_start_or_end_with_operator(self):
        self.assertFails("*5", START_OR_END_OPERATOR)
        self.assertFails("5+", START_OR_END_OPERATOR)
        self.assertFails("5*-", START_OR_END_OPERATOR)

    def test_consecutive_operators(self):
        self.assertFails("2+*3", CONSECUTIVE_OPERATORS)
        self.assertFails("2++3", CONSECUTIVE_OPERATORS)

    def test_mismatched_parentheses(self):
        self.assertFails("(2+3", MISMATCHED_PARENTHESES)
        self.assertFails("2+3)", MISMATCHED_PARENTHESES)
        self.assertFails(")2(", MISMATCHED_PARENTHESES)

    def test_first_failing_check_wins(self):
        # 同时违反边界检查和括号检查
        self.assertFails("*(5", START_OR_END_OPERATOR)

    def test_precedence_table_is_read_only(self):
        self.assertEqual(OPERATOR_PRECEDENCE['^'], 3)
        with self.assertRaises(TypeError):
            OPERATOR_PRECEDENCE['^'] = 0


if __name__ == "__main__":
    unittest.main()
