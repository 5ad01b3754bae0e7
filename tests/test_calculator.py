import math
import unittest

from core.calculator import CalculationResult, calculate, evaluate_expression, factorial
from core.errors import (
    EMPTY_OR_INVALID, CONSECUTIVE_OPERATORS, MISMATCHED_PARENTHESES, UNABLE_TO_COMPUTE
)


class TestEvaluateExpression(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(evaluate_expression("2+2*2", False), 6)
        self.assertEqual(evaluate_expression("(2+2)*2", False), 8)
        self.assertEqual(evaluate_expression("10-4/2*3", False), 4)

    def test_division_by_zero(self):
        self.assertEqual(evaluate_expression("5/0", False), "Division by zero")

    def test_empty_input(self):
        self.assertEqual(evaluate_expression("", False), EMPTY_OR_INVALID)

    def test_degree_and_radian_mode(self):
        self.assertAlmostEqual(evaluate_expression("sin(90)", True), 1.0, places=9)
        self.assertAlmostEqual(evaluate_expression("sin(90)", False), 0.8939966636, places=9)

    def test_unary_minus(self):
        self.assertEqual(evaluate_expression("-5+3", False), -2)
        self.assertEqual(evaluate_expression("2+-3", False), -1)
        self.assertEqual(evaluate_expression("(-2)*(-3)", False), 6)

    def test_mismatched_parentheses(self):
        self.assertEqual(evaluate_expression("(2+3", False), MISMATCHED_PARENTHESES)
        self.assertEqual(evaluate_expression("2+3)", False), MISMATCHED_PARENTHESES)

    def test_other_errors_are_strings(self):
        self.assertEqual(evaluate_expression("2++3", False), CONSECUTIVE_OPERATORS)
        self.assertEqual(evaluate_expression("1+2 3", False), UNABLE_TO_COMPUTE)
        self.assertEqual(evaluate_expression("--5", False), UNABLE_TO_COMPUTE)
        self.assertEqual(evaluate_expression("2#3", False), EMPTY_OR_INVALID)

    def test_power_is_left_associative(self):
        self.assertEqual(evaluate_expression("2^3^2", False), 64)
        self.assertEqual(calculate("2^3^2", False, right_associative_power=True).value, 512)

    def test_right_associative_power_with_function_base(self):
        self.assertAlmostEqual(calculate("10^3^2", False, right_associative_power=True).value, 1e9)
        self.assertAlmostEqual(calculate("e^3^2", False, right_associative_power=True).value, math.exp(9))
        self.assertAlmostEqual(calculate("10^3^2", False).value, 1e6)

    def test_minus_before_ten_power_function(self):
        # "10^" 按最长匹配是函数，前导负号作用于整个 10^2
        self.assertEqual(evaluate_expression("-10^2", False), -100)
        self.assertEqual(evaluate_expression("-11^2", False), 121)

    def test_nan_is_returned_as_number(self):
        result = evaluate_expression("√(-4)", False)
        self.assertIsInstance(result, float)
        self.assertTrue(math.isnan(result))

    def test_idempotent(self):
        for expression in ("sin(30)+2^3", "5/0", "(1+2"):
            for mode in (True, False):
                self.assertEqual(evaluate_expression(expression, mode),
                                 evaluate_expression(expression, mode))


class TestCalculationResult(unittest.TestCase):
    def test_success(self):
        result = calculate("1+1")
        self.assertTrue(result.ok)
        self.assertEqual(result.value, 2.0)
        self.assertIsNone(result.error)
        self.assertEqual(result.unwrap(), 2.0)

    def test_failure(self):
        result = calculate("5/0")
        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        self.assertEqual(result.unwrap(), "Division by zero")

    def test_default_mode_is_degrees(self):
        self.assertAlmostEqual(calculate("cos(180)").value, -1.0)

    def test_equality(self):
        self.assertEqual(calculate("2*3"), CalculationResult.success(6.0))
        self.assertEqual(calculate("log(-1)"), calculate("log(-1)"))
        self.assertNotEqual(calculate("2*3"), CalculationResult.failure("6"))


class TestFactorial(unittest.TestCase):
    def test_small_values(self):
        self.assertEqual(factorial(0), 1)
        self.assertEqual(factorial(1), 1)
        self.assertEqual(factorial(5), 120)

    def test_negative_is_nan(self):
        self.assertTrue(math.isnan(factorial(-1)))

    def test_fractional_input_is_not_truncated_up_front(self):
        # 循环到 i <= 3.5，即 2*3
        self.assertEqual(factorial(3.5), 6)
        self.assertEqual(factorial(0.5), 1)

    def test_overflow(self):
        self.assertEqual(factorial(200), math.inf)


if __name__ == "__main__":
    unittest.main()
