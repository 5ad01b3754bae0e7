import math
import os
import tempfile
import unittest

import pandas as pd

from data.expression_loader import load_expressions, evaluate_expressions


class TestLoadExpressions(unittest.TestCase):
    def test_text_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "exprs.txt")
            with open(path, 'w', encoding='utf-8') as f:
                f.write("2+2\n\n√16\n   \n")
            expressions = load_expressions(path)
        self.assertEqual(expressions.tolist(), ["2+2", "√16"])

    def test_csv_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "exprs.csv")
            pd.DataFrame({"expression": ["1+1", "5/0"], "note": ["a", "b"]}).to_csv(path, index=False)
            expressions = load_expressions(path)
        self.assertEqual(expressions.tolist(), ["1+1", "5/0"])

    def test_csv_missing_column(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "exprs.csv")
            pd.DataFrame({"formula": ["1+1"]}).to_csv(path, index=False)
            with self.assertRaises(ValueError):
                load_expressions(path)


class TestEvaluateExpressions(unittest.TestCase):
    def test_results_frame(self):
        results = evaluate_expressions(pd.Series(["2*3", "5/0", "sin(90)"]), is_degree_mode=True)
        self.assertEqual(list(results.columns), ['expression', 'value', 'error'])
        self.assertEqual(results.loc[0, 'value'], 6.0)
        self.assertIsNone(results.loc[0, 'error'])
        self.assertTrue(math.isnan(results.loc[1, 'value']))
        self.assertEqual(results.loc[1, 'error'], "Division by zero")
        self.assertAlmostEqual(results.loc[2, 'value'], 1.0)

    def test_right_associative_power(self):
        results = evaluate_expressions(["2^3^2"], right_associative_power=True)
        self.assertEqual(results.loc[0, 'value'], 512.0)
        self.assertEqual(evaluate_expressions(["2^3^2"]).loc[0, 'value'], 64.0)

    def test_empty_input(self):
        results = evaluate_expressions([])
        self.assertTrue(results.empty)


if __name__ == "__main__":
    unittest.main()
