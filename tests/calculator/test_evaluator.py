"""
Unit tests for the Calculator evaluator and calculation boundary.

Run (with venv activated):
  python -m unittest tests.calculator.test_evaluator -v
  pytest tests/calculator/ -v
"""
import unittest
from unittest.mock import patch

from minicalc.projects.calculator.core.calculation import (
    build_request,
    calculate,
    format_number,
    parse_operand,
)
from minicalc.projects.calculator.core.constants import (
    DIVISION_BY_ZERO_MESSAGE,
    INVALID_INPUT_MESSAGE,
    INVALID_OPERATOR_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
)
from minicalc.projects.calculator.core.evaluator import (
    DivisionByZeroError,
    InvalidInputError,
    InvalidOperatorError,
    Operator,
    evaluate,
    parse_operator,
)


class TestEvaluate(unittest.TestCase):
    """Arithmetic on valid operands."""

    def test_add(self):
        self.assertEqual(evaluate(7.0, 8.0, "+"), 15.0)

    def test_subtract(self):
        self.assertEqual(evaluate(2.5, 4.0, "-"), -1.5)

    def test_multiply(self):
        self.assertEqual(evaluate(-3.0, 0.5, "*"), -1.5)

    def test_divide(self):
        self.assertEqual(evaluate(1.0, 4.0, "/"), 0.25)

    def test_results_are_exact_doubles(self):
        self.assertEqual(evaluate(0.1, 0.2, "+"), 0.1 + 0.2)
        self.assertEqual(evaluate(1.0, 3.0, "/"), 1.0 / 3.0)

    def test_accepts_operator_enum(self):
        self.assertEqual(evaluate(6.0, 7.0, Operator.Multiply), 42.0)

    def test_tiny_divisor_is_not_zero(self):
        self.assertEqual(evaluate(1.0, 1e-300, "/"), 1.0 / 1e-300)


class TestEvaluateFailures(unittest.TestCase):
    """Classified failures."""

    def test_divide_by_zero(self):
        with self.assertRaises(DivisionByZeroError):
            evaluate(5.0, 0.0, "/")

    def test_divide_by_negative_zero(self):
        with self.assertRaises(DivisionByZeroError):
            evaluate(5.0, -0.0, "/")

    def test_zero_divided_by_zero(self):
        with self.assertRaises(DivisionByZeroError):
            evaluate(0.0, 0.0, "/")

    def test_unknown_operators(self):
        for symbol in ["%", "x", "", "**", "//", None]:
            with self.subTest(symbol=symbol):
                with self.assertRaises(InvalidOperatorError):
                    evaluate(1.0, 2.0, symbol)

    def test_parse_operator(self):
        self.assertIs(parse_operator("/"), Operator.Divide)
        self.assertEqual(Operator.Multiply.glyph, "×")
        self.assertEqual(Operator.Divide.glyph, "÷")


class TestParseOperand(unittest.TestCase):

    def test_valid_numbers(self):
        cases = {
            "7": 7.0,
            "-2.5": -2.5,
            "+3": 3.0,
            "0.": 0.0,
            ".5": 0.5,
            "1e3": 1000.0,
            " 42 ": 42.0,
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(parse_operand(text), expected)

    def test_invalid_numbers(self):
        for text in ["", ".", "abc", "1.2.3", "1_000", "inf", "nan", "1e999", "0x10", None]:
            with self.subTest(text=text):
                with self.assertRaises(InvalidInputError):
                    parse_operand(text)

    def test_build_request_requires_operator(self):
        with self.assertRaises(InvalidInputError):
            build_request("1", "2", "")

    def test_build_request(self):
        req = build_request("1", "2.5", "*")
        self.assertEqual((req.num1, req.num2, req.operator), (1.0, 2.5, "*"))


class TestCalculate(unittest.TestCase):
    """Boundary maps every failure to a fixed message."""

    def test_success(self):
        outcome = calculate("7", "8", "+")
        self.assertFalse(outcome.is_error)
        self.assertEqual(outcome.value, 15.0)
        self.assertEqual(outcome.display, "15")

    def test_division_by_zero_message(self):
        outcome = calculate("5", "0", "/")
        self.assertTrue(outcome.is_error)
        self.assertEqual(outcome.display, DIVISION_BY_ZERO_MESSAGE)

    def test_invalid_operator_message(self):
        outcome = calculate("5", "1", "%")
        self.assertEqual(outcome.error, INVALID_OPERATOR_MESSAGE)

    def test_invalid_input_message(self):
        for num1, num2, op in [("abc", "1", "+"), ("1", "", "+"), ("1", "2", "")]:
            with self.subTest(num1=num1, num2=num2, op=op):
                outcome = calculate(num1, num2, op)
                self.assertEqual(outcome.error, INVALID_INPUT_MESSAGE)

    def test_invalid_input_does_not_evaluate(self):
        with patch("minicalc.projects.calculator.core.calculation.evaluate") as mock_eval:
            calculate("abc", "1", "+")
            mock_eval.assert_not_called()

    def test_unexpected_error_message(self):
        with patch(
            "minicalc.projects.calculator.core.calculation.evaluate",
            side_effect=RuntimeError("boom"),
        ):
            outcome = calculate("1", "2", "+")
        self.assertEqual(outcome.error, UNEXPECTED_ERROR_MESSAGE)
        self.assertNotIn("boom", outcome.display)

    def test_messages_are_distinct(self):
        messages = {
            DIVISION_BY_ZERO_MESSAGE,
            INVALID_OPERATOR_MESSAGE,
            INVALID_INPUT_MESSAGE,
            UNEXPECTED_ERROR_MESSAGE,
        }
        self.assertEqual(len(messages), 4)


class TestFormatNumber(unittest.TestCase):

    def test_integral_values_drop_fraction(self):
        self.assertEqual(format_number(15.0), "15")
        self.assertEqual(format_number(-4.0), "-4")

    def test_fractions(self):
        self.assertEqual(format_number(2.5), "2.5")
        self.assertEqual(format_number(0.1 + 0.2), "0.3")


if __name__ == "__main__":
    unittest.main()
