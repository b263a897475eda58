"""
Evaluate a single binary arithmetic operation.
Pure functions only: no state, no logging, no retries.
"""
import enum

from minicalc.projects.calculator.core.constants import OPERATOR_GLYPHS


class Operator(enum.Enum):
    Add = "+"
    Subtract = "-"
    Multiply = "*"
    Divide = "/"

    @property
    def glyph(self) -> str:
        return OPERATOR_GLYPHS[self.value]


class CalculationError(Exception):
    """Base class for classified calculation failures."""


class DivisionByZeroError(CalculationError):
    pass


class InvalidOperatorError(CalculationError):
    pass


class InvalidInputError(CalculationError):
    pass


def parse_operator(symbol) -> Operator:
    """Map an operator symbol (or Operator) to the enumeration; raise InvalidOperatorError otherwise."""
    if isinstance(symbol, Operator):
        return symbol
    try:
        return Operator(symbol)
    except ValueError:
        raise InvalidOperatorError(f"Invalid operator provided: {symbol!r}") from None


def evaluate(a: float, b: float, symbol) -> float:
    """
    Apply the operator to two operands.

    Division fails only when the divisor is exactly zero (0.0 and -0.0 both
    compare equal to 0); tiny non-zero divisors are divided normally.

    Raises:
        DivisionByZeroError: Divide with b == 0
        InvalidOperatorError: Symbol outside + - * /
    """
    op = parse_operator(symbol)

    if op is Operator.Add:
        return a + b
    elif op is Operator.Subtract:
        return a - b
    elif op is Operator.Multiply:
        return a * b
    elif op is Operator.Divide:
        if b == 0:
            raise DivisionByZeroError("Cannot divide by zero.")
        return a / b

    raise InvalidOperatorError(f"Unhandled operator: {op!r}")
