"""
Calculation boundary between the keypad and the evaluator.
Validates raw request strings, evaluates, and maps every failure to a fixed message.
"""
import logging
import math
import re
from dataclasses import dataclass

from minicalc.projects.calculator.core.constants import (
    DIVISION_BY_ZERO_MESSAGE,
    INVALID_INPUT_MESSAGE,
    INVALID_OPERATOR_MESSAGE,
    RESULT_SIGNIFICANT_DIGITS,
    UNEXPECTED_ERROR_MESSAGE,
)
from minicalc.projects.calculator.core.evaluator import (
    DivisionByZeroError,
    InvalidInputError,
    InvalidOperatorError,
    evaluate,
)

logger = logging.getLogger(__name__)

# Optional sign, digits with at most one point, optional exponent
_NUMERIC_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class CalculationRequest:
    num1: float
    num2: float
    operator: str


@dataclass(frozen=True)
class CalculationOutcome:
    value: float | None = None
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def display(self) -> str:
        if self.error is not None:
            return self.error
        return format_number(self.value)


def parse_operand(text) -> float:
    """Parse a decimal numeric string into a finite float; raise InvalidInputError otherwise."""
    if not isinstance(text, str):
        raise InvalidInputError(f"Operand is not a string: {text!r}")
    s = text.strip()
    if not _NUMERIC_RE.fullmatch(s):
        raise InvalidInputError(f"Operand is not numeric: {text!r}")
    value = float(s)
    if not math.isfinite(value):
        raise InvalidInputError(f"Operand is not finite: {text!r}")
    return value


def build_request(num1, num2, operator) -> CalculationRequest:
    """
    Build a CalculationRequest from raw form values.
    Both operands must be numeric and the operator non-empty.
    """
    if not operator:
        raise InvalidInputError("Operator is empty")
    return CalculationRequest(
        num1=parse_operand(num1),
        num2=parse_operand(num2),
        operator=operator,
    )


def format_number(value: float) -> str:
    """Render a result for the display: 15.0 -> '15', 0.1 + 0.2 -> '0.3'."""
    return f"{value:.{RESULT_SIGNIFICANT_DIGITS}g}"


def calculate(num1, num2, operator) -> CalculationOutcome:
    """
    Validate and evaluate one operation. Never raises.
    Returns a CalculationOutcome holding either the value or a user-facing message.
    """
    try:
        request = build_request(num1, num2, operator)
    except InvalidInputError as e:
        logger.warning(f"Rejected calculation input: {e}")
        return CalculationOutcome(error=INVALID_INPUT_MESSAGE)

    try:
        value = evaluate(request.num1, request.num2, request.operator)
    except DivisionByZeroError:
        logger.info(f"Division by zero: {request.num1} / {request.num2}")
        return CalculationOutcome(error=DIVISION_BY_ZERO_MESSAGE)
    except InvalidOperatorError as e:
        logger.info(f"Invalid operator: {e}")
        return CalculationOutcome(error=INVALID_OPERATOR_MESSAGE)
    except Exception:
        logger.exception(f"Unexpected error evaluating {request}")
        return CalculationOutcome(error=UNEXPECTED_ERROR_MESSAGE)

    logger.info(f"Calculated {request.num1} {request.operator} {request.num2} = {value}")
    return CalculationOutcome(value=value)
