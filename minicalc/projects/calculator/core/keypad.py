"""
Keypad input state machine.

The state is an immutable KeypadState record; every keypad event is a pure
function from (state, event) to a new state. Evaluation is delegated to an
injected `evaluate(num1, num2, operator) -> CalculationOutcome` callable,
which defaults to the calculation boundary.
"""
import enum
from dataclasses import asdict, dataclass, fields, replace

from minicalc.projects.calculator.core.calculation import calculate
from minicalc.projects.calculator.core.constants import (
    CLEAR_KEY,
    DECIMAL_POINT,
    DIGIT_KEYS,
    EQUALS_KEY,
    OPERATOR_KEYS,
)
from minicalc.projects.calculator.core.evaluator import Operator


class KeypadPhase(enum.Enum):
    EnteringFirstOperand = "EnteringFirstOperand"
    OperatorSelected = "OperatorSelected"
    EnteringSecondOperand = "EnteringSecondOperand"
    ResultDisplayed = "ResultDisplayed"


@dataclass(frozen=True)
class KeypadState:
    first_operand: str = ""
    buffer: str = ""
    operator: str | None = None
    awaiting_new_input: bool = False
    display: str = ""

    @property
    def phase(self) -> KeypadPhase:
        if self.operator is not None:
            if self.awaiting_new_input:
                return KeypadPhase.OperatorSelected
            return KeypadPhase.EnteringSecondOperand
        if self.awaiting_new_input:
            return KeypadPhase.ResultDisplayed
        return KeypadPhase.EnteringFirstOperand

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> "KeypadState":
        """Rebuild a state from session data; anything malformed yields the initial state."""
        if not isinstance(data, dict):
            return cls()
        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name == "awaiting_new_input":
                if not isinstance(value, bool):
                    return cls()
            elif f.name == "operator":
                if value is not None and value not in OPERATOR_KEYS:
                    return cls()
            elif not isinstance(value, str):
                return cls()
            values[f.name] = value
        return cls(**values)


INITIAL_STATE = KeypadState()


def _error_state(message: str) -> KeypadState:
    # Errors reset everything so the next digit starts a fresh first operand
    return replace(INITIAL_STATE, display=message)


def press_digit(state: KeypadState, key: str) -> KeypadState:
    """Append a digit or decimal point to the active buffer."""
    if key not in DIGIT_KEYS:
        raise ValueError(f"Not a digit key: {key!r}")

    if state.awaiting_new_input:
        buffer = "0." if key == DECIMAL_POINT else key
        return replace(state, buffer=buffer, awaiting_new_input=False, display=buffer)

    if key == DECIMAL_POINT and DECIMAL_POINT in state.buffer:
        return state

    buffer = state.buffer + key
    if buffer == DECIMAL_POINT:
        buffer = "0."
    return replace(state, buffer=buffer, display=buffer)


def press_operator(state: KeypadState, symbol: str, evaluate=calculate) -> KeypadState:
    """
    Record a new pending operator.

    If an operation is already pending with a second operand entered, it is
    evaluated first and its result becomes the first operand. With an empty
    buffer the previous first operand is reused (or "0" when there is none),
    so pressing two operators in a row just replaces the pending one.
    """
    op = Operator(symbol)

    if state.first_operand and state.operator and state.buffer and not state.awaiting_new_input:
        outcome = evaluate(state.first_operand, state.buffer, state.operator)
        if outcome.is_error:
            return _error_state(outcome.display)
        first_operand = outcome.display
    elif state.buffer:
        first_operand = state.buffer
    else:
        first_operand = state.first_operand or "0"

    return KeypadState(
        first_operand=first_operand,
        buffer="",
        operator=op.value,
        awaiting_new_input=True,
        display=f"{first_operand} {op.glyph}",
    )


def press_equals(state: KeypadState, evaluate=calculate) -> KeypadState:
    """Evaluate the pending operation; no-op unless both operands and an operator are present."""
    if not state.first_operand or not state.buffer or state.operator is None:
        return state

    outcome = evaluate(state.first_operand, state.buffer, state.operator)
    return absorb_outcome(state, outcome)


def press_clear(state: KeypadState) -> KeypadState:
    return INITIAL_STATE


def absorb_outcome(state: KeypadState, outcome) -> KeypadState:
    """Show an outcome and make it the reusable operand; errors reset the keypad."""
    if outcome.is_error:
        return _error_state(outcome.display)
    # The result stays in the buffer so the next operator reuses it
    return KeypadState(
        buffer=outcome.display,
        awaiting_new_input=True,
        display=outcome.display,
    )


def apply_key(state: KeypadState, key: str, evaluate=calculate) -> KeypadState:
    """Dispatch a raw keypad key to its transition."""
    if key in DIGIT_KEYS:
        return press_digit(state, key)
    if key in OPERATOR_KEYS:
        return press_operator(state, key, evaluate)
    if key == EQUALS_KEY:
        return press_equals(state, evaluate)
    if key == CLEAR_KEY:
        return press_clear(state)
    raise ValueError(f"Unknown keypad key: {key!r}")
