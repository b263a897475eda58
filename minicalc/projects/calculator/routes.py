"""
Calculator - keypad page backed by a per-session input state machine.
The keypad posts one key per request; the arithmetic runs in core.calculation.
"""

import logging

from flask import Blueprint, abort, jsonify, redirect, render_template, request, session, url_for

from minicalc import csrf
from minicalc.projects.calculator.core.calculation import CalculationOutcome, calculate
from minicalc.projects.calculator.core.constants import INVALID_INPUT_MESSAGE, KEYPAD_ROWS
from minicalc.projects.calculator.core.keypad import KeypadState, absorb_outcome, apply_key
from minicalc.projects.calculator.forms import CalculationForm, KeyPressForm
from minicalc.utils.logging import log_project_visit

logger = logging.getLogger(__name__)

calculator_bp = Blueprint('calculator', __name__,
                         template_folder='templates',
                         static_folder='static',
                         static_url_path='/projects/calculator/static')

SESSION_KEY = 'calculator_keypad'


def load_keypad() -> KeypadState:
    """Keypad state for the current browser session."""
    return KeypadState.from_dict(session.get(SESSION_KEY))


def save_keypad(state: KeypadState):
    session[SESSION_KEY] = state.to_dict()


def _render(state):
    return render_template(
        'calculator.html',
        display=state.display,
        key_form=KeyPressForm(),
        keypad_rows=KEYPAD_ROWS,
    )


@calculator_bp.route('/', methods=['GET'])
def index():
    """Display the calculator keypad with the session's current display"""
    log_project_visit('calculator', 'Calculator')
    return _render(load_keypad())


@calculator_bp.route('/', methods=['POST'])
def submit_calculation():
    """Evaluate num1/num2/operator and render the outcome in the display"""
    form = CalculationForm()
    if form.validate_on_submit():
        outcome = calculate(form.num1.data, form.num2.data, form.operator.data)
    else:
        logger.warning(f"Invalid calculation form: {form.errors}")
        outcome = CalculationOutcome(error=INVALID_INPUT_MESSAGE)

    state = absorb_outcome(load_keypad(), outcome)
    save_keypad(state)
    return _render(state)


@calculator_bp.route('/key', methods=['POST'])
def press_key():
    """Apply a single keypad event to the session state"""
    form = KeyPressForm()
    if not form.validate_on_submit():
        logger.warning(f"Rejected keypad event: {form.errors}")
        abort(400)

    state = apply_key(load_keypad(), form.key.data)
    save_keypad(state)
    return redirect(url_for('calculator.index'))


@calculator_bp.route('/api/calculate', methods=['POST'])
@csrf.exempt
def api_calculate():
    """
    Evaluate one operation for API clients.

    Expected JSON payload:
        {"num1": "7", "num2": "8", "operator": "+"}

    Returns:
        {"result": "15", "error": null} or {"result": null, "error": "<message>"}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400

    outcome = calculate(
        _as_text(data.get("num1")),
        _as_text(data.get("num2")),
        _as_text(data.get("operator")),
    )
    return jsonify({
        "result": None if outcome.is_error else outcome.display,
        "error": outcome.error,
    })


def _as_text(value):
    # JSON numbers are accepted alongside numeric strings
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float)):
        return repr(value)
    return value if isinstance(value, str) else ""
