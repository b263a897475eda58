"""
Constants for the Calculator: keypad keys, display glyphs and user-facing messages.
Single source of truth for form validation, the keypad state machine and the UI.
"""

# --- Keypad keys (the value each button posts) ---
DIGIT_KEYS = ["7", "8", "9", "4", "5", "6", "1", "2", "3", "0", "."]
DECIMAL_POINT = "."
OPERATOR_KEYS = ["/", "*", "-", "+"]
EQUALS_KEY = "="
CLEAR_KEY = "C"

KEYPAD_KEYS = DIGIT_KEYS + OPERATOR_KEYS + [EQUALS_KEY, CLEAR_KEY]

# Operator symbol -> display glyph
OPERATOR_GLYPHS = {
    "+": "+",
    "-": "-",
    "*": "×",
    "/": "÷",
}

# Button rows for the keypad template: (key, label, css class)
KEYPAD_ROWS = [
    [("7", "7", "number"), ("8", "8", "number"), ("9", "9", "number"), ("/", "÷", "operator")],
    [("4", "4", "number"), ("5", "5", "number"), ("6", "6", "number"), ("*", "×", "operator")],
    [("1", "1", "number"), ("2", "2", "number"), ("3", "3", "number"), ("-", "-", "operator")],
    [("0", "0", "number"), (".", ".", "number"), ("C", "C", "clear"), ("+", "+", "operator")],
    [("=", "=", "equals")],
]

# --- User-facing error messages (never include diagnostic detail) ---
DIVISION_BY_ZERO_MESSAGE = "Error: Cannot divide by zero."
INVALID_OPERATOR_MESSAGE = "Error: Invalid operator."
INVALID_INPUT_MESSAGE = "Error: Invalid input."
UNEXPECTED_ERROR_MESSAGE = "Error: An unexpected error occurred."

# Significant digits shown for numeric results
RESULT_SIGNIFICANT_DIGITS = 14
