from flask_wtf import FlaskForm
from wtforms import StringField
from wtforms.validators import AnyOf, InputRequired, ValidationError

from minicalc.projects.calculator.core.calculation import parse_operand
from minicalc.projects.calculator.core.constants import KEYPAD_KEYS
from minicalc.projects.calculator.core.evaluator import InvalidInputError


class CalculationForm(FlaskForm):
    """Direct submission of one operation: two operands and an operator symbol"""

    num1 = StringField("First Number", validators=[InputRequired()])
    num2 = StringField("Second Number", validators=[InputRequired()])
    operator = StringField("Operator", validators=[InputRequired()])

    def validate_num1(self, field):
        self._validate_number(field)

    def validate_num2(self, field):
        self._validate_number(field)

    @staticmethod
    def _validate_number(field):
        try:
            parse_operand(field.data)
        except InvalidInputError:
            raise ValidationError("Must be a finite number.")


class KeyPressForm(FlaskForm):
    key = StringField("Key", validators=[InputRequired(), AnyOf(KEYPAD_KEYS)])
