"""
Reusable components for the tip calculator screen.
"""
from tip_calculator.components.ui import (
    BUTTON_STYLES,
    INPUT_STYLES,
    action_button,
    card,
    form_field,
    labeled_switch,
    number_field,
    select_field,
)

__all__ = [
    "BUTTON_STYLES",
    "INPUT_STYLES",
    "action_button",
    "card",
    "form_field",
    "labeled_switch",
    "number_field",
    "select_field",
]
