"""
Utility modules for the tip calculator.

Pure functions shared by the service layer and the screen state.
"""
from tip_calculator.utils.formatting import (
    format_currency,
    parse_non_negative_number_or_zero,
    resolve_locale,
    currency_for_locale,
    resolve_currency,
)
from tip_calculator.utils.calculations import (
    calculate_tip_value,
    compute_tip,
)

__all__ = [
    # formatting
    "format_currency",
    "parse_non_negative_number_or_zero",
    "resolve_locale",
    "currency_for_locale",
    "resolve_currency",
    # calculations
    "calculate_tip_value",
    "compute_tip",
]
