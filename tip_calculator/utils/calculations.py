"""
Tip calculation utilities.
"""
from decimal import Decimal, ROUND_CEILING

from babel import Locale

from tip_calculator.constants import PERCENT_DIVISOR
from tip_calculator.utils.formatting import format_currency


def _to_decimal(value: Decimal | str | int | float) -> Decimal:
    return Decimal(str(value or 0))


def calculate_tip_value(
    amount: Decimal | float | int,
    tip_percent: Decimal | float | int,
    round_up: bool,
) -> Decimal:
    """
    Calculate the tip as a percentage of the bill, before formatting.

    Values go through ``str`` into Decimal, so 33.33 * 18% is exactly
    5.9994 and an exact integer tip is never nudged past the ceiling.
    With ``round_up`` the tip is raised to the next whole currency unit
    (4.01 -> 5, 5.00 -> 5). Inputs are not validated: negative values
    pass through.
    """
    tip = _to_decimal(amount) * (_to_decimal(tip_percent) / PERCENT_DIVISOR)
    if round_up:
        tip = tip.to_integral_value(rounding=ROUND_CEILING)
    if tip.is_zero():
        # Exact zero only; format_currency drops the sign of sub-minor-unit values
        return Decimal("0")
    return tip


def compute_tip(
    amount: Decimal | float | int,
    tip_percent: Decimal | float | int,
    round_up: bool,
    locale: str | Locale,
    currency: str | None = None,
) -> str:
    """
    Calculate the tip and format it as currency text.

    Args:
        amount: Bill total in the base currency unit
        tip_percent: Tip in percentage points (15 means 15%)
        round_up: Round the tip up to the next whole unit before formatting
        locale: Locale whose currency conventions are used
        currency: Optional ISO 4217 override of the locale's currency

    Returns:
        Formatted tip, e.g. "$7.50" for (50, 15, False, "en_US")
    """
    tip = calculate_tip_value(amount, tip_percent, round_up)
    return format_currency(tip, locale, currency)
