"""
Formatting utilities for currency and numeric input.

Pure functions shared by the tip engine and the screen state. Currency
text is produced by Babel so symbol placement, grouping and the number
of fractional digits follow the requested locale.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal, localcontext

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    format_currency as babel_format_currency,
    get_currency_precision,
    get_territory_currencies,
    is_currency,
)

from tip_calculator.constants import DEFAULT_CURRENCY, FALLBACK_LOCALE
from tip_calculator.utils.logger import get_logger

logger = get_logger("Formatting")

# Plain ASCII decimal literal: no digit separators, no non-ASCII digits
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def parse_non_negative_number_or_zero(text: str | None) -> float:
    """
    Parse numeric text typed by the user, returning 0 when it is not a number.

    Parsing is locale-agnostic: the period is the only decimal separator.
    A successful parse is returned as-is, negative values included.
    Empty, malformed and non-finite input ("nan", "inf", "1e999") yield 0,
    as do digit separators ("1_000") and non-ASCII digits ("１２").

    Args:
        text: Raw text from an input field

    Returns:
        A finite float
    """
    raw = str(text).strip() if text is not None else ""
    if not raw or not NUMBER_PATTERN.fullmatch(raw):
        return 0.0
    try:
        value = float(raw)
    except (ValueError, TypeError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def resolve_locale(identifier: str | Locale | None) -> Locale:
    """
    Resolve a locale identifier such as "en_US" or "en-US" into a Babel Locale.

    Unknown or malformed identifiers fall back to FALLBACK_LOCALE.
    """
    if isinstance(identifier, Locale):
        return identifier
    normalized = (identifier or "").strip().replace("-", "_")
    try:
        return Locale.parse(normalized)
    except (UnknownLocaleError, ValueError, TypeError):
        logger.warning(
            "Locale '%s' unavailable, falling back to %s", identifier, FALLBACK_LOCALE
        )
        return Locale.parse(FALLBACK_LOCALE)


def currency_for_locale(locale: str | Locale | None) -> str:
    """Currency currently in use in the locale's territory."""
    resolved = resolve_locale(locale)
    if not resolved.territory:
        return DEFAULT_CURRENCY
    currencies = get_territory_currencies(resolved.territory)
    if not currencies:
        return DEFAULT_CURRENCY
    return currencies[0]


def resolve_currency(currency: str | None, locale: str | Locale | None) -> str:
    """
    Validate an ISO 4217 code, defaulting to the locale's currency.

    Unknown codes are logged and replaced by the locale's currency.
    """
    code = (currency or "").strip().upper()
    if not code:
        return currency_for_locale(locale)
    if not is_currency(code):
        fallback = currency_for_locale(locale)
        logger.warning("Unknown currency '%s', falling back to %s", currency, fallback)
        return fallback
    return code


def _half_minor_unit(currency: str) -> Decimal:
    return Decimal(5).scaleb(-get_currency_precision(currency) - 1)


def format_currency(
    value: Decimal | float | int,
    locale: str | Locale | None,
    currency: str | None = None,
) -> str:
    """
    Format a value as currency text for the given locale.

    Args:
        value: The numeric value
        locale: Locale identifier or Babel Locale
        currency: ISO 4217 code; defaults to the locale's own currency

    Returns:
        Formatted string like "$7.50" (en_US) or "7,50 €" (de_DE)
    """
    resolved = resolve_locale(locale)
    code = resolve_currency(currency, resolved)
    number = Decimal(str(value))
    if number.is_finite() and abs(number) <= _half_minor_unit(code):
        # Rounds to zero at the currency's precision; drop the sign.
        number = Decimal("0")
    with localcontext() as ctx:
        # Quantizing to minor units needs room for every integer digit.
        ctx.prec = max(ctx.prec, number.adjusted() + 10)
        return babel_format_currency(number, code, locale=resolved)
