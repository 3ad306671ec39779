"""Tip service.

Single entry point the screen uses to turn raw input into the displayed
tip. Input text is normalized here, the numeric tip comes from the pure
engine in ``tip_calculator.utils.calculations`` and currency text from
Babel through ``tip_calculator.utils.formatting``.

Main classes:
    TipService: static service over TipRequestDTO / TipResultDTO

Usage::

    from tip_calculator.services.tip_service import TipService

    result = TipService.calculate_from_inputs("50", "15", True, "en_US")
    print(result.formatted)  # "$8.00"
"""
from __future__ import annotations

from decimal import Decimal

from tip_calculator.schemas.tip_schemas import TipRequestDTO, TipResultDTO
from tip_calculator.utils.calculations import calculate_tip_value
from tip_calculator.utils.formatting import (
    format_currency,
    parse_non_negative_number_or_zero,
    resolve_currency,
    resolve_locale,
)
from tip_calculator.utils.logger import get_logger

logger = get_logger("TipService")


class TipService:
    """Stateless tip evaluation.

    Every call builds its result from scratch; nothing is cached or
    stored between calls.
    """

    @staticmethod
    def calculate(request: TipRequestDTO) -> TipResultDTO:
        locale = resolve_locale(request.locale)
        currency = resolve_currency(request.currency, locale)
        tip = calculate_tip_value(request.amount, request.tip_percent, request.round_up)
        formatted = format_currency(tip, locale, currency)
        logger.debug(
            "Tip %s%% of %s (round_up=%s) -> %s",
            request.tip_percent,
            request.amount,
            request.round_up,
            formatted,
        )
        return TipResultDTO(
            tip=tip,
            formatted=formatted,
            locale=str(locale),
            currency=currency,
        )

    @staticmethod
    def calculate_from_inputs(
        amount_text: str,
        tip_text: str,
        round_up: bool,
        locale: str,
        currency: str | None = None,
    ) -> TipResultDTO:
        """Normalize the two text fields and evaluate the tip.

        Unparseable text counts as 0; an empty tip field means no tip.
        """
        amount = parse_non_negative_number_or_zero(amount_text)
        tip_percent = parse_non_negative_number_or_zero(tip_text)
        request = TipRequestDTO(
            amount=Decimal(str(amount)),
            tip_percent=Decimal(str(tip_percent)),
            round_up=bool(round_up),
            locale=locale,
            currency=currency,
        )
        return TipService.calculate(request)
