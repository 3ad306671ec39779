import os
from typing import List

import reflex as rx

from tip_calculator.constants import (
    DEFAULT_LOCALE_ENV,
    FALLBACK_LOCALE,
    INPUT_MAX_LENGTH,
    SUPPORTED_LOCALES,
)
from tip_calculator.services.tip_service import TipService
from tip_calculator.utils.logger import get_logger
from .types import LocaleOption

logger = get_logger("TipState")

_SUPPORTED_CODES = {code for code, _ in SUPPORTED_LOCALES}


def _default_locale() -> str:
    raw_value = (os.getenv(DEFAULT_LOCALE_ENV) or FALLBACK_LOCALE).strip()
    # Accept "en-US" as well as "en_US".
    candidate = raw_value.replace("-", "_")
    if candidate not in _SUPPORTED_CODES:
        logger.warning(
            "%s=%s is not a supported locale, using %s",
            DEFAULT_LOCALE_ENV,
            raw_value,
            FALLBACK_LOCALE,
        )
        return FALLBACK_LOCALE
    return candidate


def _clean_input(value, previous: str) -> str:
    """Returns the new field text, or ``previous`` when the text is too long."""
    if value is None:
        return ""
    text = str(value)
    if len(text) > INPUT_MAX_LENGTH:
        logger.warning("Ignoring input longer than %s characters", INPUT_MAX_LENGTH)
        return previous
    return text


class TipState(rx.State):
    """Screen state: the raw text of both fields, the round-up flag and the locale."""

    amount_input: str = ""
    tip_input: str = ""
    round_up: bool = False
    selected_locale: str = _default_locale()

    @rx.event
    def set_amount_input(self, value: str):
        self.amount_input = _clean_input(value, self.amount_input)

    @rx.event
    def set_tip_input(self, value: str):
        self.tip_input = _clean_input(value, self.tip_input)

    @rx.event
    def set_round_up(self, value: bool):
        self.round_up = bool(value)

    @rx.event
    def toggle_round_up(self):
        self.round_up = not self.round_up

    @rx.event
    def set_locale(self, value: str):
        code = (value or "").strip().replace("-", "_")
        if code not in _SUPPORTED_CODES:
            logger.warning("Ignoring unsupported locale '%s'", value)
            return
        self.selected_locale = code

    @rx.event
    def reset_form(self):
        self.amount_input = ""
        self.tip_input = ""
        self.round_up = False

    @rx.var(cache=False)
    def tip_amount(self) -> str:
        """Formatted tip, recomputed on every read."""
        result = TipService.calculate_from_inputs(
            self.amount_input,
            self.tip_input,
            self.round_up,
            self.selected_locale,
        )
        return result.formatted

    @rx.var
    def available_locales(self) -> List[LocaleOption]:
        return [{"code": code, "name": name} for code, name in SUPPORTED_LOCALES]
