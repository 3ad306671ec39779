from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from tip_calculator.constants import FALLBACK_LOCALE


class BaseSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    def to_dict(self) -> dict:
        return self.model_dump()


class TipRequestDTO(BaseSchema):
    amount: Decimal = Decimal("0")
    tip_percent: Decimal = Decimal("0")
    round_up: bool = False
    locale: str = FALLBACK_LOCALE
    currency: str | None = None


class TipResultDTO(BaseSchema):
    tip: Decimal = Decimal("0")
    formatted: str = ""
    locale: str = FALLBACK_LOCALE
    currency: str = ""
