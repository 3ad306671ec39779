from decimal import Decimal
from unittest.mock import patch

from tip_calculator.schemas.tip_schemas import TipRequestDTO, TipResultDTO
from tip_calculator.services.tip_service import TipService


def test_calculate_returns_value_and_text():
    request = TipRequestDTO(
        amount=Decimal("50"), tip_percent=Decimal("15"), round_up=False, locale="en_US"
    )

    result = TipService.calculate(request)

    assert isinstance(result, TipResultDTO)
    assert result.tip == Decimal("7.5")
    assert result.formatted == "$7.50"
    assert result.locale == "en_US"
    assert result.currency == "USD"


def test_calculate_rounds_up_to_whole_unit():
    request = TipRequestDTO(
        amount=Decimal("50"), tip_percent=Decimal("15"), round_up=True, locale="en_US"
    )

    result = TipService.calculate(request)

    assert result.tip == Decimal("8")
    assert result.formatted == "$8.00"


def test_calculate_reports_locale_actually_used():
    request = TipRequestDTO(amount=Decimal("10"), tip_percent=Decimal("10"), locale="xx_ZZ")

    result = TipService.calculate(request)

    assert result.locale == "en_US"
    assert result.formatted == "$1.00"


def test_calculate_reports_resolved_currency():
    request = TipRequestDTO(
        amount=Decimal("10"), tip_percent=Decimal("10"), locale="de_DE", currency="zzz"
    )

    result = TipService.calculate(request)

    assert result.currency == "EUR"
    assert "€" in result.formatted


def test_request_defaults_mean_no_tip():
    result = TipService.calculate(TipRequestDTO())

    assert result.tip == 0
    assert result.formatted == "$0.00"


def test_from_inputs_empty_fields_mean_zero():
    result = TipService.calculate_from_inputs("", "", False, "en_US")
    assert result.formatted == "$0.00"


def test_from_inputs_empty_tip_is_not_fifteen_percent():
    result = TipService.calculate_from_inputs("100", "", False, "en_US")
    assert result.formatted == "$0.00"


def test_from_inputs_unparseable_text_is_zero():
    assert TipService.calculate_from_inputs("abc", "15", True, "en_US").formatted == "$0.00"
    assert TipService.calculate_from_inputs("50", "lots", True, "en_US").formatted == "$0.00"


def test_from_inputs_non_finite_text_is_zero():
    result = TipService.calculate_from_inputs("inf", "15", False, "en_US")
    assert result.formatted == "$0.00"


def test_from_inputs_matches_scenarios():
    assert TipService.calculate_from_inputs("50.00", "15.0", False, "en_US").formatted == "$7.50"
    assert TipService.calculate_from_inputs("50.00", "15.0", True, "en_US").formatted == "$8.00"
    assert TipService.calculate_from_inputs("0", "20.0", True, "en_US").formatted == "$0.00"
    assert TipService.calculate_from_inputs("33.33", "18.0", True, "en_US").formatted == "$6.00"


@patch("tip_calculator.services.tip_service.logger")
def test_each_evaluation_is_logged_at_debug(mock_logger):
    TipService.calculate_from_inputs("50", "15", False, "en_US")

    mock_logger.debug.assert_called_once()
    assert "$7.50" in mock_logger.debug.call_args[0]
