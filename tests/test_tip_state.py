from tip_calculator.constants import DEFAULT_LOCALE_ENV, INPUT_MAX_LENGTH, SUPPORTED_LOCALES
from tip_calculator.states.tip_state import _default_locale


def test_default_locale_when_env_missing(clean_locale_env):
    assert _default_locale() == "en_US"


def test_default_locale_uses_env_value(monkeypatch):
    monkeypatch.setenv(DEFAULT_LOCALE_ENV, "de-DE")
    assert _default_locale() == "de_DE"


def test_default_locale_rejects_unsupported_values(monkeypatch):
    monkeypatch.setenv(DEFAULT_LOCALE_ENV, "xx_ZZ")
    assert _default_locale() == "en_US"

    monkeypatch.setenv(DEFAULT_LOCALE_ENV, "   ")
    assert _default_locale() == "en_US"


def test_initial_state_shows_zero_tip(tip_state):
    assert tip_state.amount_input == ""
    assert tip_state.tip_input == ""
    assert tip_state.round_up is False
    assert tip_state.tip_amount == "$0.00"


def test_typing_updates_tip(tip_state):
    tip_state.set_amount_input("50")
    tip_state.set_tip_input("15")
    assert tip_state.tip_amount == "$7.50"

    tip_state.set_round_up(True)
    assert tip_state.tip_amount == "$8.00"


def test_toggle_round_up(tip_state):
    tip_state.toggle_round_up()
    assert tip_state.round_up is True

    tip_state.toggle_round_up()
    assert tip_state.round_up is False


def test_unparseable_input_shows_zero(tip_state):
    tip_state.set_amount_input("fifty")
    tip_state.set_tip_input("15")
    assert tip_state.tip_amount == "$0.00"


def test_too_long_input_keeps_previous_value(tip_state):
    tip_state.set_amount_input("50")
    tip_state.set_amount_input("9" * (INPUT_MAX_LENGTH + 3))
    assert tip_state.amount_input == "50"

    tip_state.set_tip_input("15")
    tip_state.set_tip_input("1" * (INPUT_MAX_LENGTH + 1))
    assert tip_state.tip_input == "15"
    assert tip_state.tip_amount == "$7.50"


def test_input_at_max_length_is_accepted(tip_state):
    text = "1" * INPUT_MAX_LENGTH
    tip_state.set_amount_input(text)
    assert tip_state.amount_input == text


def test_none_input_clears_field(tip_state):
    tip_state.set_amount_input("12")
    tip_state.set_amount_input(None)
    assert tip_state.amount_input == ""


def test_set_locale_changes_format(tip_state):
    tip_state.set_amount_input("50")
    tip_state.set_tip_input("15")

    tip_state.set_locale("de_DE")

    assert tip_state.selected_locale == "de_DE"
    assert tip_state.tip_amount.startswith("7,50")


def test_set_locale_ignores_unsupported(tip_state):
    tip_state.set_locale("xx_ZZ")
    assert tip_state.selected_locale == "en_US"


def test_reset_form_keeps_locale(tip_state):
    tip_state.set_locale("ja_JP")
    tip_state.set_amount_input("50")
    tip_state.set_tip_input("15")
    tip_state.set_round_up(True)

    tip_state.reset_form()

    assert tip_state.amount_input == ""
    assert tip_state.tip_input == ""
    assert tip_state.round_up is False
    assert tip_state.selected_locale == "ja_JP"


def test_available_locales_lists_supported(tip_state):
    options = tip_state.available_locales
    assert [option["code"] for option in options] == [code for code, _ in SUPPORTED_LOCALES]
