import pytest

from tip_calculator.constants import DEFAULT_LOCALE_ENV


@pytest.fixture
def us_locale():
    return "en_US"


@pytest.fixture
def clean_locale_env(monkeypatch):
    monkeypatch.delenv(DEFAULT_LOCALE_ENV, raising=False)
    return monkeypatch


@pytest.fixture
def tip_state(clean_locale_env):
    from tip_calculator.states.tip_state import TipState

    state = TipState()
    state.selected_locale = "en_US"
    return state
