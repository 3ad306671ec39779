import reflex as rx

from tip_calculator.components.ui import (
    action_button,
    card,
    labeled_switch,
    number_field,
    select_field,
)
from tip_calculator.states.tip_state import TipState


def _result_line() -> rx.Component:
    return rx.el.p(
        "Tip amount: ",
        rx.el.span(TipState.tip_amount),
        class_name="text-xl font-bold text-gray-900 text-center",
    )


def tip_page() -> rx.Component:
    return rx.el.div(
        card(
            rx.el.h1(
                "Calculate Tip",
                class_name="text-2xl text-gray-800 text-center mb-4",
            ),
            number_field(
                "Bill Amount",
                value=TipState.amount_input,
                on_change=TipState.set_amount_input,
                placeholder="0.00",
            ),
            number_field(
                "How was the service?",
                value=TipState.tip_input,
                on_change=TipState.set_tip_input,
                placeholder="%",
            ),
            labeled_switch(
                "Round up tip?",
                checked=TipState.round_up,
                on_change=TipState.set_round_up,
            ),
            select_field(
                "Currency format",
                options=TipState.available_locales,
                value=TipState.selected_locale,
                on_change=TipState.set_locale,
            ),
            rx.el.div(class_name="h-4"),
            _result_line(),
            action_button(
                "Clear",
                on_click=TipState.reset_form,
                variant="secondary",
                icon="rotate-ccw",
            ),
        ),
        class_name="flex items-center justify-center min-h-screen bg-gray-100 px-4",
    )
