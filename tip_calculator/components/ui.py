"""
Reusable UI components for the tip calculator screen.
"""
import reflex as rx
from typing import Callable


BUTTON_STYLES = {
    "primary": "flex items-center justify-center gap-2 px-4 py-2 rounded-md bg-indigo-600 text-white hover:bg-indigo-700 min-h-[44px]",
    "secondary": "flex items-center justify-center gap-2 px-4 py-2 rounded-md border text-gray-700 hover:bg-gray-50 min-h-[44px]",
}

INPUT_STYLES = {
    "default": "w-full p-2 border rounded-md shadow-sm focus:ring-2 focus:ring-indigo-200 focus:border-indigo-400",
    "select": "w-full p-2 border rounded-md bg-white",
}

CARD_STYLE = "bg-white p-6 sm:p-8 rounded-2xl shadow-lg border w-full max-w-md flex flex-col gap-4"

LABEL_STYLE = "text-sm font-medium text-gray-700"


def action_button(
    text: str,
    on_click: Callable,
    variant: str = "primary",
    icon: str | None = None,
) -> rx.Component:
    """
    Creates a styled action button.

    Args:
        text: Button text
        on_click: Click handler
        variant: Style variant key from BUTTON_STYLES
        icon: Optional lucide icon name
    """
    content = []
    if icon:
        content.append(rx.icon(icon, class_name="h-4 w-4"))
    content.append(rx.el.span(text))
    return rx.el.button(
        *content,
        on_click=on_click,
        class_name=BUTTON_STYLES.get(variant, BUTTON_STYLES["primary"]),
    )


def form_field(label: str, input_component: rx.Component) -> rx.Component:
    """Wraps an input with its label."""
    return rx.el.div(
        rx.el.label(label, class_name=LABEL_STYLE),
        input_component,
        class_name="flex flex-col gap-1",
    )


def number_field(
    label: str,
    value: rx.Var | str,
    on_change: Callable,
    placeholder: str = "",
) -> rx.Component:
    """
    Creates a labeled single-line numeric input.

    The raw text is handed to ``on_change`` unparsed; interpreting it
    is left to the state.
    """
    return form_field(
        label,
        rx.el.input(
            type="number",
            step="any",
            input_mode="decimal",
            placeholder=placeholder,
            value=value,
            on_change=on_change,
            class_name=INPUT_STYLES["default"],
        ),
    )


def labeled_switch(
    label: str,
    checked: rx.Var | bool,
    on_change: Callable,
) -> rx.Component:
    """A label on the left and a switch aligned to the right."""
    return rx.el.div(
        rx.el.span(label, class_name="text-sm text-gray-700"),
        rx.switch(checked=checked, on_change=on_change),
        class_name="flex items-center justify-between min-h-[48px]",
    )


def select_field(
    label: str,
    options: rx.Var,
    value: rx.Var | str,
    on_change: Callable,
) -> rx.Component:
    """Labeled select over a list of {code, name} options."""
    return form_field(
        label,
        rx.el.select(
            rx.foreach(
                options,
                lambda option: rx.el.option(option["name"], value=option["code"]),
            ),
            value=value,
            on_change=on_change,
            class_name=INPUT_STYLES["select"],
        ),
    )


def card(*children: rx.Component) -> rx.Component:
    return rx.el.div(*children, class_name=CARD_STYLE)
