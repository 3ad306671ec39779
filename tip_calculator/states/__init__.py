"""
Application states.

The tip calculator has a single screen and a single state.
"""
from .tip_state import TipState

__all__ = [
    "TipState",
]
