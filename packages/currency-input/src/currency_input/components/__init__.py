"""Terminal UI components."""

from currency_input.components.currency_input import CURSOR_MARKER, CurrencyInput

__all__ = [
    "CURSOR_MARKER",
    "CurrencyInput",
]
