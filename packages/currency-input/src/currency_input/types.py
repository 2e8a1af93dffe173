"""Core type definitions for currency-input."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Literal

InputDirection = Literal["left", "right"]

INPUT_DIRECTIONS: tuple[InputDirection, ...] = ("left", "right")

ChangeSink = Callable[[str], None]


@dataclass(frozen=True)
class TextEditingValue:
    """Text of a field plus its selection.

    ``selection_start == selection_end`` is a caret. ``-1`` for both means the
    host did not report a selection.
    """

    text: str = ""
    selection_start: int = -1
    selection_end: int = -1

    @classmethod
    def collapsed(cls, text: str, offset: int) -> TextEditingValue:
        return cls(text=text, selection_start=offset, selection_end=offset)

    @property
    def cursor(self) -> int:
        return self.selection_end

    @property
    def is_select_all(self) -> bool:
        return self.selection_start == 0 and self.selection_end == len(self.text)


@dataclass
class FormatterState:
    """Last accepted value of a field.

    ``value`` is the unsigned magnitude; the sign lives in ``is_negative``.
    ``text`` is the rendered value, or ``""`` / ``"-"`` once the field has
    been cleared.
    """

    value: Decimal = Decimal(0)
    text: str = ""
    is_negative: bool = False

    @property
    def signed_value(self) -> Decimal:
        if self.is_negative and self.value:
            return self.value.copy_negate()
        return self.value
