"""CurrencyTextInputFormatter: reformats a currency field on every edit.

The host field hands over its previous value and the raw edited value; the
formatter answers with the text and caret the field should show. Digits are
entered from the right, so typing ``1``, ``2``, ``3`` into a two-digit format
shows ``$0.01``, ``$0.12``, ``$1.23``.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from currency_input.config import FormatConfiguration, validate_options
from currency_input.cursor import calculate_cursor_position
from currency_input.number_format import NumberFormat
from currency_input.types import ChangeSink, FormatterState, InputDirection, TextEditingValue
from currency_input.values import (
    Bound,
    digits_only,
    fraction_digit_count,
    last_character_is_digit,
    parse_str_to_num,
    render,
    violates_bounds,
)

logger = logging.getLogger(__name__)

# Free-typing mode accepts plain decimal numbers, optionally with an exponent
_LEFT_NUMBER_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")

# Digit strings that mean the user backspaced through a "0.00" placeholder
_CLEARED_DIGITS = ("", "00", "000")


class CurrencyTextInputFormatter:
    """Formats a text field as a currency amount while the user types.

    One instance per field: the last accepted value is kept in ``state`` and
    every call reads and updates it. Calls must not overlap.
    """

    def __init__(
        self,
        number_format: NumberFormat,
        *,
        enable_negative: bool = True,
        input_direction: InputDirection = "right",
        min_value: Bound | None = None,
        max_value: Bound | None = None,
        on_change: ChangeSink | None = None,
    ) -> None:
        validate_options(input_direction, min_value, max_value)
        self._format = number_format
        self.enable_negative = enable_negative
        self.input_direction: InputDirection = input_direction
        self.min_value = min_value
        self.max_value = max_value
        self.on_change = on_change
        self.state = FormatterState()

    @classmethod
    def currency(
        cls,
        locale: str | None = None,
        name: str | None = None,
        symbol: str | None = None,
        decimal_digits: int | None = None,
        custom_pattern: str | None = None,
        turn_off_grouping: bool = False,
        enable_negative: bool = True,
        input_direction: InputDirection = "right",
        min_value: Bound | None = None,
        max_value: Bound | None = None,
        on_change: ChangeSink | None = None,
    ) -> CurrencyTextInputFormatter:
        fmt = NumberFormat.currency(
            locale=locale,
            name=name,
            symbol=symbol,
            decimal_digits=decimal_digits,
            custom_pattern=custom_pattern,
        )
        if turn_off_grouping:
            fmt.turn_off_grouping()
        return cls(
            fmt,
            enable_negative=enable_negative,
            input_direction=input_direction,
            min_value=min_value,
            max_value=max_value,
            on_change=on_change,
        )

    @classmethod
    def simple_currency(
        cls,
        locale: str | None = None,
        name: str | None = None,
        decimal_digits: int | None = None,
        turn_off_grouping: bool = False,
        enable_negative: bool = True,
        input_direction: InputDirection = "right",
        min_value: Bound | None = None,
        max_value: Bound | None = None,
        on_change: ChangeSink | None = None,
    ) -> CurrencyTextInputFormatter:
        fmt = NumberFormat.simple_currency(
            locale=locale,
            name=name,
            decimal_digits=decimal_digits,
        )
        if turn_off_grouping:
            fmt.turn_off_grouping()
        return cls(
            fmt,
            enable_negative=enable_negative,
            input_direction=input_direction,
            min_value=min_value,
            max_value=max_value,
            on_change=on_change,
        )

    @classmethod
    def from_config(
        cls,
        config: FormatConfiguration,
        on_change: ChangeSink | None = None,
    ) -> CurrencyTextInputFormatter:
        return cls(
            config.build_number_format(),
            enable_negative=config.enable_negative,
            input_direction=config.input_direction,
            min_value=config.min_value,
            max_value=config.max_value,
            on_change=on_change,
        )

    @property
    def number_format(self) -> NumberFormat:
        return self._format

    # ------------------------------------------------------------------
    # Edit reconciliation
    # ------------------------------------------------------------------

    def format_edit_update(
        self,
        old_value: TextEditingValue,
        new_value: TextEditingValue,
    ) -> TextEditingValue:
        """Return what the field should show after *old_value* became *new_value*.

        A rejected edit returns *old_value* itself and leaves ``state`` alone.
        """
        if self.input_direction == "left":
            return self._format_left(old_value, new_value)

        old_text = old_value.text
        is_removed_character = (
            len(old_text) - 1 == len(new_value.text) and old_text.startswith(new_value.text)
        )
        is_negative = self.enable_negative and new_value.text.startswith("-")

        new_digits = digits_only(new_value.text)

        # Backspace ate a trailing symbol or space (e.g. "1,00 €"), so take
        # the digit before it instead.
        if is_removed_character and not last_character_is_digit(old_text):
            new_digits = new_digits[:-1]

        # Bounds are checked against the format's own decimal digits
        value = parse_str_to_num(new_digits, self._format)
        if violates_bounds(value, self.min_value, self.max_value):
            logger.debug(
                "Rejected %r: %s outside [%s, %s]",
                new_value.text,
                value,
                self.min_value,
                self.max_value,
            )
            return old_value

        if new_digits in _CLEARED_DIGITS:
            cleared = "-" if is_negative else ""
            self.state = FormatterState(Decimal(0), cleared, is_negative)
            return TextEditingValue.collapsed(cleared, len(cleared))

        # A whole-field replacement may carry its own decimal places
        if not old_text or old_value.is_select_all:
            initial_decimal_digits = fraction_digit_count(new_value.text)
            if initial_decimal_digits is not None:
                value = parse_str_to_num(new_digits, self._format, initial_decimal_digits)

        new_text = render(self._format, value, is_negative)
        self.state = FormatterState(value, new_text, is_negative)

        if self.on_change is not None:
            self.on_change(new_text)

        raw_cursor = new_value.selection_end
        if raw_cursor < 0:
            raw_cursor = len(new_value.text)
        cursor = calculate_cursor_position(
            old_value,
            raw_cursor,
            new_text=new_text,
            new_number=value,
            is_negative=is_negative,
            number_format=self._format,
        )
        return TextEditingValue.collapsed(new_text, cursor)

    apply = format_edit_update

    def _format_left(
        self,
        old_value: TextEditingValue,
        new_value: TextEditingValue,
    ) -> TextEditingValue:
        text = new_value.text
        parts = text.split(".")
        if len(parts) > 2:
            return old_value

        max_fraction = self._format.decimal_digits
        if max_fraction is None:
            max_fraction = 2
        if len(parts) == 2 and len(parts[1]) > max_fraction:
            logger.debug("Rejected %r: more than %d decimal digits", text, max_fraction)
            return old_value

        if not _LEFT_NUMBER_RE.match(text):
            return old_value
        value = Decimal(text.strip())
        if value < 0 and not self.enable_negative:
            return old_value
        if violates_bounds(value, self.min_value, self.max_value):
            logger.debug("Rejected %r: outside [%s, %s]", text, self.min_value, self.max_value)
            return old_value

        self.state = FormatterState(abs(value), text, value < 0)
        return new_value

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def format_string(self, value: str) -> str:
        """Format a plain number string such as ``"-1234.5"``.

        Use it for a field's initial value. Text already formatted by this
        formatter (``"1.234,56 €"`` in de_DE) reads back to the same amount.
        """
        is_negative = self.enable_negative and value.startswith("-")
        point = self._format.decimal_symbol
        if point not in value:
            point = "."
        initial_decimal_digits = fraction_digit_count(value, point) or 0
        return self._seed(digits_only(value), is_negative, initial_decimal_digits)

    def format_double(self, value: float | Decimal | int) -> str:
        """Format a number, rounded to the format's decimal digits."""
        is_negative = self.enable_negative and value < 0
        fixed = format(value, f".{self._format.decimal_digits or 0}f")
        return self._seed(digits_only(fixed), is_negative, None)

    def _seed(
        self,
        digits: str,
        is_negative: bool,
        initial_decimal_digits: int | None,
    ) -> str:
        value = parse_str_to_num(digits, self._format, initial_decimal_digits)
        self.state = FormatterState(value, render(self._format, value, is_negative), is_negative)
        return self.state.text

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_formatted_value(self) -> str:
        """Formatted text, such as ``$2,000.00``."""
        return self.state.text

    def get_unformatted_value(self) -> Decimal:
        """Signed amount without formatting, such as ``2000.00``."""
        return self.state.signed_value

    def get_double(self) -> float:
        return float(self.get_unformatted_value())
