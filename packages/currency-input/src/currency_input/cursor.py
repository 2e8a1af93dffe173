"""Cursor placement after a reformat.

The formatter sees only the old formatted text and the raw edited text. The
raw cursor offset is therefore translated into the newly formatted string by
compensating for the grouping and decimal separators the number format adds
or drops around the user's digits.
"""

from __future__ import annotations

from decimal import Decimal

from currency_input.number_format import NumberFormat
from currency_input.types import TextEditingValue
from currency_input.values import digits_only, parse_str_to_num


def separator_positions(text: str, separator: str = ",") -> list[int]:
    """Offsets of every *separator* occurrence in *text*."""
    if not separator:
        return []
    return [i for i in range(len(text)) if text.startswith(separator, i)]


def calculate_cursor_position(
    old: TextEditingValue,
    cursor_position: int,
    *,
    new_text: str,
    new_number: Decimal,
    is_negative: bool,
    number_format: NumberFormat,
) -> int:
    """Return the caret offset in *new_text* for an edit of *old*.

    *cursor_position* is where the host put the caret in the raw edited text.
    """
    old_text = old.text

    # Typing into a blank field
    if not old_text:
        return len(new_text)

    # First digit after a lone minus sign
    if old_text == "-" and is_negative:
        return len(new_text)

    old_number = parse_str_to_num(digits_only(old_text), number_format)

    if old.is_select_all:
        return len(new_text)

    # Caret inside the currency symbol: park it just after the symbol
    symbol_length = len(number_format.currency_symbol)
    if cursor_position <= symbol_length:
        if old_number >= new_number:
            offset = symbol_length + 1 if is_negative else symbol_length
        else:
            offset = symbol_length + 2 if is_negative else symbol_length + 1
        return _clamp(offset, new_text)

    group = number_format.group_symbol
    old_groups = separator_positions(old_text, group)
    new_groups = separator_positions(new_text, group)

    new_groups_before = sum(1 for pos in new_groups if pos < cursor_position)
    old_groups_before = sum(1 for pos in old_groups if pos < cursor_position)
    cursor_position += new_groups_before - old_groups_before

    # A separator was just inserted where the caret landed
    if cursor_position in new_groups and len(new_text) > len(old_text):
        cursor_position += 1

    if number_format.decimal_digits is not None:
        decimal_positions = separator_positions(new_text, number_format.decimal_symbol)
        if any(pos <= cursor_position for pos in decimal_positions):
            if new_number > old_number:
                cursor_position -= 1
                if new_number >= 10:
                    cursor_position += 1
            elif new_number < 1:
                cursor_position += 1

    return _clamp(cursor_position, new_text)


def _clamp(offset: int, text: str) -> int:
    return max(0, min(offset, len(text)))
