"""Digit parsing, bounds checking and rendering helpers."""

from __future__ import annotations

import re
from decimal import Decimal

from currency_input.number_format import NumberFormat

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_DIGITS_RE = re.compile(r"[0-9]+")

Bound = Decimal | int | float


def digits_only(text: str) -> str:
    """Drop everything except ASCII digits."""
    return _NON_DIGIT_RE.sub("", text)


def last_character_is_digit(text: str) -> bool:
    return bool(text) and "0" <= text[-1] <= "9"


def fraction_digit_count(text: str, point: str = ".") -> int | None:
    """Digits after the last *point* of *text*, or ``None`` without one."""
    if not point or point not in text:
        return None
    return len(digits_only(text.rsplit(point, 1)[1]))


def parse_str_to_num(
    text: str,
    number_format: NumberFormat,
    initial_decimal_digits: int | None = None,
) -> Decimal:
    """Read a digit string as an amount with implied decimal places.

    ``"12345"`` with two decimal digits is ``123.45``. Anything that is not
    a run of ASCII digits reads as zero. The result is exact at any length.
    """
    if not _DIGITS_RE.fullmatch(text):
        text = "0"
    if initial_decimal_digits is None:
        initial_decimal_digits = number_format.decimal_digits or 0
    return Decimal(f"{text}E-{initial_decimal_digits}")


def violates_bounds(
    value: Decimal,
    min_value: Bound | None = None,
    max_value: Bound | None = None,
) -> bool:
    if min_value is not None and value < min_value:
        return True
    if max_value is not None and value > max_value:
        return True
    return False


def render(number_format: NumberFormat, value: Decimal, is_negative: bool) -> str:
    """Format *value* and prefix the sign.

    Surrounding whitespace from the pattern (including no-break spaces) is
    trimmed.
    """
    return ("-" if is_negative else "") + number_format.format(value).strip()
