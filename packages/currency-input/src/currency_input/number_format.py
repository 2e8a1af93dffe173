"""Locale-aware currency number format backed by Babel.

``NumberFormat`` is the rendering engine the formatter delegates to. It turns
a non-negative ``Decimal`` into a grouped, currency-symboled string for one
locale and reports the symbol, fractional digits and separators it uses.
"""

from __future__ import annotations

import copy
import logging
from datetime import date
from decimal import Decimal, localcontext

from babel import Locale, UnknownLocaleError, default_locale
from babel.numbers import (
    UnknownCurrencyError,
    get_currency_precision,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
    get_territory_currencies,
    parse_pattern,
    validate_currency,
)

from currency_input.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"
DEFAULT_CURRENCY = "USD"

# CLDR placeholder for the currency sign in number patterns
CURRENCY_SIGN = "\xa4"


def _resolve_locale(identifier: str | None) -> Locale:
    identifier = identifier or default_locale("LC_NUMERIC") or DEFAULT_LOCALE
    try:
        return Locale.parse(identifier)
    except (UnknownLocaleError, ValueError) as e:
        raise ConfigurationError(f"Unknown locale {identifier!r}: {e}") from e


def _default_currency(locale: Locale) -> str:
    if not locale.territory:
        return DEFAULT_CURRENCY
    currencies = get_territory_currencies(locale.territory, start_date=date.today())
    return currencies[0] if currencies else DEFAULT_CURRENCY


class NumberFormat:
    """Currency pattern bound to a locale, a symbol and a digit count.

    Use :meth:`currency` for a format that shows the ISO code (``USD1.00``)
    and :meth:`simple_currency` for one that shows the locale's own symbol
    (``$1.00``).
    """

    def __init__(
        self,
        locale: str | None = None,
        *,
        name: str | None = None,
        symbol: str | None = None,
        decimal_digits: int | None = None,
        pattern: str | None = None,
    ) -> None:
        self.locale = _resolve_locale(locale)
        self.currency_name = (name or _default_currency(self.locale)).upper()
        try:
            validate_currency(self.currency_name)
        except UnknownCurrencyError as e:
            raise ConfigurationError(f"Unknown currency {self.currency_name!r}") from e

        if decimal_digits is None:
            decimal_digits = get_currency_precision(self.currency_name)
        if decimal_digits < 0:
            raise ConfigurationError(f"decimal_digits must be >= 0, got {decimal_digits}")
        self._decimal_digits = decimal_digits

        self.currency_symbol = self.currency_name if symbol is None else symbol

        self.pattern = pattern or self.locale.currency_formats["standard"].pattern
        try:
            self._pattern = copy.copy(parse_pattern(self.pattern))
        except ValueError as e:
            raise ConfigurationError(f"Invalid number pattern {self.pattern!r}") from e
        self._pattern.frac_prec = (decimal_digits, decimal_digits)

        self._grouping = True
        logger.debug(
            "Number format %s %s (%r, %d digits, pattern %r)",
            self.locale,
            self.currency_name,
            self.currency_symbol,
            decimal_digits,
            self.pattern,
        )

    @classmethod
    def currency(
        cls,
        locale: str | None = None,
        name: str | None = None,
        symbol: str | None = None,
        decimal_digits: int | None = None,
        custom_pattern: str | None = None,
    ) -> NumberFormat:
        return cls(
            locale,
            name=name,
            symbol=symbol,
            decimal_digits=decimal_digits,
            pattern=custom_pattern,
        )

    @classmethod
    def simple_currency(
        cls,
        locale: str | None = None,
        name: str | None = None,
        decimal_digits: int | None = None,
    ) -> NumberFormat:
        fmt = cls(locale, name=name, decimal_digits=decimal_digits)
        fmt.currency_symbol = get_currency_symbol(fmt.currency_name, locale=fmt.locale)
        return fmt

    @property
    def decimal_digits(self) -> int | None:
        return self._decimal_digits

    @property
    def grouping_enabled(self) -> bool:
        return self._grouping

    @property
    def group_symbol(self) -> str:
        return get_group_symbol(self.locale)

    @property
    def decimal_symbol(self) -> str:
        return get_decimal_symbol(self.locale)

    def turn_off_grouping(self) -> None:
        self._grouping = False

    def format(self, value: Decimal | int | float) -> str:
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        # Babel rounds through the active decimal context; widen it so long
        # amounts keep every digit.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + self._decimal_digits + 2)
            # Babel leaves the sign placeholder alone when no currency is
            # passed, so the configured symbol can be substituted verbatim.
            text = self._pattern.apply(
                value,
                self.locale,
                currency_digits=False,
                group_separator=self._grouping,
            )
        text = text.replace(CURRENCY_SIGN * 2, self.currency_name)
        return text.replace(CURRENCY_SIGN, self.currency_symbol)

    def __repr__(self) -> str:
        return (
            f"NumberFormat(locale={str(self.locale)!r}, name={self.currency_name!r}, "
            f"symbol={self.currency_symbol!r}, decimal_digits={self._decimal_digits})"
        )
