import pytest

from currency_input.formatter import CurrencyTextInputFormatter
from currency_input.number_format import NumberFormat


@pytest.fixture
def usd() -> NumberFormat:
    """en_US dollars rendered as ``$1,234.00``."""
    return NumberFormat.simple_currency(locale="en_US", name="USD")


@pytest.fixture
def formatter() -> CurrencyTextInputFormatter:
    return CurrencyTextInputFormatter.simple_currency(locale="en_US", name="USD")


@pytest.fixture
def spaced_formatter() -> CurrencyTextInputFormatter:
    """Dollars with a space after the symbol: ``$ 1,234.00``."""
    return CurrencyTextInputFormatter.currency(
        locale="en_US",
        name="USD",
        symbol="$",
        custom_pattern="\xa4 #,##0.00",
    )


@pytest.fixture
def euro_formatter() -> CurrencyTextInputFormatter:
    """de_DE euros with the symbol after the amount: ``1.234,00 €``."""
    return CurrencyTextInputFormatter.simple_currency(locale="de_DE", name="EUR")
