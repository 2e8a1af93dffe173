"""Construction-time configuration for a currency formatter."""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from currency_input.errors import ConfigurationError
from currency_input.number_format import NumberFormat
from currency_input.types import INPUT_DIRECTIONS, InputDirection


@dataclass(frozen=True)
class FormatConfiguration:
    """Everything needed to build a formatter for one field.

    ``simple`` selects the locale's own currency symbol (``$``) instead of the
    ISO code (``USD``); ``symbol`` and ``custom_pattern`` only apply when it is
    off.
    """

    locale: str | None = None
    name: str | None = None
    symbol: str | None = None
    decimal_digits: int | None = None
    custom_pattern: str | None = None
    turn_off_grouping: bool = False
    simple: bool = False
    enable_negative: bool = True
    input_direction: InputDirection = "right"
    min_value: Decimal | None = None
    max_value: Decimal | None = None

    def __post_init__(self) -> None:
        validate_options(self.input_direction, self.min_value, self.max_value)
        if self.decimal_digits is not None and self.decimal_digits < 0:
            raise ConfigurationError(
                f"decimal_digits must be >= 0, got {self.decimal_digits}"
            )

    def build_number_format(self) -> NumberFormat:
        if self.simple:
            fmt = NumberFormat.simple_currency(
                locale=self.locale,
                name=self.name,
                decimal_digits=self.decimal_digits,
            )
        else:
            fmt = NumberFormat.currency(
                locale=self.locale,
                name=self.name,
                symbol=self.symbol,
                decimal_digits=self.decimal_digits,
                custom_pattern=self.custom_pattern,
            )
        if self.turn_off_grouping:
            fmt.turn_off_grouping()
        return fmt


def validate_options(
    input_direction: str,
    min_value: Any,
    max_value: Any,
) -> None:
    if input_direction not in INPUT_DIRECTIONS:
        raise ConfigurationError(
            f"input_direction must be one of {INPUT_DIRECTIONS}, got {input_direction!r}"
        )
    if min_value is not None and max_value is not None and min_value > max_value:
        raise ConfigurationError(f"min_value {min_value} is greater than max_value {max_value}")


def _to_decimal(value: Any, key: str) -> Decimal | None:
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ConfigurationError(f"{key} is not a number: {value!r}") from e


def config_from_dict(data: dict) -> FormatConfiguration:
    """Deserialize a FormatConfiguration from a JSON-compatible dict."""
    return FormatConfiguration(
        locale=data.get("locale"),
        name=data.get("name"),
        symbol=data.get("symbol"),
        decimal_digits=data.get("decimalDigits"),
        custom_pattern=data.get("customPattern"),
        turn_off_grouping=data.get("turnOffGrouping", False),
        simple=data.get("simple", False),
        enable_negative=data.get("enableNegative", True),
        input_direction=data.get("inputDirection", "right"),
        min_value=_to_decimal(data.get("minValue"), "minValue"),
        max_value=_to_decimal(data.get("maxValue"), "maxValue"),
    )


def config_to_dict(config: FormatConfiguration) -> dict:
    """Serialize a FormatConfiguration to a JSON-compatible dict."""
    data: dict[str, Any] = {
        "turnOffGrouping": config.turn_off_grouping,
        "simple": config.simple,
        "enableNegative": config.enable_negative,
        "inputDirection": config.input_direction,
    }
    optional = {
        "locale": config.locale,
        "name": config.name,
        "symbol": config.symbol,
        "decimalDigits": config.decimal_digits,
        "customPattern": config.custom_pattern,
        "minValue": None if config.min_value is None else str(config.min_value),
        "maxValue": None if config.max_value is None else str(config.max_value),
    }
    data.update({key: value for key, value in optional.items() if value is not None})
    return data


def load_config(path: str | Path) -> FormatConfiguration:
    """Read a FormatConfiguration from a JSON settings file."""
    try:
        data = json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error reading config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config {path} must hold a JSON object")
    return config_from_dict(data)


def save_config(config: FormatConfiguration, path: str | Path) -> None:
    Path(path).write_text(json.dumps(config_to_dict(config), indent=2) + "\n")
