"""currency-input: locale-aware currency formatting for text fields as you type."""

# Configuration
from currency_input.config import (
    FormatConfiguration,
    config_from_dict,
    config_to_dict,
    load_config,
    save_config,
)

# Cursor placement
from currency_input.cursor import calculate_cursor_position, separator_positions

# Errors
from currency_input.errors import ConfigurationError

# Formatter
from currency_input.formatter import CurrencyTextInputFormatter

# Number format engine
from currency_input.number_format import NumberFormat

# Types
from currency_input.types import (
    ChangeSink,
    FormatterState,
    InputDirection,
    TextEditingValue,
)

# Value helpers
from currency_input.values import (
    digits_only,
    parse_str_to_num,
    render,
    violates_bounds,
)

__all__ = [
    # Configuration
    "FormatConfiguration",
    "config_from_dict",
    "config_to_dict",
    "load_config",
    "save_config",
    # Cursor placement
    "calculate_cursor_position",
    "separator_positions",
    # Errors
    "ConfigurationError",
    # Formatter
    "CurrencyTextInputFormatter",
    # Number format engine
    "NumberFormat",
    # Types
    "ChangeSink",
    "FormatterState",
    "InputDirection",
    "TextEditingValue",
    # Value helpers
    "digits_only",
    "parse_str_to_num",
    "render",
    "violates_bounds",
]
