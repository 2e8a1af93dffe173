"""CLI entry point for currency-input. Uses Click for argument parsing."""

from __future__ import annotations

import dataclasses
import logging
from decimal import Decimal, InvalidOperation

import click

from currency_input.config import FormatConfiguration, load_config, save_config
from currency_input.errors import ConfigurationError
from currency_input.formatter import CurrencyTextInputFormatter

# Key tokens accepted by `type`, mapped to the data a terminal sends
KEY_TOKENS: dict[str, str] = {
    "backspace": "\x7f",
    "delete": "\x1b[3~",
    "left": "\x1b[D",
    "right": "\x1b[C",
    "home": "\x1b[H",
    "end": "\x1b[F",
    "select-all": "\x01",
    "undo": "\x1f",
}


def _decimal(ctx, param, value):
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"{value!r} is not a number")


def _format_options(func):
    """Formatter construction options shared by every command."""
    options = [
        click.option(
            "--config",
            "config_path",
            type=click.Path(dir_okay=False),
            default=None,
            help="JSON settings file; options given here override it",
        ),
        click.option("--locale", default=None, help="Locale such as en_US or de_DE"),
        click.option("--currency", "name", default=None, help="ISO 4217 currency code"),
        click.option("--symbol", default=None, help="Symbol to show instead of the ISO code"),
        click.option("--simple", is_flag=True, help="Use the locale's own currency symbol"),
        click.option("--decimal-digits", type=int, default=None, help="Fractional digits"),
        click.option("--pattern", "custom_pattern", default=None, help="CLDR number pattern"),
        click.option("--no-grouping", "turn_off_grouping", is_flag=True, help="Disable digit grouping"),
        click.option("--no-negative", "disable_negative", is_flag=True, help="Ignore a leading minus"),
        click.option(
            "--direction",
            "input_direction",
            type=click.Choice(["left", "right"]),
            default=None,
            help="Input direction (default right)",
        ),
        click.option("--min", "min_value", callback=_decimal, default=None, help="Minimum value"),
        click.option("--max", "max_value", callback=_decimal, default=None, help="Maximum value"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(config_path=None, disable_negative=False, **options) -> FormatConfiguration:
    overrides = {
        key: value for key, value in options.items() if value is not None and value is not False
    }
    if disable_negative:
        overrides["enable_negative"] = False
    try:
        base = load_config(config_path) if config_path else FormatConfiguration()
        return dataclasses.replace(base, **overrides)
    except ConfigurationError as e:
        raise click.UsageError(str(e))


def _build_formatter(**kwargs) -> CurrencyTextInputFormatter:
    config = _build_config(**kwargs)
    try:
        return CurrencyTextInputFormatter.from_config(config)
    except ConfigurationError as e:
        raise click.UsageError(str(e))


def _show(text: str, cursor: int) -> str:
    return f"{text[:cursor]}|{text[cursor:]}"


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging level",
)
@click.pass_context
def main(ctx, log_level):
    """Format currency amounts the way a text field shows them while typing."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("format")
@click.argument("value")
@_format_options
def format_text(value, **kwargs):
    """Format a number string such as -1234.5."""
    formatter = _build_formatter(**kwargs)
    click.echo(formatter.format_string(value))


@main.command("format-number")
@click.argument("value", callback=_decimal)
@_format_options
def format_number(value, **kwargs):
    """Format a number, rounded to the currency's decimal digits."""
    formatter = _build_formatter(**kwargs)
    click.echo(formatter.format_double(value))


@main.command("type")
@click.argument("keys", nargs=-1, required=True)
@click.option("--initial", default=None, help="Initial value of the field")
@_format_options
def type_keys(keys, initial, **kwargs):
    """Replay keystrokes into a field and print each state.

    KEYS are key names (backspace, delete, left, right, home, end,
    select-all, undo) or literal text, typed one character at a time.
    """
    from currency_input.components.currency_input import CurrencyInput

    field = CurrencyInput(_build_formatter(**kwargs))
    if initial is not None:
        field.set_value(initial)
        click.echo(f"{'initial':>12}  {_show(field.get_value(), field.cursor)}")

    for token in keys:
        presses = [KEY_TOKENS[token]] if token in KEY_TOKENS else list(token)
        for data in presses:
            field.handle_input(data)
        click.echo(f"{token:>12}  {_show(field.get_value(), field.cursor)}")

    click.echo(f"{'value':>12}  {field.get_amount()}")


@main.command("save-config")
@click.argument("path", type=click.Path(dir_okay=False))
@_format_options
def save_config_cmd(path, **kwargs):
    """Write the formatting options to a JSON file for --config."""
    config = _build_config(**kwargs)
    try:
        config.build_number_format()
    except ConfigurationError as e:
        raise click.UsageError(str(e))
    save_config(config, path)
    click.echo(f"Saved {path}")


if __name__ == "__main__":
    main()
