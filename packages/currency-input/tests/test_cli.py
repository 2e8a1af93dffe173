"""Tests for the currency-input command line."""

from __future__ import annotations

import json

from click.testing import CliRunner

from currency_input.cli import main

USD = ["--locale", "en_US", "--currency", "USD", "--simple"]


def invoke(*args: str):
    return CliRunner().invoke(main, list(args))


def states(output: str) -> list[tuple[str, str]]:
    """Split ``type`` output into (token, field) pairs."""
    return [tuple(line.split()) for line in output.splitlines()]


class TestFormat:
    def test_number_string(self) -> None:
        result = invoke("format", "1234.5", *USD)
        assert result.exit_code == 0
        assert result.output == "$1,234.50\n"

    def test_negative_after_double_dash(self) -> None:
        result = invoke("format", *USD, "--", "-1234.5")
        assert result.exit_code == 0
        assert result.output == "-$1,234.50\n"

    def test_iso_code_without_simple(self) -> None:
        result = invoke("format", "1234.5", "--locale", "en_US", "--currency", "USD")
        assert result.output == "USD1,234.50\n"

    def test_locale_separators(self) -> None:
        result = invoke("format", "1234.5", "--locale", "de_DE", "--currency", "EUR", "--simple")
        assert result.output == "1.234,50\xa0€\n"

    def test_no_grouping(self) -> None:
        result = invoke("format", "1234567", *USD, "--no-grouping")
        assert result.output == "$1234567.00\n"

    def test_custom_pattern(self) -> None:
        result = invoke(
            "format", "1234", "--locale", "en_US", "--currency", "USD",
            "--symbol", "$", "--pattern", "\xa4 #,##0.00",
        )
        assert result.output == "$ 1,234.00\n"


class TestFormatNumber:
    def test_rounds_to_currency_digits(self) -> None:
        result = invoke("format-number", "1234.567", *USD)
        assert result.exit_code == 0
        assert result.output == "$1,234.57\n"

    def test_zero_digit_currency(self) -> None:
        result = invoke("format-number", "1234.6", "--locale", "en_US", "--currency", "JPY", "--simple")
        assert result.output.strip().endswith("1,235")

    def test_not_a_number(self) -> None:
        result = invoke("format-number", "abc", *USD)
        assert result.exit_code == 2


class TestType:
    def test_typing_digits(self) -> None:
        result = invoke("type", "1", "2", "3", "backspace", *USD)
        assert result.exit_code == 0
        assert states(result.output) == [
            ("1", "$0.01|"),
            ("2", "$0.12|"),
            ("3", "$1.23|"),
            ("backspace", "$0.12|"),
            ("value", "0.12"),
        ]

    def test_editing_an_initial_value(self) -> None:
        result = invoke("type", "left", "left", "left", "7", "--initial", "1234.56", *USD)
        assert result.exit_code == 0
        assert states(result.output) == [
            ("initial", "$1,234.56|"),
            ("left", "$1,234.5|6"),
            ("left", "$1,234.|56"),
            ("left", "$1,234|.56"),
            ("7", "$12,347|.56"),
            ("value", "12347.56"),
        ]

    def test_refused_keystroke(self) -> None:
        result = invoke("type", "5", "0", "0", "0", *USD, "--max", "10")
        assert states(result.output)[-2:] == [("0", "$5.00|"), ("value", "5.00")]

    def test_multi_character_token(self) -> None:
        result = invoke("type", "123", *USD)
        assert states(result.output) == [("123", "$1.23|"), ("value", "1.23")]

    def test_keys_required(self) -> None:
        result = invoke("type", *USD)
        assert result.exit_code == 2


class TestConfigurationErrors:
    def test_unknown_locale(self) -> None:
        result = invoke("format", "1", "--locale", "zz_ZZ", "--currency", "USD")
        assert result.exit_code == 2
        assert "Unknown locale" in result.output

    def test_unknown_currency(self) -> None:
        result = invoke("format", "1", "--locale", "en_US", "--currency", "QQQ")
        assert result.exit_code == 2

    def test_min_above_max(self) -> None:
        result = invoke("format", "1", *USD, "--min", "10", "--max", "5")
        assert result.exit_code == 2

    def test_bad_bound(self) -> None:
        result = invoke("format", "1", *USD, "--min", "abc")
        assert result.exit_code == 2


class TestSettingsFile:
    """save-config writes the options; --config reads them back."""

    def test_save_config(self, tmp_path) -> None:
        path = tmp_path / "euro.json"
        result = invoke(
            "save-config", str(path), "--locale", "de_DE", "--currency", "EUR", "--simple",
            "--max", "1000",
        )
        assert result.exit_code == 0
        assert json.loads(path.read_text()) == {
            "locale": "de_DE",
            "name": "EUR",
            "turnOffGrouping": False,
            "simple": True,
            "enableNegative": True,
            "inputDirection": "right",
            "maxValue": "1000",
        }

    def test_format_from_config(self, tmp_path) -> None:
        path = tmp_path / "euro.json"
        path.write_text(json.dumps({"locale": "de_DE", "name": "EUR", "simple": True}))
        result = invoke("format", "1234.5", "--config", str(path))
        assert result.exit_code == 0
        assert result.output == "1.234,50\xa0€\n"

    def test_options_override_config(self, tmp_path) -> None:
        path = tmp_path / "euro.json"
        path.write_text(json.dumps({"locale": "de_DE", "name": "EUR", "simple": True}))
        result = invoke("format", "1234.5", "--config", str(path), "--locale", "en_US", "--currency", "USD")
        assert result.output == "$1,234.50\n"

    def test_config_bounds_apply_to_typing(self, tmp_path) -> None:
        path = tmp_path / "small.json"
        path.write_text(json.dumps({"locale": "en_US", "name": "USD", "simple": True, "maxValue": 1}))
        result = invoke("type", "1", "0", "0", "0", "--config", str(path))
        assert states(result.output)[-1] == ("value", "1.00")

    def test_missing_config(self, tmp_path) -> None:
        result = invoke("format", "1", "--config", str(tmp_path / "absent.json"))
        assert result.exit_code == 2

    def test_save_config_checks_locale(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        result = invoke("save-config", str(path), "--locale", "zz_ZZ", "--currency", "USD")
        assert result.exit_code == 2
        assert not path.exists()


class TestGroup:
    def test_help_without_command(self) -> None:
        result = invoke()
        assert result.exit_code == 0
        assert "format-number" in result.output

    def test_log_level_option(self) -> None:
        result = invoke("--log-level", "debug", "format", "1", *USD)
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "$1.00"
