"""
Shell Tests - Unit Tests for the Interactive Menu Loop

This module drives ConverterShell with an in-memory input stream and a
rich Console writing to a buffer. It covers each menu action, re-prompting
on bad input, error reporting without leaving the loop, and exit paths.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- smartfx.adapters.cli.shell (ConverterShell to test)
- smartfx.app (build_shell wiring)
- smartfx.adapters.providers.* (providers for the shell)
- rich (Console writing to StringIO)
- pytest (testing framework)
"""
import io

import pytest  # Testing framework for writing and running tests

from rich.console import Console

from smartfx.adapters.cli.shell import ConverterShell
from smartfx.adapters.formatting.catalog import CurrencyCatalog
from smartfx.adapters.providers.base import RateProvider
from smartfx.adapters.providers.static_table import StaticTableProvider
from smartfx.app import build_shell
from smartfx.application.converter import CurrencyConverter
from smartfx.config.settings import Settings


def _lines(*lines: str) -> io.StringIO:
    return io.StringIO("".join(f"{line}\n" for line in lines))


def _make_shell(stream, provider=None, decimals=2):
    provider = provider or StaticTableProvider()
    output = io.StringIO()
    console = Console(file=output, width=100, color_system=None)
    shell = ConverterShell(
        provider=provider,
        converter=CurrencyConverter(provider),
        catalog=CurrencyCatalog(),
        console=console,
        stream=stream,
        decimals=decimals,
    )
    return shell, output


class ReadOnlyProvider(RateProvider):
    def get_rate(self, source, target):
        return 1.0


class TestMenuLoop:
    def test_exit_immediately(self):
        shell, output = _make_shell(_lines("0"))
        shell.run()
        text = output.getvalue()
        assert "Smart Currency Converter" in text
        assert text.rstrip().endswith("Goodbye!")

    def test_end_of_input_exits(self):
        shell, output = _make_shell(io.StringIO(""))
        shell.run()
        assert "Goodbye!" in output.getvalue()

    def test_end_of_input_mid_action_exits(self):
        shell, output = _make_shell(_lines("1", "usd"))
        shell.run()
        assert "Goodbye!" in output.getvalue()

    def test_unknown_choice(self):
        shell, output = _make_shell(_lines("9", "", "0"))
        shell.run()
        assert "Unknown choice. Try again." in output.getvalue()

    def test_non_numeric_choice_reprompts(self):
        shell, output = _make_shell(_lines("abc", "0"))
        shell.run()
        text = output.getvalue()
        assert "Invalid number. Try again." in text
        assert "Goodbye!" in text

    def test_dispatch_return_values(self):
        shell, _ = _make_shell(_lines())
        assert shell.dispatch(0) is False
        assert shell.dispatch(42) is True


class TestConvert:
    def test_convert(self):
        shell, output = _make_shell(_lines("1", "usd", "eur", "100", "", "0"))
        shell.run()
        assert "100.00 USD = 92.00 EUR" in output.getvalue()

    def test_invalid_amount_reprompts(self):
        shell, output = _make_shell(_lines("1", "usd", "eur", "lots", "50", "", "0"))
        shell.run()
        text = output.getvalue()
        assert "Invalid number. Try again." in text
        assert "50.00 USD = 46.00 EUR" in text

    def test_invalid_code_reprompts(self):
        shell, output = _make_shell(_lines("1", "u$d", "usd", "usd", "5", "", "0"))
        shell.run()
        text = output.getvalue()
        assert "Invalid currency code. Try again." in text
        assert "5.00 USD = 5.00 USD" in text

    def test_unsupported_currency_keeps_running(self):
        shell, output = _make_shell(_lines("1", "zzz", "usd", "1", "", "1", "usd", "gbp", "10", "", "0"))
        shell.run()
        text = output.getvalue()
        assert "Error: Unsupported currency code: ZZZ" in text
        assert "10.00 USD = 7.90 GBP" in text

    def test_negative_amount_reported(self):
        shell, output = _make_shell(_lines("1", "usd", "eur", "-1", "", "0"))
        shell.run()
        assert "Error: Amount cannot be negative" in output.getvalue()

    def test_display_decimals(self):
        shell, output = _make_shell(_lines("1", "usd", "eur", "1", "", "0"), decimals=4)
        shell.run()
        assert "1.0000 USD = 0.9200 EUR" in output.getvalue()


class TestListCurrencies:
    def test_lists_catalog_and_registered(self):
        provider = StaticTableProvider()
        provider.register_currency("CHF", 0.88)
        shell, output = _make_shell(_lines("2", "", "0"), provider=provider)
        shell.run()
        text = output.getvalue()
        assert "Supported Currencies" in text
        assert "Indian Rupee" in text
        assert "CHF" in text

    def test_provider_without_table(self):
        shell, output = _make_shell(_lines("2", "", "0"), provider=ReadOnlyProvider())
        shell.run()
        text = output.getvalue()
        assert "Canadian Dollar" in text
        assert "n/a" in text


class TestCustomRate:
    def test_override_then_convert(self):
        provider = StaticTableProvider()
        shell, output = _make_shell(
            _lines("3", "usd", "eur", "0.95", "", "1", "usd", "eur", "100", "", "1", "eur", "usd", "92", "", "0"),
            provider=provider,
        )
        shell.run()
        text = output.getvalue()
        assert "Custom rate (1 USD = ? EUR)" in text
        assert "Custom rate updated." in text
        assert "100.00 USD = 95.00 EUR" in text
        assert "92.00 EUR = 100.00 USD" in text
        assert provider.get_rate("USD", "EUR") == 0.95

    def test_invalid_rate_reported(self):
        provider = StaticTableProvider()
        shell, output = _make_shell(_lines("3", "usd", "eur", "0", "", "0"), provider=provider)
        shell.run()
        assert "Error: Rate must be positive" in output.getvalue()
        assert provider.custom_rates() == {}

    def test_unsupported_by_provider(self):
        shell, output = _make_shell(_lines("3", "usd", "eur", "1.1", "", "0"), provider=ReadOnlyProvider())
        shell.run()
        assert "Error: Operation 'set_custom_rate' is not supported by ReadOnlyProvider" in output.getvalue()


class TestRegisterCurrency:
    def test_register_then_convert(self):
        provider = StaticTableProvider()
        shell, output = _make_shell(
            _lines("4", "chf", "0.88", "", "1", "usd", "chf", "100", "", "0"),
            provider=provider,
        )
        shell.run()
        text = output.getvalue()
        assert "Rate (1 USD = ? CHF)" in text
        assert "Currency CHF registered." in text
        assert "100.00 USD = 88.00 CHF" in text

    def test_register_negative_rate(self):
        provider = StaticTableProvider()
        shell, output = _make_shell(_lines("4", "chf", "-2", "", "0"), provider=provider)
        shell.run()
        assert "Error: Rate for CHF must be positive" in output.getvalue()
        assert "CHF" not in provider.get_supported_codes()

    def test_register_unsupported_by_provider(self):
        shell, output = _make_shell(_lines("4", "", "0"), provider=ReadOnlyProvider())
        shell.run()
        assert "Error: Operation 'register_currency' is not supported" in output.getvalue()


class TestAbout:
    def test_about(self):
        shell, output = _make_shell(_lines("5", "", "0"))
        shell.run()
        assert "--- About ---" in output.getvalue()


class TestBuildShell:
    def test_wires_one_provider(self):
        shell = build_shell(Settings(base_currency="USD", display_decimals=3), stream=_lines())
        assert shell.converter.provider is shell.provider
        assert shell.decimals == 3
        assert shell.provider.base_currency == "USD"

    def test_configured_base(self):
        output = io.StringIO()
        console = Console(file=output, width=100, color_system=None)
        shell = build_shell(
            Settings(base_currency="EUR"),
            console=console,
            stream=_lines("1", "eur", "usd", "92", "", "0"),
        )
        shell.run()
        assert "92.00 EUR = 100.00 USD" in output.getvalue()

    def test_unknown_base(self):
        from smartfx.domain.errors import UnsupportedCurrencyError

        with pytest.raises(UnsupportedCurrencyError):
            build_shell(Settings(base_currency="ZZZ"))
