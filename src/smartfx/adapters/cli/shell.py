"""
Interactive Shell - Menu Loop and User Interaction

This module contains the menu-driven front end. It reads choices, codes and
numbers from a text stream, calls into the converter and the rate provider,
and prints the results. Domain errors are caught per action, reported, and
the loop continues; only Exit, end of input or Ctrl-C stop it.

Files that USE this module:
- smartfx.app (build_shell creates the shell, main runs it)
- tests.test_shell (drives the loop with an in-memory stream)

Files that this module USES:
- smartfx.application.converter (CurrencyConverter for conversions)
- smartfx.adapters.providers.base (RateProvider for custom rates)
- smartfx.adapters.formatting.* (catalog and all formatter functions)
- smartfx.shared.validators (code normalization and number parsing)
- rich (Console for input and output)
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, TextIO

from rich.console import Console

from smartfx.adapters.formatting.catalog import CurrencyCatalog
from smartfx.adapters.formatting.formatter import (
    about_text,
    currency_table,
    custom_rate_prompt,
    format_conversion,
    menu_text,
)
from smartfx.adapters.providers.base import RateProvider
from smartfx.application.converter import CurrencyConverter
from smartfx.domain.errors import SmartFXError, UnsupportedOperationError
from smartfx.shared.validators import normalize_code, parse_number, validate_currency_code

logger = logging.getLogger(__name__)


class ConverterShell:
    """
    Menu loop around a converter and its rate provider.

    Args:
        provider: Rate provider shared with the converter
        converter: Conversion service
        catalog: Display metadata for known currencies
        console: rich Console for output (defaults to stdout)
        stream: Text stream to read input from (defaults to stdin)
        decimals: Decimal places for displayed amounts
    """

    def __init__(
        self,
        provider: RateProvider,
        converter: CurrencyConverter,
        catalog: CurrencyCatalog,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        decimals: int = 2,
    ):
        self.provider = provider
        self.converter = converter
        self.catalog = catalog
        self.console = console or Console()
        self.stream = stream
        self.decimals = decimals
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.handle_convert,
            2: self.handle_list_currencies,
            3: self.handle_custom_rate,
            4: self.handle_register_currency,
            5: self.handle_about,
        }

    # --- loop ---

    def run(self) -> None:
        """Run the menu loop until Exit, end of input or Ctrl-C."""
        running = True
        while running:
            self._say(menu_text())
            try:
                choice = self._read_int("Choose an option: ")
                self.console.print()
                running = self.dispatch(choice)
                if running:
                    self._pause()
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, leaving menu loop")
                running = False
        self.console.print()
        self._say("Goodbye!")

    def dispatch(self, choice: int) -> bool:
        """
        Run the action for a menu choice.

        Returns:
            False if the choice was Exit, True otherwise
        """
        if choice == 0:
            return False
        handler = self._handlers.get(choice)
        if handler is None:
            self._say("Unknown choice. Try again.")
            return True
        try:
            handler()
        except SmartFXError as e:
            logger.warning("Menu action %d failed: %s", choice, e)
            self._say(f"Error: {e}")
        return True

    # --- actions ---

    def handle_convert(self) -> None:
        self._say("--- Convert Amount ---")
        source = self._read_code("From currency code (e.g. USD): ")
        target = self._read_code("To currency code (e.g. INR): ")
        amount = self._read_float("Amount: ")

        conversion = self.converter.quote(source, target, amount)
        self.console.print()
        self._say(format_conversion(conversion, self.decimals))

    def handle_list_currencies(self) -> None:
        supported = getattr(self.provider, "get_supported_codes", frozenset)()
        rate_lookup = getattr(self.provider, "rate_vs_base", lambda code: None)
        base = getattr(self.provider, "base_currency", "base")
        self.console.print(currency_table(self.catalog, supported, rate_lookup, base))

    def handle_custom_rate(self) -> None:
        self._say("--- Custom Exchange Rate ---")
        source = self._read_code("From currency code: ")
        target = self._read_code("To currency code: ")
        rate = self._read_float(custom_rate_prompt(source, target))

        self.provider.set_custom_rate(source, target, rate)
        self._say("Custom rate updated. Future conversions will use this rate.")

    def handle_register_currency(self) -> None:
        register = getattr(self.provider, "register_currency", None)
        if register is None:
            raise UnsupportedOperationError("register_currency", type(self.provider).__name__)

        self._say("--- Register Currency ---")
        base = getattr(self.provider, "base_currency", "base")
        code = self._read_code("Currency code: ")
        rate = self._read_float(f"Rate (1 {base} = ? {code}): ")

        register(code, rate)
        self._say(f"Currency {code} registered.")

    def handle_about(self) -> None:
        self._say(about_text())

    # --- input helpers ---

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def _read_line(self, prompt: str) -> str:
        line = self.console.input(prompt, markup=False, stream=self.stream)
        # readline() returns "" only at end of input
        if self.stream is not None and line == "":
            raise EOFError
        return line.strip()

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._read_line(prompt)
            try:
                return int(raw)
            except ValueError:
                self._say("Invalid number. Try again.")

    def _read_float(self, prompt: str) -> float:
        while True:
            value = parse_number(self._read_line(prompt))
            if value is not None:
                return value
            self._say("Invalid number. Try again.")

    def _read_code(self, prompt: str) -> str:
        while True:
            raw = self._read_line(prompt)
            if validate_currency_code(raw):
                return normalize_code(raw)
            self._say("Invalid currency code. Try again.")

    def _pause(self) -> None:
        self.console.print()
        self._read_line("Press ENTER to continue...")
        self.console.print()
