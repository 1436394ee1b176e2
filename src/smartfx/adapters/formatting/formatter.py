"""
Message Formatter - Text Formatting and Presentation

This module handles all text produced by the interactive shell: the menu,
conversion results, the supported-currency table and the about text.
Rounding to a fixed number of decimals happens here and only here.

Files that USE this module:
- smartfx.adapters.cli.shell (uses all formatter functions for display)
- tests.test_formatter (unit tests)

Files that this module USES:
- smartfx.domain.models (Conversion results)
- smartfx.adapters.formatting.catalog (CurrencyCatalog for names and symbols)
- rich (Table for the currency listing)
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional

from rich import box
from rich.table import Table

from smartfx.adapters.formatting.catalog import CurrencyCatalog
from smartfx.domain.models import Conversion

APP_TITLE = "Smart Currency Converter"
MISSING = "-"

MENU_OPTIONS = (
    ("1", "Convert amount"),
    ("2", "List supported currencies"),
    ("3", "Override custom exchange rate"),
    ("4", "Register currency"),
    ("5", "About this tool"),
    ("0", "Exit"),
)


def menu_text() -> str:
    """
    Format the main menu.

    Returns:
        Multi-line menu with a title banner and one line per option
    """
    rule = "=" * 30
    lines = [rule, f"   {APP_TITLE}", rule]
    lines.extend(f"{key}. {label}" for key, label in MENU_OPTIONS)
    return "\n".join(lines)


def _fmt_amount(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def format_conversion(conversion: Conversion, decimals: int = 2) -> str:
    """
    Format a conversion result as a single line.

    Args:
        conversion: Conversion to display
        decimals: Number of decimal places (default: 2)

    Returns:
        Formatted string like '100.00 USD = 92.00 EUR'
    """
    return (
        f"{_fmt_amount(conversion.amount, decimals)} {conversion.source} = "
        f"{_fmt_amount(conversion.result, decimals)} {conversion.target}"
    )


def format_rate(rate: Optional[float], decimals: int = 4) -> str:
    """Format a rate for the currency table; 'n/a' when the provider has no rate."""
    if rate is None:
        return "n/a"
    return f"{rate:.{decimals}f}"


def currency_table(
    catalog: CurrencyCatalog,
    supported_codes: Iterable[str],
    rate_lookup: Callable[[str], Optional[float]],
    base_currency: str,
) -> Table:
    """
    Build the supported-currency table.

    Rows are the union of catalog codes and provider codes, sorted by code.
    Codes registered at runtime have no catalog entry and show '-' for
    name and symbol.

    Args:
        catalog: Display metadata
        supported_codes: Codes the rate provider can triangulate
        rate_lookup: Returns the rate vs base for a code, or None
        base_currency: Base currency code, used in the column header

    Returns:
        rich Table with Code, Name, Symbol and rate columns
    """
    table = Table(title="Supported Currencies", box=box.SIMPLE_HEAD)
    table.add_column("Code", style="bold")
    table.add_column("Name")
    table.add_column("Symbol")
    table.add_column(f"Per 1 {base_currency}", justify="right")

    codes = sorted(set(supported_codes) | catalog.codes())
    for code in codes:
        currency = catalog.get(code)
        table.add_row(
            code,
            currency.name if currency else MISSING,
            currency.symbol if currency else MISSING,
            format_rate(rate_lookup(code)),
        )
    return table


def custom_rate_prompt(source: str, target: str) -> str:
    return f"Custom rate (1 {source} = ? {target}): "


def about_text() -> str:
    """Format the about screen."""
    return "\n".join([
        "--- About ---",
        f"{APP_TITLE}: convert amounts between currencies from an in-memory rate table.",
        " - Rates are quoted against one base currency and cross rates are triangulated",
        " - A custom rate for one ordered pair takes precedence over triangulation",
        " - Built-in rates are approximate example values, not live market data",
    ])
