"""
Formatting Adapters - Output Formatting

This package contains the display catalog and the text formatting used by
the interactive shell.
"""

from smartfx.adapters.formatting.catalog import SEED_CURRENCIES, CurrencyCatalog
from smartfx.adapters.formatting.formatter import (
    about_text,
    currency_table,
    format_conversion,
    menu_text,
)

__all__ = [
    "CurrencyCatalog",
    "SEED_CURRENCIES",
    "about_text",
    "currency_table",
    "format_conversion",
    "menu_text",
]
