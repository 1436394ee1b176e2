"""
Domain Models - Pure Business Objects

This module contains the value objects shared by the core and the
presentation layer:
- Currency metadata records (display only)
- Ordered currency pairs used as override keys
- Conversion results handed to the formatter

Files that USE this module:
- smartfx.adapters.providers.static_table (CurrencyPair keys for overrides)
- smartfx.application.converter (Conversion results)
- smartfx.adapters.cli.* (Currency catalog, Conversion display)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes


@dataclass(frozen=True)
class Currency:
    """
    Descriptive currency record, used only for presentation.

    Attributes:
        code: Uppercase currency code (e.g. "USD")
        name: Human readable name (e.g. "US Dollar")
        symbol: Display symbol (e.g. "$")
    """
    code: str
    name: str
    symbol: str


@dataclass(frozen=True)
class CurrencyPair:
    """Ordered (from, to) pair. CurrencyPair("USD", "EUR") != CurrencyPair("EUR", "USD")."""
    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source}->{self.target}"


@dataclass(frozen=True)
class Conversion:
    """
    Result of converting an amount between two currencies.

    Attributes:
        source: Code converted from
        target: Code converted to
        amount: Amount in the source currency
        rate: Multiplier applied (units of target per 1 unit of source)
        result: Amount in the target currency, unrounded
    """
    source: str
    target: str
    amount: float
    rate: float
    result: float
