"""
Converter Service - Business Logic for Currency Conversion

This module contains the conversion use-case. It owns no state of its own:
every call asks the provider for the current rate and multiplies. No
rounding is applied here; rounding for display belongs to the formatter.

Files that USE this module:
- smartfx.app (builds CurrencyConverter around the provider)
- smartfx.adapters.cli.shell (convert menu action)
- tests.test_converter (unit tests)

Files that this module USES:
- smartfx.adapters.providers.base (RateProvider interface)
- smartfx.domain.errors (NegativeAmountError)
- smartfx.domain.models (Conversion result)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

from smartfx.adapters.providers.base import RateProvider  # Rate source interface
from smartfx.domain.errors import NegativeAmountError  # Raised for amounts below zero
from smartfx.domain.models import Conversion  # Result record for presentation


class CurrencyConverter:
    """
    Stateless conversion service on top of a rate provider.
    """
    def __init__(self, provider: RateProvider):
        """
        Initialize converter with a provider.

        Args:
            provider: RateProvider instance (typically a StaticTableProvider)
        """
        self.provider = provider

    def convert(self, source: str, target: str, amount: float) -> float:
        """
        Convert an amount from source into target.

        Args:
            source: Code converted from
            target: Code converted to
            amount: Non-negative amount in the source currency

        Returns:
            amount * rate, unrounded

        Raises:
            NegativeAmountError: If amount is below zero
            UnsupportedCurrencyError: Propagated unchanged from the provider
        """
        return self.quote(source, target, amount).result

    def quote(self, source: str, target: str, amount: float) -> Conversion:
        """
        Convert an amount and keep the rate that was applied.

        Same contract as convert(); returns the full Conversion record.
        """
        if amount < 0:
            raise NegativeAmountError(amount)
        rate = self.provider.get_rate(source, target)
        return Conversion(
            source=source,
            target=target,
            amount=amount,
            rate=rate,
            result=amount * rate,
        )
