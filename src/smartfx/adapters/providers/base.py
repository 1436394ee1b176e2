"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for all exchange rate providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- smartfx.adapters.providers.static_table (StaticTableProvider implements RateProvider)
- smartfx.application.converter (CurrencyConverter depends on RateProvider)
- tests.test_providers (unit tests)

Files that this module USES:
- smartfx.domain.errors (UnsupportedOperationError)
"""
from abc import ABC, abstractmethod

from smartfx.domain.errors import UnsupportedOperationError


class RateProvider(ABC):
    @abstractmethod
    def get_rate(self, source: str, target: str) -> float:
        """Return the multiplier converting 1 unit of source into target."""
        raise NotImplementedError

    def set_custom_rate(self, source: str, target: str, rate: float) -> None:
        """
        Override the rate for one ordered pair.

        Providers without overrides keep this default and refuse the call.

        Raises:
            UnsupportedOperationError: Always, unless a subclass overrides it
        """
        raise UnsupportedOperationError("set_custom_rate", type(self).__name__)
