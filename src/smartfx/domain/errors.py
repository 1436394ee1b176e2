"""
Domain Errors - Rate Resolution and Conversion Exceptions

This module defines the exceptions raised by the rate providers and the
converter. The core never recovers from them; they always reach the caller,
and the interactive shell reports them and keeps running.

Files that USE this module:
- smartfx.adapters.providers.* (raise UnsupportedCurrencyError, InvalidRateError)
- smartfx.application.converter (raises NegativeAmountError)
- smartfx.adapters.cli.shell (catches SmartFXError per menu action)

Files that this module USES:
- None (pure domain layer)
"""
from __future__ import annotations

from typing import Iterable


class SmartFXError(Exception):
    """Base exception for domain errors."""
    pass


class UnsupportedCurrencyError(SmartFXError):
    """Raised when one or both codes of a pair have no known rate."""

    def __init__(self, codes: Iterable[str]):
        self.codes = tuple(codes)
        joined = ", ".join(self.codes)
        super().__init__(f"Unsupported currency code: {joined}")


class InvalidRateError(SmartFXError):
    """Raised when a rate value is invalid (e.g., negative or zero)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class NegativeAmountError(SmartFXError):
    """Raised when a conversion is requested for a negative amount."""

    def __init__(self, amount: float):
        self.amount = amount
        super().__init__(f"Amount cannot be negative: {amount}")


class UnsupportedOperationError(SmartFXError):
    """Raised when a provider variant does not support an operation."""

    def __init__(self, operation: str, provider: str = ""):
        self.operation = operation
        self.provider = provider
        target = f" by {provider}" if provider else ""
        super().__init__(f"Operation '{operation}' is not supported{target}")
