"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from smartfx.domain.models import (
    Conversion,
    Currency,
    CurrencyPair,
)
from smartfx.domain.errors import (
    InvalidRateError,
    NegativeAmountError,
    SmartFXError,
    UnsupportedCurrencyError,
    UnsupportedOperationError,
)

__all__ = [
    "Currency",
    "CurrencyPair",
    "Conversion",
    "SmartFXError",
    "InvalidRateError",
    "NegativeAmountError",
    "UnsupportedCurrencyError",
    "UnsupportedOperationError",
]
