"""
Provider Adapters - Exchange Rate Sources

This package contains the exchange rate sources.
All providers implement the RateProvider interface.
"""

from smartfx.adapters.providers.base import RateProvider
from smartfx.adapters.providers.static_table import (
    DEFAULT_SEED_BASE,
    DEFAULT_SEED_RATES,
    StaticTableProvider,
)

__all__ = [
    "RateProvider",
    "StaticTableProvider",
    "DEFAULT_SEED_BASE",
    "DEFAULT_SEED_RATES",
]
